"""wincfg - Declarative Windows configuration applier.

Adds or removes winget packages, AppX packages, capabilities, optional
features and registry values from lists of named items.
"""

__version__ = "0.1.0"
