"""Core engine, configuration and run log for wincfg."""
