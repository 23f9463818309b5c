"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console
from wincfg.core.logger import RunLogger
from wincfg.core.theme import get_theme


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Run log file inside the test directory."""
    return tmp_path / "logs" / "wincfg.log"


@pytest.fixture
def run_log(log_path: Path) -> RunLogger:
    """RunLogger echoing into in-memory consoles."""
    return RunLogger(
        log_path,
        echo=True,
        out=Console(file=io.StringIO(), width=200, theme=get_theme()),
        err=Console(file=io.StringIO(), width=200, theme=get_theme()),
    )


@pytest.fixture
def winget_list(tmp_path: Path) -> Path:
    """Item file with winget identifiers, a comment and blank lines."""
    path = tmp_path / "winget.txt"
    path.write_text("# editors\nGit.Git\n\n  Microsoft.VisualStudioCode  \nMozilla.Firefox\n")
    return path


@pytest.fixture
def registry_csv(tmp_path: Path) -> Path:
    """Registry CSV with one valid and one invalid row."""
    path = tmp_path / "registry.csv"
    path.write_text('"HKLM:\\SOFTWARE\\X","Val","DWord","1"\n"HKLM:\\SOFTWARE\\Y","Bad","NotAType","x"\n')
    return path


@pytest.fixture
def appx_listing() -> str:
    """Sample Get-AppxPackage PackageFullName output."""
    return """Microsoft.BingNews_4.55.62231.0_x64__8wekyb3d8bbwe
Microsoft.BingWeather_4.53.52331.0_x64__8wekyb3d8bbwe
Microsoft.WindowsCalculator_11.2311.0.0_x64__8wekyb3d8bbwe
Microsoft.WindowsCalculator_11.2311.0.0_neutral_~_8wekyb3d8bbwe
"""
