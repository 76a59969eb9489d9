"""
Pytest configuration and shared fixtures.
"""

import sys
import argparse
from pathlib import Path
import pytest

# Add the tool directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))


# ============================================================================
# Option Fixtures
# ============================================================================


@pytest.fixture
def make_args():
    """Build an option namespace like the one build_parser() produces."""
    def _make(**overrides):
        values = {
            "number": False,
            "number_nonblank": False,
            "show_ends": False,
            "squeeze_blank": False,
            "show_tabs": False,
            "max_lines": None,
            "files": [],
        }
        values.update(overrides)
        return argparse.Namespace(**values)
    return _make


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def sample_file(tmp_path):
    """A small text file with a tab, a blank run and a final line."""
    path = tmp_path / "sample.txt"
    path.write_text("a\n\tb\n\n\nc\n")
    return path


@pytest.fixture
def second_file(tmp_path):
    """Another file, used to check per-file numbering."""
    path = tmp_path / "second.txt"
    path.write_text("one\ntwo\n")
    return path


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    return path
