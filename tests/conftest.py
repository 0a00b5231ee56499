"""
Module: conftest.py

Shared pytest configuration and fixtures for the RunMenu test suite.
"""

import os
import stat
import sys

# Make the src/ layout importable without an install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest

from runmenu.core.catalog import CatalogEntry


def _make_file(directory, name, mode):
    path = directory / name
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    os.chmod(path, mode)
    return path


@pytest.fixture
def make_file():
    """Create a file with the given permission bits inside a directory."""
    return _make_file


@pytest.fixture
def exec_mode():
    return stat.S_IRUSR | stat.S_IWUSR | stat.S_IXUSR


@pytest.fixture
def catalog():
    """Small alphabetical catalog as the loader would return it."""
    return [CatalogEntry(n, "/usr/bin") for n in ("bash", "cat", "vim")]


class FakeSpawn:
    """Records commands instead of starting processes."""

    def __init__(self, error=None):
        self.commands = []
        self.error = error

    def __call__(self, command):
        self.commands.append(command)
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_spawn():
    return FakeSpawn()


@pytest.fixture
def failing_spawn():
    from runmenu.core.launch import LaunchError
    return FakeSpawn(error=LaunchError("cannot run 'nope': No such file or directory"))
