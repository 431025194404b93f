"""Shared test fixtures for toolversions tests."""

from __future__ import annotations

import pathlib
import subprocess

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    """Keep user and project settings files out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def fake_run():
    """Factory for a ``subprocess.run`` stand-in driven by a command table.

    Maps the executable name to ``(returncode, output)``; names missing
    from the table raise ``FileNotFoundError`` like a real missing binary.
    """

    def _create(table: dict[str, tuple[int, str]]):
        calls: list[list[str]] = []

        def _run(argv, **kwargs):
            calls.append(list(argv))
            if argv[0] not in table:
                raise FileNotFoundError(2, "No such file or directory", argv[0])
            returncode, output = table[argv[0]]
            return subprocess.CompletedProcess(argv, returncode, stdout=output)

        _run.calls = calls
        return _run

    return _create
