"""Tests for the public API."""

from __future__ import annotations

from typer.testing import CliRunner

from udpctl import __version__
from udpctl.cli.app import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"udpctl version {__version__}" in result.stdout


def test_version_short():
    result = runner.invoke(app, ["-v"])
    assert result.exit_code == 0
    assert f"udpctl version {__version__}" in result.stdout
