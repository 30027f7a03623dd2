"""Tests for the seed-tours entry point exit codes."""

import pytest

from traverse_content.seed import __main__ as seed_cli


def test_exit_zero_on_success(monkeypatch):
    """Test that a completed (or skipped) run exits 0."""

    async def fake_main():
        return None

    monkeypatch.setattr(seed_cli, "main", fake_main)

    with pytest.raises(SystemExit) as exc_info:
        seed_cli.run()

    assert exc_info.value.code == 0


def test_exit_one_on_failure(monkeypatch):
    """Test that an uncaught import error exits 1."""

    async def failing_main():
        raise FileNotFoundError("beautiful-picture.jpg")

    monkeypatch.setattr(seed_cli, "main", failing_main)

    with pytest.raises(SystemExit) as exc_info:
        seed_cli.run()

    assert exc_info.value.code == 1
