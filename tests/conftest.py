"""Shared fixtures for tagdown tests."""

import pytest

from tagdown.config import reset_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run every test against default settings, ignoring the user's config."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in (
        "TAGDOWN_ELLIPSIS",
        "TAGDOWN_DEFAULT_NAME",
        "TAGDOWN_PATH_SEPARATOR",
        "TAGDOWN_TRUTHY_TOKENS",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
