"""Unit tests for configuration helpers."""

import pytest

from cyrustest import config


def test_get_targets_splits_on_commas_and_spaces(monkeypatch):
    """Targets are read from CYRUSTEST_TARGETS as a comma/space list."""
    monkeypatch.setenv(config.TARGETS_ENV_VAR, "tests/, pkg.test_a  other.py")
    assert config.get_targets() == ["tests/", "pkg.test_a", "other.py"]


@pytest.mark.parametrize("value", [None, "", "   "])
def test_get_targets_requires_value(monkeypatch, value):
    """An unset or blank variable raises TargetsNotSetError."""
    if value is None:
        monkeypatch.delenv(config.TARGETS_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(config.TARGETS_ENV_VAR, value)
    with pytest.raises(config.TargetsNotSetError, match="CYRUSTEST_TARGETS"):
        config.get_targets()


def test_default_log_path(monkeypatch, tmp_path):
    """The flight recorder defaults to latest.log in the user log dir."""
    monkeypatch.setattr(config, "user_log_dir", lambda *a, **k: str(tmp_path))
    assert config.default_log_path() == tmp_path / "latest.log"


def test_exit_codes():
    """Exit codes are distinct."""
    assert len({config.EXIT_SUCCESS, config.EXIT_FAILURE, config.EXIT_USAGE}) == 3
