"""Unit tests for the CLI logger-level parser."""

import logging
import types

import click
import pytest

from cyrustest.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)


def make_ctx():
    """Minimal stand-in for the unused Click context."""
    return types.SimpleNamespace()


@pytest.mark.parametrize("value", [(), None, ""])
def test_empty_uses_defaults(value):
    """No levels given yields the default library levels."""
    assert parse_log_level(make_ctx(), None, value) == DEFAULT_LIB_LEVELS


def test_later_items_override_earlier():
    """Repeated flags for one logger: the last wins."""
    out = parse_log_level(make_ctx(), None, ("cyrustest=INFO", "cyrustest=ERROR"))
    assert out["cyrustest"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces():
    """A plain string with commas and spaces parses like repeated flags."""
    out = parse_log_level(make_ctx(), None, "urllib3=INFO,  asyncio=debug cyrustest=warning")
    assert out == {
        "urllib3": logging.INFO,
        "asyncio": logging.DEBUG,
        "cyrustest": logging.WARNING,
    }


@pytest.mark.parametrize("item", ["not-a-pair", "=INFO", "x=LOUD"])
def test_invalid_items_raise(item):
    """Malformed pairs and unknown levels raise click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_log_level(make_ctx(), None, (item,))
