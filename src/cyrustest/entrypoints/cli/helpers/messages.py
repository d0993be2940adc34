"""Terminal message helpers for the CYRUSTEST CLI.

Status lines carry a glyph with an ASCII fallback for terminals that cannot
encode emoji. They go to stderr so stdout carries only the test report.
"""

import click

# (emoji, ASCII fallback, color)
WARN = ("⚠️", "[!]", "yellow")  # pragma: no mutate
SUCCESS = ("✅", "[OK]", "green")  # pragma: no mutate
ERROR = ("❌", "[X]", "red")  # pragma: no mutate


def glyph(emoji: str, fallback: str) -> str:
    """Return ``emoji`` if stderr can encode it, else ``fallback``.

    Args:
        emoji: Preferred marker, e.g. "✅".
        fallback: ASCII marker used when encoding fails, e.g. "[OK]".
    """
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return emoji


def _emit(style: tuple[str, str, str], msg: str) -> None:
    emoji, fallback, color = style
    click.secho(f"{glyph(emoji, fallback)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow warning line on stderr, e.g. ``⚠️  No tests were registered.``"""
    _emit(WARN, msg)


def success(msg: str) -> None:
    """Emit a green success line on stderr, e.g. ``✅  All tests passed.``"""
    _emit(SUCCESS, msg)


def error(msg: str) -> None:
    """Emit a red error line on stderr.

    Example:
        ``❌  Cannot load 'tests/test_math.py': no such file``
    """
    _emit(ERROR, msg)
