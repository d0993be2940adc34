"""Recover the source text of call arguments from the calling frame.

Diagnostics quote the expressions a test wrote, e.g. ``5 - 3`` rather than
``2``. Python evaluates arguments before the call, so the text is recovered
from the caller's source: the position of the executing call instruction
is sliced out of the file, parsed with :mod:`ast`, and the argument
segments are returned.
"""

from __future__ import annotations

import ast
import inspect
import linecache
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import FrameType


@dataclass(frozen=True, slots=True)
class CallSite:
    """Where an assertion was called and what its arguments looked like.

    Attributes:
        filename: File name of the calling code.
        lineno: Line number of the call.
        arg_texts: Source text of each positional argument, or an empty
            tuple when the source could not be recovered.
    """

    filename: str
    lineno: int
    arg_texts: tuple[str, ...] = ()

    def text(self, index: int, fallback: str) -> str:
        """Return the source text of argument ``index`` or ``fallback``."""
        if index < len(self.arg_texts):
            return self.arg_texts[index]
        return fallback


def caller_site(stacklevel: int = 1, arguments: bool = True) -> CallSite:
    """Describe the call ``stacklevel`` frames above the caller of this function.

    Args:
        stacklevel: 1 describes the call that invoked the function calling
            ``caller_site``; each additional level walks one frame further out.
        arguments: When False, skip recovering the argument texts.

    Returns:
        CallSite: File, line and argument texts of that call.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel + 1):
            if frame is None or frame.f_back is None:
                break
            frame = frame.f_back
        if frame is None:  # pragma: no cover - only without frame support
            return CallSite("<unknown>", 0)
        return CallSite(
            filename=frame.f_code.co_filename,
            lineno=frame.f_lineno,
            arg_texts=_argument_texts(frame) if arguments else (),
        )
    finally:
        del frame


def _argument_texts(frame: FrameType) -> tuple[str, ...]:
    positions = inspect.getframeinfo(frame, context=0).positions
    if positions is None or None in (
        positions.lineno,
        positions.end_lineno,
        positions.col_offset,
        positions.end_col_offset,
    ):
        return ()

    lines = linecache.getlines(frame.f_code.co_filename, frame.f_globals)
    if not lines or positions.end_lineno > len(lines):
        return ()

    # column offsets are UTF-8 byte offsets
    chunk = [line.encode("utf-8") for line in lines[positions.lineno - 1 : positions.end_lineno]]
    if len(chunk) == 1:
        chunk[0] = chunk[0][positions.col_offset : positions.end_col_offset]
    else:
        chunk[0] = chunk[0][positions.col_offset :]
        chunk[-1] = chunk[-1][: positions.end_col_offset]
    segment = b"".join(chunk).decode("utf-8", errors="replace")

    try:
        tree = ast.parse(segment, mode="eval")
    except SyntaxError:
        return ()
    if not isinstance(tree.body, ast.Call):
        return ()

    texts = []
    for arg in tree.body.args:
        text = ast.get_source_segment(segment, arg)
        if text is None:
            return ()
        if "\n" in text:
            text = " ".join(text.split())
        texts.append(text)
    return tuple(texts)
