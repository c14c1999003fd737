"""
Adapter around the ``regex`` package.

Every other module reaches the engine through these helpers, so the rules for
turning a FlagSet into engine flags and for stepping from one match to the
next live in one place.
"""

import logging
from collections.abc import Iterator
from typing import Any

import regex

from .pattern import pin_end_anchors
from .types import FlagSet

__all__ = [
    "PASSTHROUGH_FLAGS",
    "apply_literal",
    "compile_pattern",
    "engine_flags",
    "has_capture_group",
    "match_at",
    "scan",
    "search",
]

logger = logging.getLogger(__name__)

# Engine letters accepted through the passthrough channel. 'q' is handled by apply_literal().
PASSTHROUGH_FLAGS: dict[str, int] = {
    "a": regex.ASCII,
    "b": regex.BESTMATCH,
    "e": regex.ENHANCEMATCH,
    "f": regex.FULLCASE,
    "p": regex.POSIX,
    "s": regex.DOTALL,
    "u": regex.UNICODE,
    "w": regex.WORD,
}
_LITERAL_FLAG = "q"


def engine_flags(flags: FlagSet) -> int:
    """
    Map a FlagSet onto ``regex`` compile flags.

    The boundary default needs no engine flag: without DOTALL and MULTILINE the
    engine already stops ``.`` at newlines and binds ``^``/``$`` to the subject.
    When no newline mode is set at all (legacy policy with an explicit flag
    string), the engine falls back to the PostgreSQL default where ``.`` crosses
    newlines.

    Raises:
        regex.error: If a passthrough letter is not part of the engine vocabulary.

    """
    value = 0
    if flags.ignore_case:
        value |= regex.IGNORECASE
    if flags.dot_all:
        value |= regex.DOTALL
    if flags.multiline:
        value |= regex.MULTILINE
    if flags.extended:
        value |= regex.VERBOSE
    if not (flags.boundary or flags.dot_all or flags.multiline):
        value |= regex.DOTALL

    for letter in flags.passthrough:
        if letter == _LITERAL_FLAG:
            continue
        try:
            value |= PASSTHROUGH_FLAGS[letter]
        except KeyError:
            msg = f"invalid regular expression option: {letter!r}"
            raise regex.error(msg) from None
    return value


def apply_literal(pattern: str, flags: FlagSet) -> str:
    """Escape the pattern when the ``q`` passthrough letter asks for a literal match."""
    if _LITERAL_FLAG in flags.passthrough:
        return regex.escape(pattern)
    return pattern


def compile_pattern(pattern: str, flags: FlagSet) -> Any:  # noqa: ANN401
    """
    Compile a pattern for the given flag set.

    Under the boundary default, ``$`` is pinned to the end of the subject.
    The ``regex`` package keeps its own compile cache, so repeated calls with
    the same arguments are cheap.

    Raises:
        regex.error: If the pattern is malformed.

    """
    if flags.boundary:
        pattern = pin_end_anchors(pattern)
    logger.debug("Compiling %r with flags '%s'", pattern, flags)
    return regex.compile(pattern, engine_flags(flags))


def has_capture_group(pattern: str, flags: FlagSet) -> bool:
    """Return True if the compiled pattern defines at least one capturing group."""
    return compile_pattern(pattern, flags).groups > 0


def search(compiled: Any, subject: str, timeout: float | None = None) -> Any:  # noqa: ANN401
    """Return the first match anywhere in the subject, or None."""
    return compiled.search(subject, timeout=timeout)


def scan(compiled: Any, text: str, timeout: float | None = None) -> Iterator[Any]:
    """
    Yield successive matches in ``text``, left to right.

    Each search resumes at the end of the previous match, or one character
    past it when the match was empty, so every match starts strictly after
    the one before it. Callers pass the suffix of the subject that begins at
    the requested position; offsets are relative to that suffix.

    Raises:
        TimeoutError: If a single search exceeds ``timeout``.

    """
    cursor = 0
    while cursor <= len(text):
        match = compiled.search(text, cursor, timeout=timeout)
        if match is None:
            return
        yield match
        start, end = match.span()
        cursor = end if end > start else end + 1


def match_at(compiled: Any, text: str, pos: int, timeout: float | None = None) -> Any:  # noqa: ANN401
    """Return the match that starts exactly at the 0-based offset, or None."""
    return compiled.match(text, pos, timeout=timeout)
