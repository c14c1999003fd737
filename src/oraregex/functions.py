"""
Oracle-compatible REGEXP_LIKE, REGEXP_COUNT, REGEXP_INSTR and REGEXP_SUBSTR.

Each function takes the Oracle argument list in Oracle order, with the
optional trailing arguments expressed as defaulted parameters instead of one
overload per arity. Positions are 1-based character offsets.

``None`` for subject or pattern models SQL NULL and yields the not-found
result of the function. ``None`` for any optional argument means its default.
"""

import logging

from . import engine
from .config import DEFAULT_SETTINGS, EmulationSettings
from .locator import locate
from .modifiers import translate_modifiers
from .types import OccurrenceQuery, check_group, check_occurrence, check_position, check_return_opt

__all__ = ["regexp_count", "regexp_instr", "regexp_like", "regexp_substr"]

logger = logging.getLogger(__name__)


def regexp_like(
    subject: str | None,
    pattern: str | None,
    flags: str | None = None,
    *,
    settings: EmulationSettings | None = None,
) -> bool:
    """
    Report whether the pattern matches anywhere in the subject.

    Args:
        subject: The text to search.
        pattern: The regular expression.
        flags: Oracle match parameter string (``i``, ``c``, ``n``, ``m``, ``x``).
        settings: Emulation settings; defaults apply when omitted.

    Returns:
        True if at least one match exists, otherwise False.

    Examples:
        >>> regexp_like("hello world", "wor.d")
        True

    """
    settings = settings if settings is not None else DEFAULT_SETTINGS
    if subject is None or pattern is None:
        return False

    flag_set = translate_modifiers(flags, False, policy=settings.newline_policy)  # noqa: FBT003
    compiled = engine.compile_pattern(engine.apply_literal(pattern, flag_set), flag_set)
    return engine.search(compiled, subject, settings.timeout) is not None


def regexp_count(
    subject: str | None,
    pattern: str | None,
    position: int | None = 1,
    flags: str | None = None,
    *,
    settings: EmulationSettings | None = None,
) -> int:
    """
    Count the non-overlapping matches at or after a position.

    Args:
        subject: The text to search.
        pattern: The regular expression.
        position: 1-based offset where the scan starts.
        flags: Oracle match parameter string.
        settings: Emulation settings; defaults apply when omitted.

    Returns:
        The number of matches, 0 when there are none.

    Raises:
        InvalidArgumentError: If ``position`` is lower than 1.

    Examples:
        >>> regexp_count("ababab", "ab")
        3

    """
    settings = settings if settings is not None else DEFAULT_SETTINGS
    position = check_position(1 if position is None else position)
    if subject is None or pattern is None:
        return 0

    flag_set = translate_modifiers(flags, True, policy=settings.newline_policy)  # noqa: FBT003
    compiled = engine.compile_pattern(engine.apply_literal(pattern, flag_set), flag_set)
    return sum(1 for _ in engine.scan(compiled, subject[position - 1 :], settings.timeout))


def regexp_instr(  # noqa: PLR0913
    subject: str | None,
    pattern: str | None,
    position: int | None = 1,
    occurrence: int | None = 1,
    return_opt: int | None = 0,
    flags: str | None = None,
    group: int | None = 0,
    *,
    settings: EmulationSettings | None = None,
) -> int:
    """
    Return the position of a match, or of one of its subexpressions.

    Args:
        subject: The text to search.
        pattern: The regular expression.
        position: 1-based offset where the scan starts.
        occurrence: Which match to report, counting from ``position``.
        return_opt: 0 for the first character of the match, 1 for the
            character just after it.
        flags: Oracle match parameter string.
        group: Subexpression to report; 0 is the whole match.
        settings: Emulation settings; defaults apply when omitted.

    Returns:
        A 1-based position, or 0 when the occurrence or group is not found.

    Raises:
        InvalidArgumentError: For a position or occurrence below 1, a negative
            group, or a return option other than 0 or 1.

    Examples:
        >>> regexp_instr("ababab", "ab", occurrence=2)
        3

    """
    settings = settings if settings is not None else DEFAULT_SETTINGS
    position = check_position(1 if position is None else position)
    occurrence = check_occurrence(1 if occurrence is None else occurrence)
    group = check_group(0 if group is None else group)
    return_opt = check_return_opt(0 if return_opt is None else return_opt)

    query = OccurrenceQuery(
        subject=subject,
        pattern=pattern,
        position=position,
        occurrence=occurrence,
        group=group,
        flags=translate_modifiers(flags, True, policy=settings.newline_policy),  # noqa: FBT003
    )
    span = locate(query, settings)
    if span is None:
        return 0
    return span.end if return_opt == 1 else span.start


def regexp_substr(  # noqa: PLR0913
    subject: str | None,
    pattern: str | None,
    position: int | None = 1,
    occurrence: int | None = 1,
    flags: str | None = None,
    group: int | None = 0,
    *,
    settings: EmulationSettings | None = None,
) -> str | None:
    """
    Return the text of a match, or of one of its subexpressions.

    Args:
        subject: The text to search.
        pattern: The regular expression.
        position: 1-based offset where the scan starts.
        occurrence: Which match to return, counting from ``position``.
        flags: Oracle match parameter string.
        group: Subexpression to return; 0 is the whole match.
        settings: Emulation settings; defaults apply when omitted.

    Returns:
        The matched text, or None when the occurrence or group is not found.
        Asking for group 1 of a pattern without any capturing group returns
        None without scanning.

    Raises:
        InvalidArgumentError: For a position or occurrence below 1, or a negative group.

    Examples:
        >>> regexp_substr("2024-01-02", r"(\\d+)-(\\d+)-(\\d+)", group=2)
        '01'

    """
    settings = settings if settings is not None else DEFAULT_SETTINGS
    position = check_position(1 if position is None else position)
    occurrence = check_occurrence(1 if occurrence is None else occurrence)
    group = check_group(0 if group is None else group)
    if subject is None or pattern is None:
        return None

    flag_set = translate_modifiers(flags, True, policy=settings.newline_policy)  # noqa: FBT003
    if group == 1 and not engine.has_capture_group(engine.apply_literal(pattern, flag_set), flag_set):
        logger.debug("Group 1 requested but %r has no capturing group", pattern)
        return None

    query = OccurrenceQuery(
        subject=subject,
        pattern=pattern,
        position=position,
        occurrence=occurrence,
        group=group,
        flags=flag_set,
    )
    span = locate(query, settings)
    if span is None:
        return None
    return span.extract(subject)
