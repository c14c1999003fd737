"""
Occurrence resolution: find the Nth match and the span of one of its groups.

The engine has no "give me match N" primitive, so the locator walks the
whole-pattern matches from the start position, counting them until the
requested occurrence is reached. It then re-runs the caller's effective
pattern anchored at that occurrence to read the requested group.

The search runs over the suffix of the subject that begins at the start
position, so ``^`` matches there. Offsets in this module are 0-based and
relative to that suffix; everything returned by ``locate`` is a 1-based
MatchSpan in the subject's own coordinates.
"""

import logging

from . import engine
from .config import DEFAULT_SETTINGS, EmulationSettings
from .pattern import wrap_pattern
from .types import MatchSpan, OccurrenceQuery

__all__ = ["find_occurrence_window", "locate"]

logger = logging.getLogger(__name__)


def find_occurrence_window(
    window: str,
    pattern: str,
    query: OccurrenceQuery,
    settings: EmulationSettings = DEFAULT_SETTINGS,
) -> MatchSpan | None:
    """
    Locate the whole-match span of the requested occurrence.

    Args:
        window: The part of the subject being searched, starting at ``query.position``.
        pattern: The caller's pattern, already literal-escaped if requested.
        query: Supplies the occurrence and flags.
        settings: Supplies the engine timeout.

    Returns:
        The 1-based span of the whole match relative to ``window``, or None
        when fewer than ``query.occurrence`` matches exist.

    """
    scan_pattern, scan_group = wrap_pattern(pattern, 0)
    scanner = engine.compile_pattern(scan_pattern, query.flags)

    matched = 0
    for match in engine.scan(scanner, window, settings.timeout):
        matched += 1
        start, end = match.span(scan_group)
        if matched == query.occurrence:
            logger.debug("Occurrence %d found at window offset %d (length %d)", matched, start + 1, end - start)
            return MatchSpan(start=start + 1, length=end - start)
        logger.debug("Skipping occurrence %d ending at window offset %d", matched, end + 1)

    logger.debug("Only %d occurrence(s) of %r found from position %d", matched, pattern, query.position)
    return None


def locate(query: OccurrenceQuery, settings: EmulationSettings = DEFAULT_SETTINGS) -> MatchSpan | None:
    """
    Resolve an occurrence query to the span of the selected group.

    Args:
        query: The validated query.
        settings: Engine settings (timeout).

    Returns:
        A 1-based MatchSpan of the requested group within the requested
        occurrence, or None when the occurrence does not exist, the group
        index is beyond the pattern's groups, or the group did not take part
        in the match.

    Raises:
        regex.error: If the pattern is malformed.
        TimeoutError: If a scan exceeds ``settings.timeout``.

    """
    if query.subject is None or query.pattern is None:
        return None

    pattern = engine.apply_literal(query.pattern, query.flags)
    effective_pattern, effective_group = wrap_pattern(pattern, query.group)
    compiled = engine.compile_pattern(effective_pattern, query.flags)
    if effective_group > compiled.groups:
        logger.debug("Group %d requested but pattern %r defines only %d", query.group, query.pattern, compiled.groups)
        return None

    offset = query.position - 1
    window_text = query.subject[offset:]
    window = find_occurrence_window(window_text, pattern, query, settings)
    if window is None:
        return None

    # The scan and this match start at the same offset, so they pick the same alternative
    match = engine.match_at(compiled, window_text, window.start - 1, settings.timeout)
    if match is None:
        return None

    start, end = match.span(effective_group)
    if start < 0:
        logger.debug("Group %d did not participate in occurrence %d", query.group, query.occurrence)
        return None
    return MatchSpan(start=offset + start + 1, length=end - start)
