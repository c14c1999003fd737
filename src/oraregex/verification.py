"""Self-check of the emulated functions against known Oracle results."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .config import DEFAULT_SETTINGS, EmulationSettings
from .functions import regexp_count, regexp_instr, regexp_like, regexp_substr

__all__ = ["VERIFICATION_CASES", "VerificationCase", "VerificationResult", "run_verification"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationCase:
    """One call with the result Oracle returns for it."""

    name: str
    function: Callable[..., Any]
    args: tuple[Any, ...]
    expected: Any
    kwargs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class VerificationResult:
    """The outcome of running one VerificationCase."""

    case: VerificationCase
    actual: Any = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        """True when the call returned the expected value without raising."""
        return self.error is None and self.actual == self.case.expected


VERIFICATION_CASES: tuple[VerificationCase, ...] = (
    VerificationCase("REGEXP_LIKE dot", regexp_like, ("hello world", "wor.d"), expected=True),
    VerificationCase("REGEXP_LIKE no match", regexp_like, ("hello world", "^world"), expected=False),
    VerificationCase("REGEXP_LIKE case-insensitive", regexp_like, ("Hello", "^hello$", "i"), expected=True),
    VerificationCase("REGEXP_LIKE dot stops at newline", regexp_like, ("a\nb", "a.b"), expected=False),
    VerificationCase("REGEXP_LIKE n crosses newline", regexp_like, ("a\nb", "a.b", "n"), expected=True),
    VerificationCase("REGEXP_LIKE m anchors lines", regexp_like, ("a\nb", "^b$", "m"), expected=True),
    VerificationCase("REGEXP_LIKE $ ignores trailing newline", regexp_like, ("ab\n", "b$"), expected=False),
    VerificationCase("REGEXP_COUNT all", regexp_count, ("ababab", "ab"), expected=3),
    VerificationCase("REGEXP_COUNT from position", regexp_count, ("ababab", "ab", 2), expected=2),
    VerificationCase("REGEXP_COUNT anchor at position", regexp_count, ("abab", "^ab", 3), expected=1),
    VerificationCase("REGEXP_INSTR second occurrence", regexp_instr, ("ababab", "ab"), expected=3, kwargs={"occurrence": 2}),
    VerificationCase("REGEXP_INSTR past the end", regexp_instr, ("ababab", "ab", 1, 1, 1), expected=3),
    VerificationCase("REGEXP_INSTR missing occurrence", regexp_instr, ("ababab", "ab"), expected=0, kwargs={"occurrence": 4}),
    VerificationCase("REGEXP_INSTR subexpression", regexp_instr, ("2024-01-02", r"(\d+)-(\d+)-(\d+)", 1, 1, 0, None, 3), expected=9),
    VerificationCase("REGEXP_SUBSTR third occurrence", regexp_substr, ("ababab", "ab"), expected="ab", kwargs={"occurrence": 3}),
    VerificationCase("REGEXP_SUBSTR subexpression", regexp_substr, ("2024-01-02", r"(\d+)-(\d+)-(\d+)"), expected="01", kwargs={"group": 2}),
    VerificationCase("REGEXP_SUBSTR group 1 without groups", regexp_substr, ("abc", "b"), expected=None, kwargs={"group": 1}),
)


def run_verification(
    cases: Sequence[VerificationCase] = VERIFICATION_CASES,
    settings: EmulationSettings = DEFAULT_SETTINGS,
) -> list[VerificationResult]:
    """
    Run each case and report what it returned.

    Exceptions from a case are captured in the result instead of stopping the run.

    Returns:
        One VerificationResult per case, in order.

    """
    results: list[VerificationResult] = []
    for case in cases:
        try:
            actual = case.function(*case.args, settings=settings, **case.kwargs)
        except Exception as e:  # noqa: BLE001
            result = VerificationResult(case=case, error=f"{type(e).__name__}: {e}")
        else:
            result = VerificationResult(case=case, actual=actual)

        if result.passed:
            logger.debug("%s: PASSED", case.name)
        else:
            logger.debug("%s: FAILED (expected %r, got %r, error=%s)", case.name, case.expected, result.actual, result.error)
        results.append(result)
    return results
