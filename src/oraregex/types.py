"""Defines the value objects shared by the translator, locator and public functions."""

from dataclasses import dataclass, field

from .exceptions import InvalidArgumentError

__all__ = [
    "FlagSet",
    "MatchSpan",
    "OccurrenceQuery",
    "check_group",
    "check_occurrence",
    "check_position",
    "check_return_opt",
]


def _require_int(name: str, value: object) -> int:
    """Reject booleans and non-integers before any range check."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"argument '{name}' must be an integer, got {type(value).__name__}"
        raise InvalidArgumentError(msg)
    return value


def check_position(position: object) -> int:
    """Validate a 1-based search start offset."""
    value = _require_int("position", position)
    if value < 1:
        msg = "argument 'position' must be a number greater than 0"
        raise InvalidArgumentError(msg)
    return value


def check_occurrence(occurrence: object) -> int:
    """Validate a 1-based occurrence ordinal."""
    value = _require_int("occurrence", occurrence)
    if value < 1:
        msg = "argument 'occurrence' must be a number greater than 0"
        raise InvalidArgumentError(msg)
    return value


def check_group(group: object) -> int:
    """Validate a capture group index, where 0 selects the whole match."""
    value = _require_int("group", group)
    if value < 0:
        msg = "argument 'group' must be a positive number"
        raise InvalidArgumentError(msg)
    return value


def check_return_opt(return_opt: object) -> int:
    """Validate the REGEXP_INSTR return option (0 = start, 1 = one past the end)."""
    value = _require_int("return_opt", return_opt)
    if value not in (0, 1):
        msg = "argument 'return_opt' must be 0 or 1"
        raise InvalidArgumentError(msg)
    return value


@dataclass(frozen=True)
class FlagSet:
    """
    The engine-facing form of an Oracle match parameter string.

    Attributes:
        ignore_case: Case-insensitive matching (Oracle ``i``).
        dot_all: ``.`` also matches newline (Oracle ``n``).
        multiline: ``^`` and ``$`` match at embedded newlines (Oracle ``m``).
        extended: Whitespace and ``#`` comments in the pattern are ignored (Oracle ``x``).
        boundary: Oracle's default newline policy, where ``^``/``$`` bind to the
            whole subject and ``.`` stops at newlines.
        global_: Scan for every non-overlapping match instead of the first one.
        passthrough: Flag letters outside the Oracle vocabulary, kept in order
            for the engine to interpret.

    """

    ignore_case: bool = False
    dot_all: bool = False
    multiline: bool = False
    extended: bool = False
    boundary: bool = False
    global_: bool = False
    passthrough: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate that the boundary default is not combined with explicit newline modes."""
        if self.boundary and (self.dot_all or self.multiline):
            msg = "The boundary default cannot be combined with dot-all or multiline mode."
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return a compact letter form, useful in log lines."""
        letters = [
            letter
            for letter, enabled in (
                ("i", self.ignore_case),
                ("n", self.dot_all),
                ("m", self.multiline),
                ("x", self.extended),
                ("p", self.boundary),
                ("g", self.global_),
            )
            if enabled
        ]
        letters.extend(self.passthrough)
        return "".join(letters) or "-"


@dataclass(frozen=True)
class MatchSpan:
    """One matched span of one capture group, in 1-based subject coordinates."""

    start: int
    length: int

    def __post_init__(self) -> None:
        """Validate attributes."""
        if self.start < 1:
            msg = f"MatchSpan start must be 1-based, got {self.start}"
            raise ValueError(msg)
        if self.length < 0:
            msg = f"MatchSpan length cannot be negative, got {self.length}"
            raise ValueError(msg)

    @property
    def end(self) -> int:
        """The 1-based offset just past the last matched character."""
        return self.start + self.length

    def extract(self, subject: str) -> str:
        """Return the substring of ``subject`` covered by this span."""
        return subject[self.start - 1 : self.end - 1]


@dataclass(frozen=True)
class OccurrenceQuery:
    """
    A single request to the occurrence locator.

    Construction validates the numeric fields, so a query that exists is
    always within contract. ``subject`` and ``pattern`` may be ``None`` to
    model SQL NULL; the locator treats that as "not found".
    """

    subject: str | None
    pattern: str | None
    position: int = 1
    occurrence: int = 1
    group: int = 0
    flags: FlagSet = field(default_factory=FlagSet)

    def __post_init__(self) -> None:
        """Validate numeric arguments in the order the Oracle routines check them."""
        check_position(self.position)
        check_occurrence(self.occurrence)
        check_group(self.group)
