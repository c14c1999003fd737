"""
Translation of Oracle match parameters into an engine flag set.

Oracle and the target engine disagree on two letters and on the defaults:

    Oracle ``n``  ->  dot matches newline   (engine DOTALL)
    Oracle ``m``  ->  multi-line anchors    (engine MULTILINE)

With neither letter, Oracle keeps ``.`` away from newlines and binds ``^``/``$``
to the whole subject. That default is carried as ``FlagSet.boundary``.
"""

import logging

from .config import NewlinePolicy
from .types import FlagSet

__all__ = ["ORACLE_FLAG_LETTERS", "translate_modifiers"]

logger = logging.getLogger(__name__)

ORACLE_FLAG_LETTERS = frozenset("icnmx")


def translate_modifiers(flags: str | None, force_global: bool, *, policy: NewlinePolicy = "uniform") -> FlagSet:  # noqa: FBT001
    """
    Convert an Oracle match parameter string into a FlagSet.

    Args:
        flags: The Oracle match parameter string, or None when the caller omitted it.
        force_global: True for operations that enumerate every match (count, instr, substr).
        policy: ``uniform`` applies the boundary default whenever neither ``n`` nor ``m``
            is present; ``legacy`` applies it only when ``flags`` is None.

    Returns:
        The structured flag set handed to the engine adapter.

    """
    ignore_case = False
    dot_all = False
    multiline = False
    extended = False
    passthrough: list[str] = []

    for letter in flags or "":
        if letter == "i":
            ignore_case = True
        elif letter == "c":
            # Oracle resolves conflicting case letters by taking the last one
            ignore_case = False
        elif letter == "n":
            dot_all = True
        elif letter == "m":
            multiline = True
        elif letter == "x":
            extended = True
        elif letter not in passthrough:
            passthrough.append(letter)

    if policy == "legacy":
        boundary = flags is None
    else:
        boundary = not (dot_all or multiline)

    flag_set = FlagSet(
        ignore_case=ignore_case,
        dot_all=dot_all,
        multiline=multiline,
        extended=extended,
        boundary=boundary,
        global_=force_global,
        passthrough=tuple(passthrough),
    )
    logger.debug("Translated match parameter %r (policy=%s) to flags '%s'", flags, policy, flag_set)
    return flag_set
