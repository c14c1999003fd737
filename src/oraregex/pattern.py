"""
Pattern wrapping for whole-match (group 0) selection.

Oracle numbers the whole match as subexpression 0. The emulation always reads
captures by index, so a group-0 request encloses the pattern in one synthetic
capturing group and reads group 1 instead. Enclosing the pattern shifts every
numbered group by one, so numbered references inside the pattern are shifted
as well:

    (a)\\1      ->  ((a)\\2)
    (x)(?(1)y)  ->  ((x)(?(2)y))
"""

from .types import check_group

__all__ = ["pin_end_anchors", "shift_group_references", "wrap_pattern"]

_OCTAL_DIGITS = "01234567"
_MAX_SINGLE_DIGIT_GROUP = 9


def _group_reference(number: int) -> str:
    """Spell a numbered backreference, switching to ``\\g<N>`` past group 9."""
    if number <= _MAX_SINGLE_DIGIT_GROUP:
        return f"\\{number}"
    return f"\\g<{number}>"


def _is_octal_escape(pattern: str, index: int) -> bool:
    """Check whether the escape starting at ``pattern[index] == '\\'`` is a three-digit octal escape."""
    digits = pattern[index + 1 : index + 4]
    return len(digits) == 3 and all(d in _OCTAL_DIGITS for d in digits)  # noqa: PLR2004


def _copy_class_opening(pattern: str, index: int, out: list[str]) -> int:
    """Copy a '[' and its optional leading '^' and ']' to ``out``; return the index after them."""
    out.append("[")
    index += 1
    # A leading '^' negates and a leading ']' is literal
    if index < len(pattern) and pattern[index] == "^":
        out.append("^")
        index += 1
    if index < len(pattern) and pattern[index] == "]":
        out.append("]")
        index += 1
    return index


def pin_end_anchors(pattern: str) -> str:
    """
    Rewrite every unescaped ``$`` outside a character class to ``\\Z``.

    Without MULTILINE the engine's ``$`` also matches just before a trailing
    newline. Oracle's default binds it to the very end of the subject, which
    is what ``\\Z`` does.

    Examples:
        >>> pin_end_anchors(r"b$|[$]\\$")
        'b\\\\Z|[$]\\\\$'

    """
    out: list[str] = []
    length = len(pattern)
    in_class = False
    i = 0

    while i < length:
        char = pattern[i]
        if char == "\\":
            out.append(pattern[i : i + 2])
            i += 2
        elif in_class:
            in_class = char != "]"
            out.append(char)
            i += 1
        elif char == "[":
            in_class = True
            i = _copy_class_opening(pattern, i, out)
        else:
            out.append("\\Z" if char == "$" else char)
            i += 1

    return "".join(out)


def shift_group_references(pattern: str, offset: int = 1) -> str:
    """
    Renumber numbered group references in a pattern by ``offset``.

    Handles ``\\N`` and ``\\NN`` backreferences, ``\\g<N>``, conditionals
    ``(?(N)...)`` and group calls ``(?N)``. Escapes inside character classes,
    named references, octal escapes and ``(?0)``/``(?R)`` are left alone.

    Args:
        pattern: The raw pattern text.
        offset: How many groups are being inserted in front of the pattern's own groups.

    Returns:
        The pattern with every numbered reference moved by ``offset``.

    Examples:
        >>> shift_group_references(r"(a)\\1")
        '(a)\\\\2'
        >>> shift_group_references(r"[\\1](b)")
        '[\\\\1](b)'

    """
    out: list[str] = []
    length = len(pattern)
    in_class = False
    i = 0

    while i < length:
        char = pattern[i]

        if char == "\\" and i + 1 < length:
            nxt = pattern[i + 1]
            if not in_class and nxt in "123456789" and not _is_octal_escape(pattern, i):
                end = i + 2
                if end < length and pattern[end].isdigit():
                    end += 1
                out.append(_group_reference(int(pattern[i + 1 : end]) + offset))
                i = end
                continue
            if not in_class and nxt == "g" and pattern.startswith("<", i + 2):
                close = pattern.find(">", i + 3)
                name = pattern[i + 3 : close]
                if close != -1 and name.isdigit():
                    out.append(f"\\g<{int(name) + offset}>")
                    i = close + 1
                    continue
            # Any other escape is copied verbatim, including '\\' and '\]'
            out.append(pattern[i : i + 2])
            i += 2
            continue

        if in_class:
            if char == "]":
                in_class = False
            out.append(char)
            i += 1
            continue

        if char == "[":
            in_class = True
            i = _copy_class_opening(pattern, i, out)
            continue

        if pattern.startswith("(?(", i):
            close = pattern.find(")", i + 3)
            name = pattern[i + 3 : close]
            if close != -1 and name.isdigit():
                out.append(f"(?({int(name) + offset})")
                i = close + 1
                continue

        if pattern.startswith("(?", i):
            end = i + 2
            while end < length and pattern[end].isdigit():
                end += 1
            if end > i + 2 and end < length and pattern[end] == ")" and int(pattern[i + 2 : end]) > 0:
                out.append(f"(?{int(pattern[i + 2 : end]) + offset})")
                i = end + 1
                continue

        out.append(char)
        i += 1

    return "".join(out)


def wrap_pattern(pattern: str, group: int) -> tuple[str, int]:
    """
    Decide the effective pattern and group index for a capture request.

    Args:
        pattern: The caller's pattern.
        group: The requested subexpression; 0 means the whole match.

    Returns:
        ``(effective_pattern, effective_group)``. For group 0 the pattern is
        wrapped and the group becomes 1; otherwise both are returned unchanged.

    Raises:
        InvalidArgumentError: If ``group`` is negative.

    """
    check_group(group)
    if group == 0:
        return f"({shift_group_references(pattern)})", 1
    return pattern, group

