"""Regular-expression replacement with ``$1`` / ``${name}`` style templates."""

from __future__ import annotations

import re
from typing import AnyStr

__all__ = ["expand_template", "regexp_replace"]

_MAX_GROUP_NUMBER = 100_000_000


def _is_name_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal() or ch == "_"


def _extract(template: str) -> tuple[str, int, str] | None:
    """Split a group reference off the front of ``template``.

    ``template`` is the text after a ``$``. Returns the group name, its number
    (or -1 when the name is not a plain number) and the remaining text, or
    None when no valid reference starts there.
    """
    if not template:
        return None
    brace = template[0] == "{"
    text = template[1:] if brace else template
    end = 0
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    if end == 0:
        return None
    name = text[:end]
    if brace:
        if end >= len(text) or text[end] != "}":
            return None
        end += 1

    number = 0
    for ch in name:
        if not "0" <= ch <= "9" or number >= _MAX_GROUP_NUMBER:
            number = -1
            break
        number = number * 10 + int(ch)
    if name[0] == "0" and len(name) > 1:
        number = -1
    return name, number, text[end:]


def _group_text(match: re.Match[str], name: str, number: int) -> str:
    if number >= 0:
        if number > match.re.groups:
            return ""
        return match.group(number) or ""
    if name in match.re.groupindex:
        return match.group(name) or ""
    return ""


def expand_template(template: str, match: re.Match[str]) -> str:
    """Expand ``$n``, ``${n}``, ``$name``, ``${name}`` and ``$$`` against ``match``.

    References to groups that do not exist or did not take part in the match
    expand to nothing; a ``$`` that starts no valid reference is kept as is.
    """
    parts: list[str] = []
    rest = template
    while True:
        before, dollar, after = rest.partition("$")
        if not dollar:
            break
        parts.append(before)
        rest = after
        if rest.startswith("$"):
            parts.append("$")
            rest = rest[1:]
            continue
        reference = _extract(rest)
        if reference is None:
            parts.append("$")
            continue
        name, number, rest = reference
        parts.append(_group_text(match, name, number))
    parts.append(rest)
    return "".join(parts)


def _as_text(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", "surrogateescape")
    return value


def _compile(pattern: str | bytes | re.Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        if isinstance(pattern.pattern, bytes):
            return re.compile(_as_text(pattern.pattern), pattern.flags & ~re.ASCII)
        return pattern
    return re.compile(_as_text(pattern))


def regexp_replace(
    source: AnyStr, pattern: str | bytes | re.Pattern, template: str | bytes
) -> AnyStr:
    """Replace every match of ``pattern`` in ``source`` with the expanded ``template``.

    Empty matches directly after a previous match are ignored. Bytes in give
    bytes out.
    """
    regex = _compile(pattern)
    text = _as_text(source)
    replacement = _as_text(template)

    pieces: list[str] = []
    cursor = 0
    previous_end: int | None = None
    for match in regex.finditer(text):
        start, end = match.span()
        if start == end and start == previous_end:
            continue
        pieces.append(text[cursor:start])
        pieces.append(expand_template(replacement, match))
        cursor = end
        previous_end = end
    pieces.append(text[cursor:])
    result = "".join(pieces)

    if isinstance(source, bytes):
        return result.encode("utf-8", "surrogateescape")
    return result