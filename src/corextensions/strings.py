"""Text helpers built on the standard :mod:`re` engine."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator


def regexp_for_multiple_matches(
    sources: Iterable[str],
    *,
    multiline: bool = False,
    case_sensitive: bool = True,
    dotall: bool = False,
) -> re.Pattern[str]:
    """Compile a pattern matching any of the literal strings in *sources*.

    Each source is escaped, so ``"."`` matches a dot and not any
    character.
    """
    flags = 0
    if multiline:
        flags |= re.MULTILINE
    if not case_sensitive:
        flags |= re.IGNORECASE
    if dotall:
        flags |= re.DOTALL
    return re.compile("|".join(re.escape(source) for source in sources), flags)


def capitalise(text: str) -> str:
    """Upper-case the first character of *text*; ``""`` stays ``""``."""
    return text[:1].upper() + text[1:]


def split_first(text: str, pattern: str) -> list[str]:
    """Split *text* around the first occurrence of *pattern*.

    Example::

        >>> split_first('happy', 'p')
        ['ha', 'py']
        >>> split_first('happy', 'z')
        ['happy']
    """
    head, found, tail = text.partition(pattern)
    return [head, tail] if found and pattern else [text]


def split_last(text: str, pattern: str) -> list[str]:
    """Split *text* around the last occurrence of *pattern*.

    Example::

        >>> split_last('happy', 'p')
        ['hap', 'y']
    """
    head, found, tail = text.rpartition(pattern)
    return [head, tail] if found and pattern else [text]


def remove_extra_space(text: str) -> str:
    """Collapse runs of spaces to one and strip both ends.

    Example::

        >>> remove_extra_space('I want   to   be  free.    ')
        'I want to be free.'
    """
    return " ".join(word.strip() for word in text.split(" ") if word.strip())


def split_by_all(text: str, delimiters: Iterable[str]) -> list[str]:
    """Split *text* on every one of *delimiters*, dropping empty pieces.

    Example::

        >>> split_by_all('Happy, sad and angry', [',', ' '])
        ['Happy', 'sad', 'and', 'angry']

    Raises:
        ValueError: If *delimiters* is empty.
    """
    delimiters = list(delimiters)
    if not delimiters:
        raise ValueError("The list of delimiters cannot be empty.")
    delimiters = [d for d in delimiters if d]
    if not delimiters:
        return [text] if text else []
    # Longest first so that multi-character delimiters win over their prefixes.
    exp = regexp_for_multiple_matches(sorted(delimiters, key=len, reverse=True))
    return [piece for piece in exp.split(text) if piece]


def starts_with_one_of(text: str, prefixes: Iterable[str]) -> bool:
    """Return ``True`` if *text* starts with any of *prefixes*."""
    return any(text.startswith(prefix) for prefix in prefixes)


def ends_with_one_of(text: str, suffixes: Iterable[str]) -> bool:
    """Return ``True`` if *text* ends with any of *suffixes*."""
    return any(text.endswith(suffix) for suffix in suffixes)


def replace_last(text: str, old: str, new: str, end: int | None = None) -> str:
    """Replace the last occurrence of *old* starting at or before *end*.

    Example::

        >>> replace_last('0.0001', '0', '7')
        '0.0071'
        >>> replace_last('0.0001', '0', '7', 3)
        '0.0701'
    """
    if end is None:
        end = len(text) - 1
    index = text.rfind(old, 0, end + len(old))
    if index == -1:
        return text
    return text[:index] + new + text[index + len(old):]


def match_all(text: str, values: Iterable[str]) -> Iterator[re.Match[str]]:
    """Yield a match for every occurrence of any of *values* in *text*.

    Example::

        >>> [m.start() for m in match_all('I am here', ['a', 'e'])]
        [2, 6, 8]
    """
    return regexp_for_multiple_matches(values).finditer(text)
