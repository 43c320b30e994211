"""
Identifier helpers for generated code
"""

import re
from typing import List

_SEGMENT_SPLIT = re.compile(r'[\W_]+')


def _segments(name: str) -> List[str]:
    return [s for s in _SEGMENT_SPLIT.split(name) if s]


def lower_camel(name: str) -> str:
    """Convert a key or placeholder name to lowerCamel, e.g. 'welcome_message' -> 'welcomeMessage'.

    Names without any alphanumeric characters are returned unchanged and end up
    quoted by the printer.
    """
    parts = _segments(name)
    if not parts:
        return name

    first = parts[0][0].lower() + parts[0][1:]
    rest = [p[0].upper() + p[1:] for p in parts[1:]]
    return first + ''.join(rest)


def upper_camel(name: str) -> str:
    """Convert a locale or project name to UpperCamel, e.g. 'pt-BR' -> 'PtBr'"""
    parts = _segments(name)
    if not parts:
        return name

    words = []
    for part in parts:
        # All-caps segments such as region codes become 'Br', not 'BR'
        if part.isupper():
            part = part.lower()
        words.append(part[0].upper() + part[1:])
    return ''.join(words)
