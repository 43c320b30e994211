"""
Placeholder extraction and interpolation rewriting

Translations mark interpolation slots as ``[%<tag>:<name>]`` where the tag is
``s`` for text and ``i`` for integers, e.g. ``"Hello [%s:user_name]"``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .errors import UnsupportedPlaceholderKind
from .naming import lower_camel

MARKER_PATTERN = re.compile(r'\[%(\w):([\w.\-]+)\]')


class PlaceholderKind(Enum):
    """Supported placeholder kinds and their Scala types"""
    STRING = 's'
    INTEGER = 'i'

    @property
    def scala_type(self) -> str:
        return 'String' if self is PlaceholderKind.STRING else 'Int'

    @classmethod
    def from_tag(cls, tag: str, key: Optional[str] = None, text: Optional[str] = None) -> 'PlaceholderKind':
        for kind in cls:
            if kind.value == tag:
                return kind
        raise UnsupportedPlaceholderKind(f"Unsupported placeholder kind '{tag}'", key=key, text=text)


@dataclass(frozen=True, order=True)
class Placeholder:
    """Typed placeholder found in a translation"""
    name: str
    kind: str
    marker: str

    @property
    def placeholder_kind(self) -> PlaceholderKind:
        return PlaceholderKind(self.kind)

    @property
    def scala_type(self) -> str:
        return self.placeholder_kind.scala_type


def find_placeholders(text: str, key: Optional[str] = None) -> List[Placeholder]:
    """
    Extract placeholders from raw translation text

    Args:
        text: Raw translation text
        key: Key name used in error messages

    Returns:
        Placeholders sorted by (name, kind, marker), without duplicates

    Raises:
        UnsupportedPlaceholderKind: a marker uses a tag other than 's' or 'i'
    """
    found = set()
    for match in MARKER_PATTERN.finditer(text):
        tag, raw_name = match.group(1), match.group(2)
        kind = PlaceholderKind.from_tag(tag, key=key, text=text)
        found.add(Placeholder(name=lower_camel(raw_name), kind=kind.value, marker=match.group(0)))
    return sorted(found)


def merge_placeholders(texts: Iterable[str], key: Optional[str] = None) -> List[Placeholder]:
    """Union of the placeholders of several texts, sorted"""
    merged = set()
    for text in texts:
        merged.update(find_placeholders(text, key=key))
    return sorted(merged)


def unique_parameters(placeholders: Iterable[Placeholder]) -> List[Tuple[str, PlaceholderKind]]:
    """(name, kind) pairs of the placeholders, deduplicated and sorted by name"""
    pairs = {(p.name, p.kind) for p in placeholders}
    return [(name, PlaceholderKind(kind)) for name, kind in sorted(pairs)]


def interpolate(text: str, placeholders: Iterable[Placeholder], render_ident) -> Tuple[str, bool]:
    """
    Rewrite placeholder markers to Scala interpolation references

    Markers known from ``placeholders`` become ``${name}``; everything else is
    kept. When anything was rewritten, literal ``$`` signs and backslashes are
    doubled so the text reads the same inside an ``s"..."`` literal as it does
    inside a raw one.

    Args:
        text: Raw translation text
        placeholders: Placeholders of the whole key
        render_ident: Callable rendering a parameter name as a Scala identifier

    Returns:
        (rewritten_text, interpolated)
    """
    by_marker = {p.marker: p for p in placeholders}
    pieces: List[Tuple[str, bool]] = []
    position = 0
    for match in MARKER_PATTERN.finditer(text):
        placeholder = by_marker.get(match.group(0))
        if placeholder is None:
            continue
        pieces.append((text[position:match.start()], False))
        pieces.append(('${' + render_ident(placeholder.name) + '}', True))
        position = match.end()
    pieces.append((text[position:], False))

    interpolated = any(is_ref for _, is_ref in pieces)
    if not interpolated:
        return text, False

    out = ''.join(piece if is_ref else _escape_interpolated(piece) for piece, is_ref in pieces)
    return out, True


def _escape_interpolated(text: str) -> str:
    # s"..." processes escape sequences even inside triple quotes
    return text.replace('\\', '\\\\').replace('$', '$$')
