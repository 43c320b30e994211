"""
Scala accessor generation for translation keys
"""

from .assembler import UnitAssembler, generate_code, collect_locales
from .errors import (
    CodeGenError, InconsistentKeyName, UnsupportedPlaceholderKind,
    MalformedCardinalityPayload, MissingLocaleCoverage, DuplicateTranslation,
    ConflictingPlaceholder, DuplicateMethodName,
)
from .placeholders import Placeholder, PlaceholderKind, find_placeholders
from .synthesizer import MethodSynthesizer

__all__ = [
    'UnitAssembler', 'generate_code', 'collect_locales',
    'CodeGenError', 'InconsistentKeyName', 'UnsupportedPlaceholderKind',
    'MalformedCardinalityPayload', 'MissingLocaleCoverage', 'DuplicateTranslation',
    'ConflictingPlaceholder', 'DuplicateMethodName',
    'Placeholder', 'PlaceholderKind', 'find_placeholders',
    'MethodSynthesizer',
]
