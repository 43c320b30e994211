"""
Errors raised while generating code

Every error aborts the whole generation run; they all describe problems
in the input data, so none of them are retried.
"""

from typing import Optional


class CodeGenError(ValueError):
    """Base class for generation failures"""
    
    def __init__(self, message: str, key: Optional[str] = None, text: Optional[str] = None):
        self.key = key
        self.text = text
        details = message
        if key is not None:
            details = f"{details} [key: {key}]"
        if text is not None:
            details = f"{details} [text: {text!r}]"
        super().__init__(details)


class InconsistentKeyName(CodeGenError):
    """Per-platform key names differ"""


class UnsupportedPlaceholderKind(CodeGenError):
    """Placeholder marker uses an unknown kind tag"""


class MalformedCardinalityPayload(CodeGenError):
    """Plural translation is not a one/other object"""


class MissingLocaleCoverage(CodeGenError):
    """Key has no translation for a known locale"""


class DuplicateTranslation(CodeGenError):
    """Key has more than one translation for a locale"""


class ConflictingPlaceholder(CodeGenError):
    """Placeholders would produce clashing parameter names"""


class DuplicateMethodName(CodeGenError):
    """Two keys map to the same method in one container"""
