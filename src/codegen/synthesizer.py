"""
Builds one Scala method per translation key
"""

import json
import logging
from typing import Dict, List, Optional, Sequence

from models.key import Key
from .errors import (
    InconsistentKeyName, MalformedCardinalityPayload, MissingLocaleCoverage,
    DuplicateTranslation, ConflictingPlaceholder,
)
from .naming import lower_camel, upper_camel
from .placeholders import Placeholder, merge_placeholders, unique_parameters, interpolate
from .printer import render_ident
from .scala_ast import Ident, StrLit, Var, Match, MatchClause, Param, MethodDef

logger = logging.getLogger(__name__)

RETURN_TYPE = 'String'
LOCALE_TYPE = 'Locale'
CARDINALITY_TYPE = 'Cardinality'
LOCALE_PARAM = 'locale'
CARDINALITY_PARAM = 'cardinality'

# Plural payload variant -> Cardinality case object
CARDINALITY_CASES = (
    ('one', 'Singular'),
    ('other', 'Plural'),
)


def method_name(key: Key) -> str:
    """Scala method name of a key, validating that all platforms agree on the name"""
    if not key.key_name.all_same():
        names = key.key_name
        raise InconsistentKeyName(
            f"Key names differ between platforms "
            f"(ios={names.ios!r}, android={names.android!r}, web={names.web!r}, other={names.other!r})",
            key=key.display_name,
        )
    return lower_camel(key.key_name.other)


def locale_pattern(locale: str) -> str:
    return f"{LOCALE_TYPE}.{render_ident(upper_camel(locale))}"


class MethodSynthesizer:
    """Synthesizes method declarations for keys over a fixed set of locales"""

    def __init__(self, locales: Sequence[str]):
        self.locales = sorted(set(locales))

    def synthesize(self, key: Key) -> MethodDef:
        """
        Build the method declaration for a key

        Raises:
            CodeGenError: the key cannot be turned into valid code
        """
        name = method_name(key)
        translations = self._translations_by_locale(key)

        placeholders = merge_placeholders(translations.values(), key=key.display_name)
        params = self._params(key, placeholders)

        if key.is_plural:
            clauses = [
                MatchClause(
                    pattern=locale_pattern(locale),
                    expr=self._cardinality_match(key, translations[locale], placeholders),
                )
                for locale in self.locales
            ]
        else:
            clauses = [
                MatchClause(
                    pattern=locale_pattern(locale),
                    expr=self._leaf(translations[locale], placeholders),
                )
                for locale in self.locales
            ]

        logger.debug(f"Synthesized method {name} for key {key.display_name} with {len(params)} parameter(s)")

        return MethodDef(
            name=Ident(name),
            params=tuple(params),
            implicit_params=(Param(Ident(LOCALE_PARAM), LOCALE_TYPE),),
            return_type=RETURN_TYPE,
            body=Match(expr=Var(Ident(LOCALE_PARAM)), clauses=tuple(clauses)),
            comment=key.key_name.other,
        )

    def _translations_by_locale(self, key: Key) -> Dict[str, str]:
        translations: Dict[str, str] = {}
        for translation in key.translations:
            locale = translation.language_iso
            if locale in translations:
                raise DuplicateTranslation(
                    f"More than one translation for locale '{locale}'",
                    key=key.display_name, text=translation.translation,
                )
            translations[locale] = translation.translation

        missing = [locale for locale in self.locales if locale not in translations]
        if missing or not translations:
            raise MissingLocaleCoverage(
                f"Missing translations for locale(s): {', '.join(missing) or 'all'}",
                key=key.display_name,
            )
        return translations

    def _params(self, key: Key, placeholders: List[Placeholder]) -> List[Param]:
        pairs = unique_parameters(placeholders)

        reserved = {LOCALE_PARAM}
        if key.is_plural:
            reserved.add(CARDINALITY_PARAM)

        seen = set()
        for name, kind in pairs:
            if name in seen:
                raise ConflictingPlaceholder(
                    f"Placeholder '{name}' is used with more than one type",
                    key=key.display_name,
                )
            if name in reserved:
                raise ConflictingPlaceholder(
                    f"Placeholder '{name}' clashes with a generated parameter",
                    key=key.display_name,
                )
            seen.add(name)

        params = [Param(Ident(name), kind.scala_type) for name, kind in pairs]
        if key.is_plural:
            params.append(Param(Ident(CARDINALITY_PARAM), CARDINALITY_TYPE))
        return params

    def _cardinality_match(self, key: Key, raw: str, placeholders: List[Placeholder]) -> Match:
        variants = decode_cardinality(raw, key=key.display_name)
        clauses = tuple(
            MatchClause(
                pattern=f"{CARDINALITY_TYPE}.{case}",
                expr=self._leaf(variants[variant], placeholders),
            )
            for variant, case in CARDINALITY_CASES
        )
        return Match(expr=Var(Ident(CARDINALITY_PARAM)), clauses=clauses)

    def _leaf(self, text: str, placeholders: List[Placeholder]) -> StrLit:
        value, interpolated = interpolate(text, placeholders, render_ident)
        return StrLit(value=value, interpolate=interpolated)


def decode_cardinality(raw: str, key: Optional[str] = None) -> Dict[str, str]:
    """
    Decode a plural translation payload

    Returns:
        Dict with 'one' and 'other' texts

    Raises:
        MalformedCardinalityPayload: payload is not a JSON object with string 'one' and 'other'
    """
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedCardinalityPayload(f"Plural translation is not valid JSON: {e}", key=key, text=raw)

    if not isinstance(payload, dict):
        raise MalformedCardinalityPayload("Plural translation is not an object", key=key, text=raw)

    variants = {}
    for variant, _ in CARDINALITY_CASES:
        value = payload.get(variant)
        if not isinstance(value, str):
            raise MalformedCardinalityPayload(f"Plural translation has no '{variant}' text", key=key, text=raw)
        variants[variant] = value
    return variants
