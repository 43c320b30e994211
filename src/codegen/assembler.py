"""
Assembles the complete Scala compilation unit
"""

import logging
from typing import Dict, List, Mapping, Sequence, Union

from models.key import Key
from .errors import CodeGenError, DuplicateMethodName
from .naming import upper_camel
from .printer import to_code
from .scala_ast import Ident, Package, Trait, Object, MethodDef, TopLevel
from .synthesizer import MethodSynthesizer, CARDINALITY_TYPE, CARDINALITY_CASES, LOCALE_TYPE

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE = 'dk.undo.i18n'
DEFAULT_CONTAINER = 'I18n'

KeySource = Union[Sequence[Key], Mapping[str, Sequence[Key]]]


def collect_locales(projects: Mapping[str, Sequence[Key]]) -> List[str]:
    """All distinct locales of all keys, sorted"""
    locales = set()
    for keys in projects.values():
        for key in keys:
            locales.update(t.language_iso for t in key.translations)
    return sorted(locales)


def _sealed_family(name: str, cases: Sequence[str]) -> list:
    """``sealed trait Name`` plus ``object Name { case object ... }``"""
    return [
        Trait(name=name, sealed=True),
        Object(
            name=name,
            items=tuple(Object(name=case, case=True, super_type=name) for case in cases),
        ),
    ]


class UnitAssembler:
    """Builds the compilation unit holding every generated accessor"""

    def __init__(self, package: str = DEFAULT_PACKAGE, container: str = DEFAULT_CONTAINER):
        self.package = package
        self.container = container

    def build(self, source: KeySource) -> TopLevel:
        """
        Build the syntax tree for the given keys

        Args:
            source: Keys of one project, or a mapping of project name to keys

        Raises:
            CodeGenError: any key cannot be generated; nothing is produced then
        """
        projects = self._as_projects(source)
        locales = collect_locales(projects)
        logger.info(f"Generating {sum(len(k) for k in projects.values())} key(s) "
                    f"for {len(locales)} locale(s): {', '.join(locales)}")

        synthesizer = MethodSynthesizer(locales)

        if len(projects) == 1:
            keys = next(iter(projects.values()))
            container = Object(name=self.container, methods=self._methods(synthesizer, keys))
        else:
            nested = []
            seen = {}
            for project_name in sorted(projects, key=lambda p: (upper_camel(p), p)):
                object_name = upper_camel(project_name)
                if object_name in seen:
                    raise CodeGenError(
                        f"Projects '{seen[object_name]}' and '{project_name}' map to the same object {object_name}"
                    )
                seen[object_name] = project_name
                nested.append(Object(name=object_name, methods=self._methods(synthesizer, projects[project_name])))
            container = Object(name=self.container, items=tuple(nested))

        items = [Package(segments=tuple(Ident(s) for s in self.package.split('.')))]
        items.extend(_sealed_family(CARDINALITY_TYPE, [case for _, case in CARDINALITY_CASES]))
        items.extend(_sealed_family(LOCALE_TYPE, self._locale_cases(locales)))
        items.append(container)
        return TopLevel(items=tuple(items))

    def render(self, source: KeySource) -> str:
        """Build and render the compilation unit to Scala source"""
        return to_code(self.build(source))

    def _as_projects(self, source: KeySource) -> Dict[str, Sequence[Key]]:
        if isinstance(source, Mapping):
            if not source:
                return {self.container: []}
            return dict(source)
        return {self.container: list(source)}

    def _locale_cases(self, locales: List[str]) -> List[str]:
        seen = {}
        for locale in locales:
            case = upper_camel(locale)
            if case in seen:
                raise CodeGenError(f"Locales '{seen[case]}' and '{locale}' map to the same case object {case}")
            seen[case] = locale
        return list(seen)

    def _methods(self, synthesizer: MethodSynthesizer, keys: Sequence[Key]) -> tuple:
        methods: Dict[str, MethodDef] = {}
        ordered = sorted(keys, key=lambda k: (k.key_name.other, k.key_id))
        for key in ordered:
            method = synthesizer.synthesize(key)
            name = method.name.name
            if name in methods:
                raise DuplicateMethodName(
                    f"Method {name} is generated by both '{methods[name].comment}' and '{key.key_name.other}'",
                    key=key.display_name,
                )
            methods[name] = method
        return tuple(methods[name] for name in sorted(methods))


def generate_code(source: KeySource, package: str = DEFAULT_PACKAGE, container: str = DEFAULT_CONTAINER) -> str:
    """Render the Scala source for the given keys"""
    return UnitAssembler(package=package, container=container).render(source)
