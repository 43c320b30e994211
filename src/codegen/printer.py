"""
Scala pretty-printer

Renders the syntax tree from ``scala_ast`` with two spaces per nesting level.
"""

import re
from typing import List

from .scala_ast import (
    Ident, StrLit, Var, Match, MatchClause, Param, MethodDef,
    Package, Trait, Object, TopLevel,
)

INDENT = 2

SCALA_KEYWORDS = frozenset([
    'abstract', 'case', 'catch', 'class', 'def', 'do', 'else', 'extends',
    'false', 'final', 'finally', 'for', 'forSome', 'if', 'implicit', 'import',
    'lazy', 'match', 'new', 'null', 'object', 'override', 'package', 'private',
    'protected', 'return', 'sealed', 'super', 'this', 'throw', 'trait', 'true',
    'try', 'type', 'val', 'var', 'while', 'with', 'yield',
])

# Letter or underscore, then letters, digits or underscores (Unicode letters included)
_PLAIN_IDENT = re.compile(r'^[^\W\d]\w*$')


def is_keyword(name: str) -> bool:
    return name in SCALA_KEYWORDS


def render_ident(name: str) -> str:
    """Render a name, quoting keywords and names that are not plain identifiers"""
    if is_keyword(name) or not _PLAIN_IDENT.match(name):
        return f"`{name}`"
    return name


def to_code(node) -> str:
    """Render any node of the syntax tree to Scala source"""
    out: List[str] = []
    _Printer(out).render(node, 0)
    return ''.join(out)


class _Printer:

    def __init__(self, out: List[str]):
        self.out = out

    def write(self, indent: int, text: str):
        self.out.append(' ' * indent + text)

    def render(self, node, indent: int):
        if isinstance(node, TopLevel):
            self._top_level(node, indent)
        elif isinstance(node, Package):
            self.write(indent, 'package ' + '.'.join(render_ident(s.name) for s in node.segments))
        elif isinstance(node, Trait):
            self.write(indent, ('sealed ' if node.sealed else '') + f"trait {render_ident(node.name)}")
        elif isinstance(node, Object):
            self._object(node, indent)
        elif isinstance(node, MethodDef):
            self._method(node, indent)
        elif isinstance(node, Param):
            self.write(indent, self._param(node))
        elif isinstance(node, Match):
            self._match(node, indent)
        elif isinstance(node, MatchClause):
            self._clause(node, indent)
        elif isinstance(node, StrLit):
            self._str_lit(node, indent)
        elif isinstance(node, Var):
            self.write(indent, render_ident(node.name.name))
        elif isinstance(node, Ident):
            self.write(indent, render_ident(node.name))
        else:
            raise TypeError(f"Not a Scala syntax node: {node!r}")

    def _top_level(self, node: TopLevel, indent: int):
        for i, item in enumerate(node.items):
            if i > 0:
                self.write(0, '\n\n')
            self.render(item, indent)
        self.write(0, '\n')

    def _object(self, node: Object, indent: int):
        header = ('case ' if node.case else '') + f"object {render_ident(node.name)}"
        if node.super_type:
            header += f" extends {render_ident(node.super_type)}"
        self.write(indent, header)

        if not node.items and not node.methods:
            return

        self.write(0, ' {\n')
        for i, item in enumerate(node.items):
            if i > 0:
                self.write(0, '\n\n')
            self.render(item, indent + INDENT)

        # One blank line between the nested declarations and the methods
        if node.items and node.methods:
            self.write(0, '\n\n')

        for i, method in enumerate(node.methods):
            if i > 0:
                self.write(0, '\n\n')
            self.render(method, indent + INDENT)

        self.write(0, '\n')
        self.write(indent, '}')

    def _param(self, param: Param) -> str:
        return f"{render_ident(param.name.name)}: {param.ty}"

    def _method(self, node: MethodDef, indent: int):
        if node.comment:
            self.write(indent, '// ' + ' '.join(node.comment.splitlines()) + '\n')

        signature = 'def ' + render_ident(node.name.name)
        if node.params:
            signature += '(' + ', '.join(self._param(p) for p in node.params) + ')'
        if node.implicit_params:
            signature += '(implicit ' + ', '.join(self._param(p) for p in node.implicit_params) + ')'
        signature += f": {node.return_type} = {{\n"
        self.write(indent, signature)

        self.render(node.body, indent + INDENT)
        self.write(0, '\n')
        self.write(indent, '}')

    def _match(self, node: Match, indent: int):
        self.render(node.expr, indent)
        self.write(0, ' match {\n')
        for clause in node.clauses:
            self._clause(clause, indent + INDENT)
            self.write(0, '\n')
        self.write(indent, '}')

    def _clause(self, node: MatchClause, indent: int):
        self.write(indent, f"case {node.pattern} => {{\n")
        self.render(node.expr, indent + INDENT)
        self.write(0, '\n')
        self.write(indent, '}')

    def _str_lit(self, node: StrLit, indent: int):
        prefix = 's' if node.interpolate else ''
        lines = node.value.split('\n')
        if len(lines) == 1:
            self.write(indent, f'{prefix}"""{lines[0]}"""')
            return

        # Continuation lines start at column 0 so the literal keeps its exact text
        self.write(indent, f'{prefix}"""{lines[0]}\n')
        for line in lines[1:-1]:
            self.write(0, line + '\n')
        self.write(0, lines[-1] + '"""')
