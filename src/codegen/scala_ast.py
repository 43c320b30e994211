"""
Scala syntax tree used by the generator

Nodes are immutable values with no behaviour; ``printer.to_code`` renders them.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Ident:
    """Identifier, quoted on output when it collides with a keyword"""
    name: str


@dataclass(frozen=True)
class StrLit:
    """Triple-quoted string literal"""
    value: str
    interpolate: bool = False


@dataclass(frozen=True)
class Var:
    """Reference to a value in scope"""
    name: Ident


@dataclass(frozen=True)
class MatchClause:
    """``case <pattern> => { <expr> }``"""
    pattern: str
    expr: 'Expr'


@dataclass(frozen=True)
class Match:
    """``<expr> match { <clauses> }``"""
    expr: 'Expr'
    clauses: Tuple[MatchClause, ...] = ()


Expr = Union[Match, StrLit, Var]


@dataclass(frozen=True)
class Param:
    name: Ident
    ty: str


@dataclass(frozen=True)
class MethodDef:
    name: Ident
    params: Tuple[Param, ...]
    implicit_params: Tuple[Param, ...]
    return_type: str
    body: Expr
    comment: Optional[str] = None


@dataclass(frozen=True)
class Package:
    segments: Tuple[Ident, ...]


@dataclass(frozen=True)
class Trait:
    name: str
    sealed: bool = False


@dataclass(frozen=True)
class Object:
    """``object``/``case object``, optionally holding nested items and methods"""
    name: str
    case: bool = False
    items: Tuple['Item', ...] = ()
    methods: Tuple[MethodDef, ...] = ()
    super_type: Optional[str] = None


Item = Union[Package, Trait, Object]


@dataclass(frozen=True)
class TopLevel:
    """Whole compilation unit"""
    items: Tuple[Item, ...] = field(default_factory=tuple)
