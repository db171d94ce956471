"""
JavaScript syntax nodes.

A deliberately small, immutable subset of the ESTree/Babel node set: only the
shapes needed to describe a component options object. Nodes compare by value,
which keeps assertions on generated structure simple.
"""

from dataclasses import dataclass
from typing import Tuple, Union


class Node:
    """Base class for all syntax nodes."""

    __slots__ = ()


class Expression(Node):
    """Base class for expression nodes."""

    __slots__ = ()


class Statement(Node):
    """Base class for statement nodes."""

    __slots__ = ()


@dataclass(frozen=True)
class Identifier(Expression):
    name: str


@dataclass(frozen=True)
class StringLiteral(Expression):
    value: str


@dataclass(frozen=True)
class NumericLiteral(Expression):
    value: Union[int, float]


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    value: bool


@dataclass(frozen=True)
class NullLiteral(Expression):
    pass


@dataclass(frozen=True)
class ThisExpression(Expression):
    pass


@dataclass(frozen=True)
class ArrayExpression(Expression):
    elements: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class ObjectProperty(Node):
    """``key: value``, or just ``key`` when shorthand."""

    key: Expression
    value: Expression
    shorthand: bool = False


@dataclass(frozen=True)
class ObjectMethod(Node):
    """``key(params) { body }`` inside an object literal."""

    key: Expression
    params: Tuple[Identifier, ...]
    body: "BlockStatement"


ObjectMember = Union[ObjectProperty, ObjectMethod]


@dataclass(frozen=True)
class ObjectExpression(Expression):
    properties: Tuple[ObjectMember, ...] = ()

    def get(self, key: str):
        """Return the member whose identifier or string key equals ``key``."""
        for prop in self.properties:
            name = getattr(prop.key, "name", getattr(prop.key, "value", None))
            if name == key:
                return prop
        return None

    def keys(self) -> Tuple[str, ...]:
        return tuple(
            getattr(prop.key, "name", getattr(prop.key, "value", ""))
            for prop in self.properties
        )


@dataclass(frozen=True)
class ArrowFunctionExpression(Expression):
    params: Tuple[Identifier, ...]
    body: Union[Expression, "BlockStatement"]


@dataclass(frozen=True)
class MemberExpression(Expression):
    object: Expression
    property: Expression
    computed: bool = False


@dataclass(frozen=True)
class UnaryExpression(Expression):
    operator: str
    argument: Expression


@dataclass(frozen=True)
class AssignmentExpression(Expression):
    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class CallExpression(Expression):
    callee: Expression
    arguments: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Expression


@dataclass(frozen=True)
class ReturnStatement(Statement):
    argument: Expression = None


@dataclass(frozen=True)
class BlockStatement(Statement):
    body: Tuple[Statement, ...] = ()


@dataclass(frozen=True)
class ExportDefaultDeclaration(Statement):
    declaration: Expression
