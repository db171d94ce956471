"""
Syntax builder.

One factory method per node kind, plus the two conversions the component
generator relies on: turning a plain UIDL value into a literal expression and
turning a mapping into an object expression. Components receive a builder
instance instead of importing node classes directly, so tests and callers can
swap in their own.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from . import nodes
from .generator import GeneratorError
from .naming import is_identifier_name


class SyntaxBuilder:
    """Factory for JavaScript syntax nodes."""

    def identifier(self, name: str) -> nodes.Identifier:
        return nodes.Identifier(name)

    def string_literal(self, value: str) -> nodes.StringLiteral:
        return nodes.StringLiteral(value)

    def numeric_literal(self, value: Union[int, float]) -> nodes.NumericLiteral:
        return nodes.NumericLiteral(value)

    def boolean_literal(self, value: bool) -> nodes.BooleanLiteral:
        return nodes.BooleanLiteral(value)

    def null_literal(self) -> nodes.NullLiteral:
        return nodes.NullLiteral()

    def this_expression(self) -> nodes.ThisExpression:
        return nodes.ThisExpression()

    def array_expression(
        self, elements: Iterable[nodes.Expression] = ()
    ) -> nodes.ArrayExpression:
        return nodes.ArrayExpression(tuple(elements))

    def object_expression(
        self, properties: Iterable[nodes.ObjectMember] = ()
    ) -> nodes.ObjectExpression:
        return nodes.ObjectExpression(tuple(properties))

    def object_property(
        self, key: nodes.Expression, value: nodes.Expression, shorthand: bool = False
    ) -> nodes.ObjectProperty:
        return nodes.ObjectProperty(key, value, shorthand)

    def object_method(
        self,
        key: nodes.Expression,
        params: Sequence[nodes.Identifier],
        body: nodes.BlockStatement,
    ) -> nodes.ObjectMethod:
        return nodes.ObjectMethod(key, tuple(params), body)

    def arrow_function_expression(
        self,
        params: Sequence[nodes.Identifier],
        body: Union[nodes.Expression, nodes.BlockStatement],
    ) -> nodes.ArrowFunctionExpression:
        return nodes.ArrowFunctionExpression(tuple(params), body)

    def member_expression(
        self, obj: nodes.Expression, prop: nodes.Expression, computed: bool = False
    ) -> nodes.MemberExpression:
        return nodes.MemberExpression(obj, prop, computed)

    def unary_expression(
        self, operator: str, argument: nodes.Expression
    ) -> nodes.UnaryExpression:
        return nodes.UnaryExpression(operator, argument)

    def assignment_expression(
        self, operator: str, left: nodes.Expression, right: nodes.Expression
    ) -> nodes.AssignmentExpression:
        return nodes.AssignmentExpression(operator, left, right)

    def call_expression(
        self, callee: nodes.Expression, arguments: Iterable[nodes.Expression] = ()
    ) -> nodes.CallExpression:
        return nodes.CallExpression(callee, tuple(arguments))

    def expression_statement(
        self, expression: nodes.Expression
    ) -> nodes.ExpressionStatement:
        return nodes.ExpressionStatement(expression)

    def return_statement(
        self, argument: Optional[nodes.Expression] = None
    ) -> nodes.ReturnStatement:
        return nodes.ReturnStatement(argument)

    def block_statement(
        self, body: Iterable[nodes.Statement] = ()
    ) -> nodes.BlockStatement:
        return nodes.BlockStatement(tuple(body))

    def export_default_declaration(
        self, declaration: nodes.Expression
    ) -> nodes.ExportDefaultDeclaration:
        return nodes.ExportDefaultDeclaration(declaration)

    # Helpers built on the factories

    def this_member(self, name: str) -> nodes.MemberExpression:
        """``this.<name>``"""
        return self.member_expression(self.this_expression(), self.identifier(name))

    def property_key(self, key: str) -> nodes.Expression:
        """Identifier key when ``key`` is an identifier name, string otherwise."""
        if is_identifier_name(key):
            return self.identifier(key)
        return self.string_literal(key)

    # Collaborators used by the component generator

    def convert_value_to_literal(self, value: Any) -> nodes.Expression:
        """
        Convert a plain UIDL value into a literal expression.

        Nodes pass through unchanged, which lets callers embed pre-built
        expressions (such as default value factories) inside plain data.

        Raises:
            GeneratorError: If the value has no literal representation
        """
        if isinstance(value, nodes.Node):
            return value
        if isinstance(value, bool):
            return self.boolean_literal(value)
        if isinstance(value, (int, float)):
            return self.numeric_literal(value)
        if isinstance(value, str):
            return self.string_literal(value)
        if value is None:
            return self.null_literal()
        if isinstance(value, Mapping):
            return self.object_to_object_expression(value)
        if isinstance(value, (list, tuple)):
            return self.array_expression(
                self.convert_value_to_literal(item) for item in value
            )

        raise GeneratorError(
            f"Cannot convert value of type {type(value).__name__} to a literal: {value!r}"
        )

    def object_to_object_expression(
        self, mapping: Mapping[str, Any]
    ) -> nodes.ObjectExpression:
        """Convert a mapping into an object expression, preserving key order."""
        properties = []
        for key, value in mapping.items():
            properties.append(
                self.object_property(
                    self.property_key(str(key)), self.convert_value_to_literal(value)
                )
            )
        return self.object_expression(properties)


_default_builder: Optional[SyntaxBuilder] = None


def get_default_builder() -> SyntaxBuilder:
    """Get the shared default builder instance."""
    global _default_builder
    if _default_builder is None:
        _default_builder = SyntaxBuilder()
    return _default_builder
