"""
JavaScript printer.

Renders the syntax nodes from :mod:`nodes` to source text. Objects are always
broken over several lines; arrays stay on one line unless they contain objects
or arrays themselves.
"""

import math
from typing import Callable, Dict, Optional, Type

from . import nodes
from .config import GeneratorConfig
from .generator import GeneratorError
from .naming import is_identifier_name

_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class JSPrinter:
    """Turns a syntax tree into JavaScript source."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.quote = '"' if self.config.quote_style == "double" else "'"
        self.terminator = ";" if self.config.semicolons else ""
        self._printers = self._build_printer_map()

    def _build_printer_map(self) -> Dict[Type[nodes.Node], Callable[..., str]]:
        return {
            nodes.Identifier: self._print_identifier,
            nodes.StringLiteral: lambda node, level: self.quote_string(node.value),
            nodes.NumericLiteral: lambda node, level: self._format_number(node.value),
            nodes.BooleanLiteral: lambda node, level: "true" if node.value else "false",
            nodes.NullLiteral: lambda node, level: "null",
            nodes.ThisExpression: lambda node, level: "this",
            nodes.ArrayExpression: self._print_array,
            nodes.ObjectExpression: self._print_object,
            nodes.ArrowFunctionExpression: self._print_arrow,
            nodes.MemberExpression: self._print_member,
            nodes.UnaryExpression: self._print_unary,
            nodes.AssignmentExpression: self._print_assignment,
            nodes.CallExpression: self._print_call,
            nodes.ExpressionStatement: self._print_expression_statement,
            nodes.ReturnStatement: self._print_return,
            nodes.BlockStatement: self._print_block,
            nodes.ExportDefaultDeclaration: self._print_export_default,
        }

    def print(self, node: nodes.Node) -> str:
        """Render ``node`` starting at indentation level zero."""
        return self._print(node, 0)

    def _print(self, node: nodes.Node, level: int) -> str:
        printer = self._printers.get(type(node))
        if printer is None:
            raise GeneratorError(f"Cannot print node of type {type(node).__name__}")
        return printer(node, level)

    def _indent(self, level: int) -> str:
        return self.config.indent * level

    # Literals and names

    def quote_string(self, value: str) -> str:
        escaped = []
        for char in value:
            if char in _ESCAPES:
                escaped.append(_ESCAPES[char])
            elif char == self.quote:
                escaped.append("\\" + char)
            elif ord(char) < 0x20:
                escaped.append(f"\\u{ord(char):04x}")
            else:
                escaped.append(char)
        return f"{self.quote}{''.join(escaped)}{self.quote}"

    def _format_number(self, value) -> str:
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
            if value.is_integer() and abs(value) < 1e21:
                return str(int(value))
            return repr(value)
        return str(value)

    def _print_identifier(self, node: nodes.Identifier, level: int) -> str:
        return node.name

    def _print_key(self, key: nodes.Expression, level: int) -> str:
        name = getattr(key, "name", None)
        if name is None and isinstance(key, nodes.StringLiteral):
            name = key.value
        if name is None:
            return f"[{self._print(key, level)}]"
        if is_identifier_name(name):
            return name
        return self.quote_string(name)

    # Compound expressions

    def _print_array(self, node: nodes.ArrayExpression, level: int) -> str:
        if not node.elements:
            return "[]"

        nested = any(
            isinstance(e, (nodes.ObjectExpression, nodes.ArrayExpression))
            for e in node.elements
        )
        if not nested:
            return "[" + ", ".join(self._print(e, level) for e in node.elements) + "]"

        inner = self._indent(level + 1)
        items = [f"{inner}{self._print(e, level + 1)}" for e in node.elements]
        return "[\n" + ",\n".join(items) + f"\n{self._indent(level)}]"

    def _print_object(self, node: nodes.ObjectExpression, level: int) -> str:
        if not node.properties:
            return "{}"

        inner = self._indent(level + 1)
        members = [f"{inner}{self._print_object_member(p, level + 1)}" for p in node.properties]
        return "{\n" + ",\n".join(members) + f"\n{self._indent(level)}}}"

    def _print_object_member(self, prop: nodes.ObjectMember, level: int) -> str:
        key = self._print_key(prop.key, level)

        if isinstance(prop, nodes.ObjectMethod):
            params = ", ".join(self._print(p, level) for p in prop.params)
            return f"{key}({params}) {self._print_block(prop.body, level)}"

        if prop.shorthand and key == self._print(prop.value, level):
            return key
        return f"{key}: {self._print(prop.value, level)}"

    def _print_arrow(self, node: nodes.ArrowFunctionExpression, level: int) -> str:
        params = ", ".join(self._print(p, level) for p in node.params)
        body = self._print(node.body, level)
        if isinstance(node.body, nodes.ObjectExpression):
            body = f"({body})"
        return f"({params}) => {body}"

    def _print_member(self, node: nodes.MemberExpression, level: int) -> str:
        obj = self._print(node.object, level)
        prop = node.property

        if node.computed:
            return f"{obj}[{self._print(prop, level)}]"
        if isinstance(prop, nodes.Identifier) and not is_identifier_name(prop.name):
            # Names such as "is-open" cannot follow a dot
            return f"{obj}[{self.quote_string(prop.name)}]"
        return f"{obj}.{self._print(prop, level)}"

    def _print_unary(self, node: nodes.UnaryExpression, level: int) -> str:
        argument = self._print(node.argument, level)
        if isinstance(
            node.argument,
            (nodes.AssignmentExpression, nodes.ArrowFunctionExpression, nodes.UnaryExpression),
        ):
            argument = f"({argument})"
        separator = " " if node.operator.isalpha() else ""
        return f"{node.operator}{separator}{argument}"

    def _print_assignment(self, node: nodes.AssignmentExpression, level: int) -> str:
        left = self._print(node.left, level)
        right = self._print(node.right, level)
        return f"{left} {node.operator} {right}"

    def _print_call(self, node: nodes.CallExpression, level: int) -> str:
        callee = self._print(node.callee, level)
        if isinstance(node.callee, nodes.ArrowFunctionExpression):
            callee = f"({callee})"
        args = ", ".join(self._print(a, level) for a in node.arguments)
        return f"{callee}({args})"

    # Statements

    def _print_expression_statement(
        self, node: nodes.ExpressionStatement, level: int
    ) -> str:
        return self._print(node.expression, level) + self.terminator

    def _print_return(self, node: nodes.ReturnStatement, level: int) -> str:
        if node.argument is None:
            return "return" + self.terminator
        return f"return {self._print(node.argument, level)}{self.terminator}"

    def _print_block(self, node: nodes.BlockStatement, level: int) -> str:
        if not node.body:
            return "{}"

        inner = self._indent(level + 1)
        lines = [f"{inner}{self._print(s, level + 1)}" for s in node.body]
        return "{\n" + "\n".join(lines) + f"\n{self._indent(level)}}}"

    def _print_export_default(
        self, node: nodes.ExportDefaultDeclaration, level: int
    ) -> str:
        return f"export default {self._print(node.declaration, level)}{self.terminator}"
