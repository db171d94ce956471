import pytest

from uidl_vue.codegen.core import nodes
from uidl_vue.codegen.core.config import GeneratorConfig
from uidl_vue.codegen.core.generator import GeneratorError
from uidl_vue.codegen.core.printer import JSPrinter


@pytest.fixture
def printer():
    return JSPrinter()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain", "'plain'"),
        ("it's", "'it\\'s'"),
        ('say "hi"', "'say \"hi\"'"),
        ("a\\b", "'a\\\\b'"),
        ("line\nbreak", "'line\\nbreak'"),
        ("\x01", "'\\u0001'"),
    ],
)
def test_strings_are_escaped(printer, value, expected):
    assert printer.print(nodes.StringLiteral(value)) == expected


def test_double_quote_style():
    printer = JSPrinter(GeneratorConfig(quote_style="double"))
    assert printer.print(nodes.StringLiteral('it\'s "x"')) == '"it\'s \\"x\\""'


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, "3"),
        (-2, "-2"),
        (1.5, "1.5"),
        (2.0, "2"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1e300, "1e+300"),
        (-1e300, "-1e+300"),
        (float("inf"), "Infinity"),
    ],
)
def test_numbers(printer, value, expected):
    assert printer.print(nodes.NumericLiteral(value)) == expected


def test_literals(printer, builder):
    value = builder.convert_value_to_literal([True, False, None])
    assert printer.print(value) == "[true, false, null]"


def test_nested_arrays_break_lines(printer, builder):
    value = builder.convert_value_to_literal([[1], {"a": 1}])
    assert printer.print(value) == "[\n  [1],\n  {\n    a: 1\n  }\n]"


def test_empty_collections(printer, builder):
    assert printer.print(builder.convert_value_to_literal({})) == "{}"
    assert printer.print(builder.convert_value_to_literal([])) == "[]"


def test_keys_are_quoted_only_when_needed(printer, builder):
    value = builder.convert_value_to_literal({"aria-label": "x", "ok": 1, "class": 2})
    assert printer.print(value) == "{\n  'aria-label': 'x',\n  ok: 1,\n  class: 2\n}"


def test_arrow_with_object_body_is_parenthesized(printer, builder):
    arrow = builder.arrow_function_expression([], builder.convert_value_to_literal({"a": 1}))
    assert printer.print(arrow) == "() => ({\n  a: 1\n})"


def test_arrow_with_array_body(printer, builder):
    arrow = builder.arrow_function_expression([], builder.convert_value_to_literal([1]))
    assert printer.print(arrow) == "() => [1]"


def test_member_with_invalid_identifier_uses_brackets(printer, builder):
    assert printer.print(builder.this_member("is-open")) == "this['is-open']"
    assert printer.print(builder.this_member("$emit")) == "this.$emit"
    assert printer.print(builder.this_member("default")) == "this.default"


def test_empty_method_body(printer, builder):
    method = builder.object_method(builder.identifier("click"), [], builder.block_statement())
    obj = builder.object_expression([method])
    assert printer.print(obj) == "{\n  click() {}\n}"


def test_semicolons_and_tabs(builder):
    printer = JSPrinter(GeneratorConfig(semicolons=True, use_tabs=True))
    emit = builder.expression_statement(
        builder.call_expression(builder.this_member("$emit"), [builder.string_literal("go")])
    )
    method = builder.object_method(builder.identifier("go"), [], builder.block_statement([emit]))
    declaration = builder.export_default_declaration(builder.object_expression([method]))

    assert printer.print(declaration) == (
        "export default {\n\tgo() {\n\t\tthis.$emit('go');\n\t}\n};"
    )


def test_indent_size(builder):
    printer = JSPrinter(GeneratorConfig(indent_size=4))
    assert printer.print(builder.convert_value_to_literal({"a": 1})) == "{\n    a: 1\n}"


def test_shorthand_property(printer, builder):
    prop = builder.object_property(builder.identifier("Bar"), builder.identifier("Bar"), True)
    assert printer.print(builder.object_expression([prop])) == "{\n  Bar\n}"


def test_unknown_node_type_fails(printer):
    class Custom(nodes.Expression):
        pass

    with pytest.raises(GeneratorError):
        printer.print(Custom())
