from uidl_vue.codegen.core import nodes
from uidl_vue.codegen.core.diagnostics import MISSING_CALLS, UNKNOWN_PROP
from uidl_vue.codegen.vue.methods import EventStatementCompiler
from uidl_vue.uidl import PropCallStatement, PropDefinition, StateChangeStatement

THIS = nodes.ThisExpression()


def this_member(name):
    return nodes.MemberExpression(THIS, nodes.Identifier(name))


PROPS = {"onSelect": PropDefinition(type="func")}


def test_toggle_negates_the_field(builder):
    statement = EventStatementCompiler(builder).compile_state_change(
        StateChangeStatement(modifies="isOpen", new_state="$toggle")
    )

    assert statement == nodes.ExpressionStatement(
        nodes.AssignmentExpression(
            "=", this_member("isOpen"), nodes.UnaryExpression("!", this_member("isOpen"))
        )
    )


def test_other_values_are_assigned_as_literals(builder):
    compiler = EventStatementCompiler(builder)

    number = compiler.compile_state_change(StateChangeStatement("count", 5))
    mapping = compiler.compile_state_change(StateChangeStatement("user", {"id": 1}))
    toggle_text = compiler.compile_state_change(StateChangeStatement("mode", "toggle"))

    assert number.expression.right == nodes.NumericLiteral(5)
    assert mapping.expression.right == nodes.ObjectExpression(
        (nodes.ObjectProperty(nodes.Identifier("id"), nodes.NumericLiteral(1)),)
    )
    assert toggle_text.expression.right == nodes.StringLiteral("toggle")
    assert number.expression.left == this_member("count")


def test_prop_call_emits_event_with_arguments(builder):
    statement = EventStatementCompiler(builder).compile_prop_call(
        PropCallStatement(calls="onSelect", args=("a", 1)), PROPS
    )

    assert statement == nodes.ExpressionStatement(
        nodes.CallExpression(
            this_member("$emit"),
            (nodes.StringLiteral("onSelect"), nodes.StringLiteral("a"), nodes.NumericLiteral(1)),
        )
    )


def test_prop_call_without_arguments(builder):
    statement = EventStatementCompiler(builder).compile_prop_call(
        PropCallStatement(calls="onSelect"), PROPS
    )
    assert statement.expression.arguments == (nodes.StringLiteral("onSelect"),)


def test_unknown_prop_call_is_skipped_and_reported(builder, diagnostics):
    compiler = EventStatementCompiler(builder, diagnostics)
    methods = {
        "click": [
            PropCallStatement(calls="onMissing"),
            StateChangeStatement("clicked", True),
        ],
        "hover": [PropCallStatement(calls="onSelect")],
    }

    compiled = compiler.compile_methods(methods, PROPS)

    assert list(compiled) == ["click", "hover"]
    assert len(compiled["click"]) == 1
    assert compiled["click"][0].expression.left == this_member("clicked")
    assert len(compiled["hover"]) == 1

    [diagnostic] = list(diagnostics)
    assert diagnostic.code == UNKNOWN_PROP
    assert diagnostic.location == "click[0]"
    assert '"onMissing"' in diagnostic.message


def test_missing_calls_is_skipped_and_reported(builder, diagnostics):
    compiler = EventStatementCompiler(builder, diagnostics)
    methods = {
        "submit": [PropCallStatement(calls=None), PropCallStatement(calls="")],
    }

    compiled = compiler.compile_methods(methods, PROPS)

    assert compiled == {"submit": []}
    assert diagnostics.codes() == [MISSING_CALLS, MISSING_CALLS]
    assert diagnostics.messages()[1].startswith("submit[1]: ")


def test_prop_calls_need_prop_definitions(builder, diagnostics):
    compiled = EventStatementCompiler(builder, diagnostics).compile_methods(
        {"click": [PropCallStatement(calls="onSelect")]}
    )
    assert compiled == {"click": []}
    assert diagnostics.codes() == [UNKNOWN_PROP]


def test_statement_order_is_preserved(builder):
    compiled = EventStatementCompiler(builder).compile_methods(
        {
            "reset": [
                StateChangeStatement("a", 1),
                PropCallStatement(calls="onSelect", args=(2,)),
                StateChangeStatement("b", "$toggle"),
            ]
        },
        PROPS,
    )

    body = compiled["reset"]
    assert [type(s.expression).__name__ for s in body] == [
        "AssignmentExpression",
        "CallExpression",
        "AssignmentExpression",
    ]
    assert body[2].expression.left == this_member("b")


def test_warnings_are_logged(builder, caplog):
    with caplog.at_level("WARNING", logger="uidl_vue"):
        EventStatementCompiler(builder).compile_methods(
            {"click": [PropCallStatement(calls="onMissing")]}, PROPS
        )
    assert "onMissing" in caplog.text
