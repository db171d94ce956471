from uidl_vue.uidl import (
    UNSET,
    PropCallStatement,
    PropType,
    StateChangeStatement,
    component_uidl_from_dict,
    event_handlers_from_dict,
    prop_definition_from_dict,
)


def test_component_from_dict(foo_document):
    uidl = component_uidl_from_dict(foo_document)

    assert uidl.name == "Foo"
    assert list(uidl.prop_definitions) == ["title"]
    title = uidl.prop_definitions["title"]
    assert title.type is PropType.STRING
    assert title.is_required is True
    assert title.default_value is UNSET
    assert not title.has_default
    assert uidl.state_definitions["count"].default_value == 0


def test_missing_sections_are_empty():
    uidl = component_uidl_from_dict({"name": "Bare"})
    assert uidl.prop_definitions == {}
    assert uidl.state_definitions == {}


def test_null_default_is_defined():
    definition = prop_definition_from_dict({"type": "string", "defaultValue": None})
    assert definition.has_default
    assert definition.default_value is None


def test_unknown_type_tag_is_kept_verbatim():
    definition = prop_definition_from_dict({"type": "date", "defaultValue": "now"})
    assert definition.type == "date"
    assert definition.to_dict() == {"type": "date", "defaultValue": "now"}


def test_to_dict_uses_wire_names():
    definition = prop_definition_from_dict(
        {"type": "array", "defaultValue": [1], "isRequired": True}
    )
    assert definition.to_dict() == {"type": "array", "defaultValue": [1], "isRequired": True}


def test_event_handlers_from_dict():
    handlers = event_handlers_from_dict(
        {
            "click": [
                {"type": "stateChange", "modifies": "open", "newState": "$toggle"},
                {"type": "propCall", "calls": "onClick", "args": ["a", 1]},
                {"type": "propCall"},
            ],
            "blur": [],
        }
    )

    toggle, call, empty_call = handlers["click"]
    assert toggle == StateChangeStatement(modifies="open", new_state="$toggle")
    assert toggle.is_toggle
    assert toggle.type == "stateChange"
    assert call == PropCallStatement(calls="onClick", args=("a", 1))
    assert call.type == "propCall"
    assert empty_call.calls is None
    assert handlers["blur"] == []


def test_event_handlers_from_none():
    assert event_handlers_from_dict(None) == {}
