import json

import pytest

from uidl_vue.codegen.core.builder import SyntaxBuilder
from uidl_vue.codegen.core.diagnostics import Diagnostics
from uidl_vue.uidl import (
    ComponentUIDL,
    PropDefinition,
    PropType,
    StateChangeStatement,
)

FOO_DOCUMENT = {
    "name": "Foo",
    "propDefinitions": {"title": {"type": "string", "isRequired": True}},
    "stateDefinitions": {"count": {"defaultValue": 0}},
    "dependencies": ["Bar"],
    "methods": {
        "increment": [{"type": "stateChange", "modifies": "count", "newState": "$toggle"}]
    },
}

FOO_SCRIPT = """\
export default {
  name: 'Foo',
  props: {
    title: {
      required: true,
      type: String
    }
  },
  components: {
    Bar
  },
  data() {
    return {
      count: 0
    }
  },
  methods: {
    increment() {
      this.count = !this.count
    }
  }
}"""


@pytest.fixture
def builder():
    return SyntaxBuilder()


@pytest.fixture
def diagnostics():
    return Diagnostics()


@pytest.fixture
def foo_uidl():
    return ComponentUIDL(
        name="Foo",
        prop_definitions={"title": PropDefinition(type=PropType.STRING, is_required=True)},
    )


@pytest.fixture
def foo_methods():
    return {"increment": [StateChangeStatement(modifies="count", new_state="$toggle")]}


@pytest.fixture
def foo_document():
    return json.loads(json.dumps(FOO_DOCUMENT))


@pytest.fixture
def foo_file(tmp_path, foo_document):
    path = tmp_path / "foo.json"
    path.write_text(json.dumps(foo_document), encoding="utf-8")
    return path
