import pytest

from tests.conftest import FOO_SCRIPT
from uidl_vue import generate_from_uidl, get_generator
from uidl_vue.codegen.core.config import GeneratorConfig
from uidl_vue.codegen.core.generator import GeneratorError, UnsupportedPropTypeError, generate_code
from uidl_vue.codegen.vue import VueGenerator
from uidl_vue.uidl import ComponentUIDL, PropCallStatement, PropDefinition

HEADER = "Generated from UIDL component Foo. Do not edit by hand."


def test_generate_from_uidl_sfc(foo_document):
    result = generate_from_uidl(foo_document)

    assert result.success
    assert result.warnings == []
    assert result.code == f"<!-- {HEADER} -->\n<script>\n{FOO_SCRIPT}\n</script>\n"
    assert result.metadata == {
        "component": "Foo",
        "language": "vue",
        "file_extension": ".vue",
        "prop_count": 1,
        "state_count": 1,
        "method_count": 1,
        "dependency_count": 1,
    }


def test_generate_from_uidl_js_module(foo_document):
    result = generate_from_uidl(foo_document, {"output_format": "js"})

    assert result.code == f"// {HEADER}\n{FOO_SCRIPT}\n"
    assert result.metadata["file_extension"] == ".js"


def test_without_comments(foo_document):
    result = generate_from_uidl(foo_document, GeneratorConfig(add_comments=False, output_format="js"))
    assert result.code == FOO_SCRIPT + "\n"


def test_crlf_line_endings(foo_document):
    result = generate_from_uidl(foo_document, {"line_ending": "\r\n", "add_comments": False})
    assert result.code.startswith("<script>\r\nexport default {\r\n")
    assert "\n" not in result.code.replace("\r\n", "")


def test_unsupported_prop_type_gives_failed_result():
    generator = VueGenerator()
    uidl = ComponentUIDL(name="Foo", prop_definitions={"at": PropDefinition(type="date")})

    result = generate_code(generator, uidl)

    assert not result.success
    assert result.code == ""
    assert isinstance(result.exception, UnsupportedPropTypeError)
    assert '{"type": "date"}' in result.error_message


def test_generator_raises_directly():
    uidl = ComponentUIDL(name="Foo", prop_definitions={"at": PropDefinition(type="date")})
    with pytest.raises(UnsupportedPropTypeError):
        VueGenerator().generate(uidl)


def test_warnings_reach_the_result():
    generator = VueGenerator()
    uidl = ComponentUIDL(name="Foo")

    result = generate_code(generator, uidl, [], {"click": [PropCallStatement(calls="onGo")]})

    assert result.success
    assert result.warnings == ['click[0]: No prop definition was found for function "onGo"']
    assert "click() {}" in result.code


def test_diagnostics_reset_between_runs():
    generator = VueGenerator()
    methods = {"click": [PropCallStatement(calls="onGo")]}

    generator.generate(ComponentUIDL(name="Foo"), [], methods)
    generator.generate(ComponentUIDL(name="Foo"), [], methods)

    assert len(generator.diagnostics) == 1


def test_invalid_dependency_name_fails_generation():
    result = generate_code(VueGenerator(), ComponentUIDL(name="Foo"), ["my-comp"])

    assert not result.success
    assert "my-comp" in result.error_message


def test_get_generator_config_sources(tmp_path):
    path = tmp_path / "vue.json"
    path.write_text('{"semicolons": true}', encoding="utf-8")

    assert get_generator(str(path)).config.semicolons is True
    assert get_generator({"indent_size": 4}).config.indent_size == 4
    assert get_generator().config.output_format == "sfc"
    with pytest.raises(GeneratorError):
        get_generator(42)


def test_template_dir_overrides_builtin_frame(tmp_path, foo_document):
    (tmp_path / "component.vue").write_text(
        "<template><div /></template>\n<script>\n{{ script }}\n</script>\n", encoding="utf-8"
    )

    result = generate_from_uidl(foo_document, {"template_dir": str(tmp_path)})

    assert result.code == f"<template><div /></template>\n<script>\n{FOO_SCRIPT}\n</script>\n"


def test_template_dir_falls_back_to_builtins(tmp_path, foo_document):
    result = generate_from_uidl(
        foo_document, {"template_dir": str(tmp_path), "output_format": "js", "add_comments": False}
    )
    assert result.code == FOO_SCRIPT + "\n"
