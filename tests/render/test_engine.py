"""Tests for render.engine."""

from pathlib import Path

import jinja2
import pytest

from migrator.migration.variables import build_migration_vars
from migrator.render.engine import BUILD_TEMPLATE, TEST_CASE_TEMPLATE, TemplateRenderer
from migrator.render.errors import TemplateError
from migrator.resolver.models import GoldenPair
from migrator.spec.models import TestCase


@pytest.fixture
def context():
    """Template variables for the number-parser case."""
    test = TestCase(
        test_name="number-parser",
        description="Parses integers.\n\nSecond paragraph.",
        jflex_options=("-q",),
        javac_encoding="utf8",
    )
    goldens = [
        GoldenPair(Path("d/number-parser-1.input"), Path("d/number-parser-1.output")),
        GoldenPair(Path("d/number-parser-2.input"), Path("d/number-parser-2.output")),
    ]
    return build_migration_vars(
        "number-parser", test, Path("d/number-parser.flex"), goldens
    ).template_context()


class TestPackagedTemplates:
    def test_render_build_file(self, context):
        output = TemplateRenderer().render(BUILD_TEMPLATE, context)

        assert 'srcs = ["number-parser.flex"]' in output
        assert 'outputs = ["NumberParser.java"]' in output
        assert 'name = "NumberParserGoldenTest"' in output
        assert '"number-parser-2.output",' in output
        assert '"-encoding", "utf8"' in output
        assert "-q" in output

    def test_render_test_case(self, context):
        output = TemplateRenderer().render(TEST_CASE_TEMPLATE, context)

        assert output.startswith("package jflex.testcase.number_parser;\n")
        assert "public class NumberParserGoldenTest" in output
        assert 'TEST_DIR = "javatests/jflex/testcase/number_parser"' in output
        assert " * Parses integers." in output
        assert "goldenTest0()" in output
        assert "goldenTest1()" in output
        assert "goldenTest2()" not in output
        assert 'Charset.forName("UTF-8")' in output

    def test_render_test_case_without_goldens(self):
        context = build_migration_vars(
            "t", TestCase(test_name="t"), Path("t.flex"), []
        ).template_context()

        output = TemplateRenderer().render(TEST_CASE_TEMPLATE, context)

        assert "goldenTest0" not in output
        assert " * Test case t." in output

    def test_comment_terminator_in_description_is_escaped(self):
        test = TestCase(test_name="t", description="Matches /* comments */ only.")
        context = build_migration_vars("t", test, Path("t.flex"), []).template_context()

        output = TemplateRenderer().render(TEST_CASE_TEMPLATE, context)

        assert " * Matches /* comments *&#47; only." in output
        javadoc = output[output.index("/**") : output.index("public class")]
        assert javadoc.count("*/") == 1


class TestTemplateErrors:
    def test_syntax_error(self):
        renderer = TemplateRenderer(jinja2.DictLoader({"broken.j2": "{% for x in %}"}))

        with pytest.raises(TemplateError) as exc_info:
            renderer.render("broken.j2", {})
        assert exc_info.value.template_name == "broken.j2"
        assert "Failed to parse template" in str(exc_info.value)

    def test_missing_template(self):
        renderer = TemplateRenderer(jinja2.DictLoader({}))

        with pytest.raises(TemplateError) as exc_info:
            renderer.render("missing.j2", {})
        assert "not found" in str(exc_info.value)

    def test_undefined_variable(self):
        renderer = TemplateRenderer(jinja2.DictLoader({"t.j2": "{{ nope }}"}))

        with pytest.raises(TemplateError):
            renderer.render("t.j2", {})

    def test_variable_substitution(self):
        renderer = TemplateRenderer(jinja2.DictLoader({"t.j2": "class {{ name }}\n"}))
        assert renderer.render("t.j2", {"name": "Foo"}) == "class Foo\n"
