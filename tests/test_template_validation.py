from __future__ import annotations

from typing import Any, Mapping

import pytest

from prompt_templates import (
    BraceGrammar,
    TemplateEngine,
    TemplateFormat,
    TemplateOptions,
    TemplateSyntaxError,
    TemplateValidationError,
    Token,
)

from tests.fixtures.stub_output_parser import StubOutputParser


class ExplodingGrammar(BraceGrammar):
    def render(self, tokens: list[Token], bindings: Mapping[str, Any]) -> str:
        raise RuntimeError('boom')


def test_validate_accepts_renderable_template() -> None:
    engine = TemplateEngine('Sum: {a} + {b}', TemplateOptions(validate=True))
    assert engine.render({'a': 1, 'b': 2}) == 'Sum: 1 + 2'


def test_validate_rejects_unmatched_delimiter() -> None:
    with pytest.raises(TemplateValidationError) as exc_info:
        TemplateEngine('Sum: {a + {b}', TemplateOptions(validate=True))

    assert str(exc_info.value) == 'The template string is not valid.'
    assert isinstance(exc_info.value.__cause__, TemplateSyntaxError)
    assert isinstance(exc_info.value, ValueError)


def test_validate_wraps_any_render_failure() -> None:
    with pytest.raises(TemplateValidationError) as exc_info:
        TemplateEngine('{a}', TemplateOptions(validate=True), grammar=ExplodingGrammar())

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_without_validation_malformed_template_constructs() -> None:
    engine = TemplateEngine('Sum: {a + {b}')
    assert engine.template == 'Sum: {a + {b}'


def test_options_defaults() -> None:
    options = TemplateOptions()

    assert options.template_format is TemplateFormat.FSTRING
    assert options.output_parser is None
    assert options.validate is False


def test_accessors_return_construction_values() -> None:
    parser = StubOutputParser()
    engine = TemplateEngine('Hi {name}', TemplateOptions(output_parser=parser))

    assert engine.template == 'Hi {name}'
    assert engine.template_format is TemplateFormat.FSTRING
    assert engine.output_parser is parser


def test_template_must_be_a_string() -> None:
    with pytest.raises(TypeError):
        TemplateEngine(None)  # type: ignore[arg-type]


def test_output_parser_is_passed_through_untouched() -> None:
    parser = StubOutputParser()
    engine = TemplateEngine('{x}', TemplateOptions(output_parser=parser, validate=True))

    assert engine.output_parser is parser
    assert engine.output_parser.parse(engine.render({'x': 'ok'})) == 'OK'


def test_validate_rejects_empty_format_spec() -> None:
    with pytest.raises(TemplateValidationError) as exc_info:
        TemplateEngine('Value: {a:}', TemplateOptions(validate=True))

    assert isinstance(exc_info.value.__cause__, TemplateSyntaxError)


def test_custom_grammar_keeps_options_format() -> None:
    engine = TemplateEngine('{a}', TemplateOptions(template_format=TemplateFormat.FSTRING), grammar=ExplodingGrammar())

    assert engine.template_format is TemplateFormat.FSTRING
    with pytest.raises(RuntimeError):
        engine.render({'a': 1})
