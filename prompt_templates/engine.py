"""Template engine (strict placeholder substitution).

The engine owns one immutable template string and re-parses it on every
call, so a single instance can be shared across threads without locking.
"""

from __future__ import annotations

from typing import Any, Mapping

from prompt_templates.core.errors import TemplateValidationError
from prompt_templates.grammar import PlaceholderGrammar, grammar_for
from prompt_templates.observability.tracing import log_event
from prompt_templates.schemas import OutputParser, TemplateFormat, TemplateOptions

_VALIDATION_VALUE = 'foo'


class TemplateEngine:
    """Render a template and introspect the variables it needs.

    Args:
        template: Template text containing ``{name}`` placeholders.
        options: Format, output parser and validation flag.
        grammar: Tokenize/render implementation; defaults to the grammar
            registered for ``options.template_format``. A custom grammar
            overrides the format for parsing and rendering, while
            ``template_format`` keeps reporting the value from *options*.

    Raises:
        TypeError: If *template* is not a string.
        TemplateValidationError: If ``options.validate`` is set and the
            template cannot be rendered.

    Examples:
        >>> TemplateEngine('Hello {name}').render({'name': 'Ada'})
        'Hello Ada'
    """

    def __init__(
        self,
        template: str,
        options: TemplateOptions | None = None,
        *,
        grammar: PlaceholderGrammar | None = None,
    ) -> None:
        if not isinstance(template, str):
            raise TypeError(f'template must be a str, not {type(template).__name__}')
        opts = options or TemplateOptions()
        self._template = template
        self._template_format = opts.template_format
        self._output_parser = opts.output_parser
        self._grammar = grammar or grammar_for(opts.template_format)
        if opts.validate:
            self._validate_template()

    @property
    def template(self) -> str:
        return self._template

    @property
    def template_format(self) -> TemplateFormat:
        return self._template_format

    @property
    def output_parser(self) -> OutputParser | None:
        return self._output_parser

    def render(self, bindings: Mapping[str, Any] | None = None) -> str:
        """Render the template.

        Args:
            bindings: Mapping of variable names to values. Values are
                converted with ``str()``.

        Returns:
            Rendered text.

        Raises:
            TemplateSyntaxError: If the template is malformed.
            UnresolvedVariable: If a placeholder has no binding.
        """
        tokens = self._grammar.tokenize(self._template)
        return self._grammar.render(tokens, bindings if bindings is not None else {})

    def get_variable_names(self) -> set[str]:
        """Return the distinct placeholder names in the template.

        Raises:
            TemplateSyntaxError: If the template is malformed.
        """
        return {
            token.text
            for token in self._grammar.tokenize(self._template)
            if token.kind == 'placeholder'
        }

    def _validate_template(self) -> None:
        try:
            names = self.get_variable_names()
            self.render({name: _VALIDATION_VALUE for name in names})
        except Exception as exc:  # noqa: BLE001
            raise TemplateValidationError(self._template) from exc
        log_event('template.validated', variables=len(names))

    def __repr__(self) -> str:
        return f'{type(self).__name__}(template={self._template!r}, template_format={self._template_format.value!r})'
