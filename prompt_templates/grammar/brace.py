"""Brace-delimited placeholder grammar.

- {name}  -> value bound to "name"
- {{ / }} -> literal "{" / "}"

Tokenizing reuses the standard library's format-string parser, then narrows
it: every field must appear in the raw text as exactly ``{name}``.
Positional, attribute, index, conversion and format-spec fields (an empty
``{name:}`` included) are syntax errors.
"""

from __future__ import annotations

import re
from string import Formatter

from prompt_templates.core.errors import TemplateSyntaxError
from .base import PlaceholderGrammar, Token

_IDENT_RX = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def _escape(literal: str) -> str:
    return literal.replace('{', '{{').replace('}', '}}')


class BraceGrammar(PlaceholderGrammar):
    """Grammar for the f-string style ``{name}`` placeholders."""

    def __init__(self) -> None:
        self._formatter = Formatter()

    def tokenize(self, template: str) -> list[Token]:
        try:
            parts = list(self._formatter.parse(template))
        except ValueError as exc:
            raise TemplateSyntaxError(f'Malformed template: {exc}', template) from exc

        tokens: list[Token] = []
        pos = 0
        for literal, field_name, _format_spec, _conversion in parts:
            if literal:
                tokens.append(Token('literal', literal))
                pos += len(_escape(literal))
            if field_name is None:
                continue
            if not _IDENT_RX.fullmatch(field_name):
                raise TemplateSyntaxError(f"Invalid placeholder name: '{field_name}'", template)
            # The parser drops an empty conversion or format spec, so match the raw field.
            raw = '{' + field_name + '}'
            if not template.startswith(raw, pos):
                raise TemplateSyntaxError(
                    f"Unsupported placeholder for '{field_name}': conversions and format specs are not allowed",
                    template,
                )
            tokens.append(Token('placeholder', field_name))
            pos += len(raw)
        return tokens
