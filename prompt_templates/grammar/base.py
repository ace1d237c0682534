"""Placeholder grammar interface.

The engine builds variable extraction and validation on top of two
primitives:
- tokenize: split a template into literal text and placeholder names
- render: substitute bindings into a token stream

Grammars are stateless; every call works on call-local tokens.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal, Mapping

from prompt_templates.core.errors import UnresolvedVariable

TokenKind = Literal['literal', 'placeholder']


@dataclass(frozen=True)
class Token:
    """
    A piece of a tokenized template.

    Attributes:
        kind: "literal" for text copied as-is, "placeholder" for a variable.
        text: The literal text, or the variable name.
    """

    kind: TokenKind
    text: str


def to_text(name: str, value: Any) -> str:
    """Convert a bound value to its text form.

    Raises:
        UnresolvedVariable: If the value is None.
    """
    if value is None:
        raise UnresolvedVariable(name)
    return str(value)


class PlaceholderGrammar(ABC):
    """Tokenize and render templates in one placeholder syntax."""

    @abstractmethod
    def tokenize(self, template: str) -> list[Token]:
        """Split *template* into tokens."""
        raise NotImplementedError

    def render(self, tokens: list[Token], bindings: Mapping[str, Any]) -> str:
        """Substitute *bindings* into *tokens*.

        Raises:
            UnresolvedVariable: If a placeholder has no binding.
        """
        out: list[str] = []
        for token in tokens:
            if token.kind == 'literal':
                out.append(token.text)
                continue
            if token.text not in bindings:
                raise UnresolvedVariable(token.text)
            out.append(to_text(token.text, bindings[token.text]))
        return ''.join(out)
