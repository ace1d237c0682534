"""Placeholder grammars, one per TemplateFormat."""
from prompt_templates.schemas import TemplateFormat

from .base import PlaceholderGrammar, Token, TokenKind, to_text
from .brace import BraceGrammar

_GRAMMARS: dict[TemplateFormat, PlaceholderGrammar] = {
    TemplateFormat.FSTRING: BraceGrammar(),
}


def grammar_for(template_format: TemplateFormat) -> PlaceholderGrammar:
    """Return the grammar for *template_format*.

    Raises:
        ValueError: If the format has no grammar.
    """
    try:
        return _GRAMMARS[TemplateFormat(template_format)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f'Unsupported template format: {template_format!r}') from exc
