"""Brace-delimited prompt templates.

Render ``{name}`` placeholders strictly, list the variables a template
needs, and optionally validate templates when they are built.
"""
from .core.errors import (
    TemplateError,
    TemplateSyntaxError,
    UnresolvedVariable,
    TemplateValidationError,
    TemplateNotFoundError,
)
from .schemas import TemplateFormat, TemplateOptions, OutputParser
from .grammar import PlaceholderGrammar, BraceGrammar, Token, grammar_for
from .engine import TemplateEngine
from .loader import load_template
