"""Types shared by the template engine.

Construction options live in one frozen structure instead of a set of
overloaded constructors:
- every field is optional
- defaults come from settings when the options are created
- explicit values always win
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class TemplateFormat(str, Enum):
    """Placeholder syntaxes understood by the engine."""

    FSTRING = 'f-string'


@runtime_checkable
class OutputParser(Protocol):
    """Parses model output produced from a rendered template.

    The engine only carries a reference for downstream consumers.
    """

    def parse(self, text: str) -> Any:
        ...

    def get_format(self) -> str:
        ...


def _default_format() -> TemplateFormat:
    from prompt_templates.config import settings

    return settings.default_template_format


def _default_validate() -> bool:
    from prompt_templates.config import settings

    return settings.validate_templates


@dataclass(frozen=True)
class TemplateOptions:
    """
    Optional construction settings for a TemplateEngine.

    Attributes:
        template_format: Placeholder syntax (defaults to settings, f-string).
        output_parser: Parser handed through to consumers of the template.
        validate: Render once with dummy values at construction time.
    """

    template_format: TemplateFormat = field(default_factory=_default_format)
    output_parser: OutputParser | None = None
    validate: bool = field(default_factory=_default_validate)
