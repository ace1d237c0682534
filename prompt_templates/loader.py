"""Template loader and version selector."""

from __future__ import annotations

from pathlib import Path

from prompt_templates.config import settings
from prompt_templates.core.errors import TemplateNotFoundError
from prompt_templates.engine import TemplateEngine
from prompt_templates.observability.tracing import log_event
from prompt_templates.schemas import TemplateOptions


def template_path(module: str, version: str, base_dir: Path | None = None) -> Path:
    root = base_dir if base_dir is not None else settings.template_dir
    return Path(root) / module / version / 'prompt.md'


def load_template(
    module: str,
    version: str,
    *,
    base_dir: Path | None = None,
    options: TemplateOptions | None = None,
) -> TemplateEngine:
    """Load a template by module and version.

    Expected layout:
        <base_dir>/
          <module>/
            <version>/
              prompt.md

    Args:
        module: Template module name (e.g. "notification").
        version: Version folder name (e.g. "v1").
        base_dir: Root folder; defaults to ``settings.template_dir``.
        options: Options for the returned engine.

    Returns:
        A TemplateEngine over the file contents.

    Raises:
        TemplateNotFoundError: If the template file is missing.
        TemplateValidationError: If validation is enabled and fails.
    """
    path = template_path(module, version, base_dir)
    if not path.is_file():
        raise TemplateNotFoundError(f'Template not found: {module}/{version}')
    engine = TemplateEngine(path.read_text(encoding='utf-8'), options)
    log_event('template.loaded', module=module, version=version, path=str(path))
    return engine
