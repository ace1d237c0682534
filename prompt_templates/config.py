from pathlib import Path

from pydantic_settings import BaseSettings

from prompt_templates.schemas import TemplateFormat


class Settings(BaseSettings):
    # Engine defaults
    default_template_format: TemplateFormat = TemplateFormat.FSTRING
    validate_templates: bool = False

    # Loader
    template_dir: Path = Path('prompts')

    # Observability
    log_events: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "PROMPT_TEMPLATES_"


settings = Settings()
