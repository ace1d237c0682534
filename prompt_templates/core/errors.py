# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class TemplateError(Exception):
    """Base class for every templating failure."""


class TemplateSyntaxError(TemplateError, ValueError):
    """Raised when a template does not follow the placeholder grammar."""

    def __init__(self, message: str, template: str):
        self.template = template
        super().__init__(message)


class UnresolvedVariable(TemplateError, LookupError):
    """Raised when a placeholder has no value in the render bindings."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing template variable: '{name}'")


class TemplateValidationError(TemplateError, ValueError):
    """Raised at construction when a template cannot be rendered."""

    def __init__(self, template: str):
        self.template = template
        super().__init__('The template string is not valid.')


class TemplateNotFoundError(TemplateError, FileNotFoundError):
    pass
