"""Rendering exceptions."""


class TemplateError(Exception):
    """Raised when a template cannot be loaded or rendered."""

    def __init__(self, message: str, template_name: str | None = None):
        self.template_name = template_name
        super().__init__(message)
