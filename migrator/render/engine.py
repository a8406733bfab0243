"""Jinja2 rendering of the migration templates."""

from typing import Any

import jinja2

from .errors import TemplateError

BUILD_TEMPLATE = "BUILD.j2"
TEST_CASE_TEMPLATE = "TestCase.java.j2"


class TemplateRenderer:
    """Render named templates with a variable bag.

    Templates are loaded from the ``migrator/templates`` package directory
    unless another Jinja2 loader is given.
    """

    def __init__(self, loader: jinja2.BaseLoader | None = None):
        self.environment = jinja2.Environment(
            loader=loader or jinja2.PackageLoader("migrator", "templates"),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template.

        Args:
            template_name: Resource name of the template.
            context: Variables available to the template.

        Returns:
            The rendered text.

        Raises:
            TemplateError: If the template is missing, malformed, or uses an
                undefined variable.
        """
        try:
            template = self.environment.get_template(template_name)
            return template.render(**context)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(
                f"Failed to parse template {template_name} (line {e.lineno}): {e.message}",
                template_name,
            ) from e
        except jinja2.TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}", template_name) from e
        except jinja2.TemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}", template_name
            ) from e
