"""Template rendering for migrated test cases."""

from .engine import BUILD_TEMPLATE, TEST_CASE_TEMPLATE, TemplateRenderer
from .errors import TemplateError

__all__ = [
    "BUILD_TEMPLATE",
    "TEST_CASE_TEMPLATE",
    "TemplateRenderer",
    "TemplateError",
]
