"""Output formatting for migration results."""

from .formatter import format_batch_result

__all__ = ["format_batch_result"]
