"""
Formatting component - text rendering of arithmetic results.
"""

from .component import (
    DEFAULT_DECIMAL_PLACES,
    ERROR_PREFIX,
    PREDICATE_TEMPLATES,
    RESULT_TEMPLATES,
    format_decimal,
    format_number,
    render_error,
    render_result,
    run,
)
from .ports import FormattingRulesPort

__all__ = [
    # Component
    "run",
    # Pure functions
    "format_decimal",
    "format_number",
    "render_error",
    "render_result",
    # Constants
    "DEFAULT_DECIMAL_PLACES",
    "ERROR_PREFIX",
    "PREDICATE_TEMPLATES",
    "RESULT_TEMPLATES",
    # Ports
    "FormattingRulesPort",
]
