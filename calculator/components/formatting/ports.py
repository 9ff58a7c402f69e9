"""
Formatting component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class FormattingRulesPort(Protocol):
    """Port for response formatting rules."""

    @property
    def decimal_places(self) -> int:
        """Number of fixed decimal places for floating values."""
        ...
