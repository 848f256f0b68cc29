"""
Shared utilities for TAILOR.

Common functionality used across contexts:
- Text matching helpers
- Logging setup
- Report formatting
- Timestamps
"""

from tailor.utils.timestamp import format_date, now_exact, today

__all__ = ["format_date", "now_exact", "today"]
