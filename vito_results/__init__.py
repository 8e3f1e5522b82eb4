"""Result objects for reporting the outcome of an operation

This package provides:
- Result: success flag plus errors, successes and informational messages
- ValueResult: Result carrying a payload that is only kept on success
- MessagePolicy: cleaning, empty-filtering and de-duplication rules
- Snapshot models for exporting and re-importing results as plain data
"""

from .protocols import MessageSource
from .result import MessagePolicy, Result, prepare_value
from .snapshot import ResultSnapshot, ValueResultSnapshot
from .value_result import ValueResult

__all__ = [
    "MessagePolicy",
    "MessageSource",
    "Result",
    "ResultSnapshot",
    "ValueResult",
    "ValueResultSnapshot",
    "prepare_value",
]
