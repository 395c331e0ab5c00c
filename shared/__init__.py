"""
shared/
-------
Cross-cutting pieces every layer leans on.

    from shared import Config, get_logger
    from shared import SchemaError, InvalidIdentifier, …
"""

from shared.config import Config
from shared.logger import setup_logging, get_logger
from shared.errors import (
    SchemaError,
    InvalidIdentifier,
    InconsistentTimestamps,
    InconsistentResult,
    InvalidField,
)

__all__ = [
    "Config",
    "setup_logging",
    "get_logger",
    "SchemaError",
    "InvalidIdentifier",
    "InconsistentTimestamps",
    "InconsistentResult",
    "InvalidField",
]
