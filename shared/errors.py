"""
errors.py — Schema Error Taxonomy
==================================
Every rule the visualization schema states has one exception class here.
Validators collect instances of these; guards raise them.

    SchemaError                 (base, a ValueError)
      ├── InvalidIdentifier      – catalog key outside the fixed set
      ├── InconsistentTimestamps – end without start, or end before start
      ├── InconsistentResult     – comparison result with unsorted runs / hidden results
      └── InvalidField           – negative counters, bad discriminators, bad sizes

`code` is stable and is what the HTTP layer sends back to the browser.
"""

from typing import Any, Dict, Optional


class SchemaError(ValueError):
    code: str = "schema_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field   = field

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.field:
            data["field"] = self.field
        return data


class InvalidIdentifier(SchemaError):
    code = "invalid_identifier"


class InconsistentTimestamps(SchemaError):
    code = "inconsistent_timestamps"


class InconsistentResult(SchemaError):
    code = "inconsistent_result"


class InvalidField(SchemaError):
    code = "invalid_field"
