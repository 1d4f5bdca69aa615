from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
COPY_ERROR = "COPY_ERROR"
GET_FILE_NAME_ERROR = "GET_FILE_NAME_ERROR"

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"
STATUS_NOT_IMPLEMENTED = "not_implemented"


@dataclass(slots=True)
class MethodCall:
    method: str
    arguments: dict[str, Any] = field(default_factory=dict)
    request_id: str | None = None

    def string_argument(self, name: str) -> str | None:
        """Return a named argument when it is a non-blank string, else ``None``."""
        value = self.arguments.get(name)
        if not isinstance(value, str) or not value.strip():
            return None
        return value


@dataclass(slots=True)
class MethodResult:
    status: str
    value: Any = None
    code: str | None = None
    message: str | None = None
    details: Any = None

    @classmethod
    def success(cls, value: Any) -> MethodResult:
        return cls(status=STATUS_SUCCESS, value=value)

    @classmethod
    def error(cls, code: str, message: str, details: Any = None) -> MethodResult:
        return cls(status=STATUS_ERROR, code=code, message=message, details=details)

    @classmethod
    def not_implemented(cls) -> MethodResult:
        return cls(status=STATUS_NOT_IMPLEMENTED)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS

    def to_payload(self) -> dict[str, Any]:
        if self.status == STATUS_SUCCESS:
            return {"status": self.status, "result": self.value}
        if self.status == STATUS_ERROR:
            return {
                "status": self.status,
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        return {"status": self.status}
