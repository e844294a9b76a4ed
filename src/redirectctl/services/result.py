"""ServiceResult and ServiceError — what every rule operation returns.

INVARIANT: Rule operations never raise for a user mistake or a store
problem. They return ``ok=False`` with an error code the CLI maps to
exit status 1.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is stable (``DUPLICATE_SOURCE``, ``NOT_FOUND``, ...);
    ``message`` is for people; ``detail`` carries the offending values.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one rule operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``add_rule``, ``delete_rule``, ...).
        data: Operation-specific payload on success.
        warnings: Advisories that did not block the operation.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result carrying a single error."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
