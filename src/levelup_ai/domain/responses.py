"""Uniform response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from levelup_ai.domain.errors import ErrorKind

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope returned by every plan operation."""

    success: bool
    data: DataT | None = None
    error: str | None = None
    message: str | None = None
    error_kind: ErrorKind | None = Field(default=None, exclude=True)

    @classmethod
    def ok(cls, data: DataT, message: str | None = None) -> "ApiResponse[DataT]":
        """Build a success envelope."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def failure(
        cls,
        error: str,
        message: str | None = None,
        kind: ErrorKind = ErrorKind.INTERNAL,
    ) -> "ApiResponse[DataT]":
        """Build a failure envelope."""
        return cls(success=False, error=error, message=message, error_kind=kind)

    def to_json(self) -> dict[str, object]:
        """Serialize with camelCase keys and without unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
