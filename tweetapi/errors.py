"""Errors raised by the API client and error objects returned by the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class ParameterError(ValueError):
    """An input parameter given to the client is invalid."""

    def __init__(self, message: str = "twitter input parameter error") -> None:
        super().__init__(message)


class HTTPError(Exception):
    """A non-success response whose body could not be decoded as JSON."""

    def __init__(self, status: str, status_code: int, url: str) -> None:
        super().__init__(status, status_code, url)
        self.status = status
        self.status_code = status_code
        self.url = url

    def __str__(self) -> str:
        return f"twitter [{self.url}] status: {self.status} code: {self.status_code}"


@dataclass
class ErrorObj:
    """A partial error reported inside an otherwise successful response."""

    title: str = ""
    detail: str = ""
    type: str = ""
    resource_type: str = ""
    parameter: str = ""
    value: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ErrorObj:
        return cls(
            title=data.get("title", ""),
            detail=data.get("detail", ""),
            type=data.get("type", ""),
            resource_type=data.get("resource_type", ""),
            parameter=data.get("parameter", ""),
            value=data.get("value"),
        )


@dataclass
class ErrorDetail:
    """One error entry of an error response."""

    parameters: Any = None
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ErrorDetail:
        return cls(parameters=data.get("parameters"), message=data.get("message", ""))


class ErrorResponse(Exception):
    """The error body returned by a non-success call."""

    def __init__(
        self,
        status_code: int = 0,
        errors: list[ErrorDetail] | None = None,
        title: str = "",
        detail: str = "",
        type: str = "",
    ) -> None:
        super().__init__(status_code, title, detail)
        self.status_code = status_code
        self.errors: list[ErrorDetail] = list(errors or [])
        self.title = title
        self.detail = detail
        self.type = type

    @classmethod
    def from_dict(cls, data: dict[str, Any], status_code: int = 0) -> ErrorResponse:
        if not isinstance(data, dict):
            raise ValueError("error response body must be a JSON object")
        return cls(
            status_code=status_code,
            errors=[ErrorDetail.from_dict(e) for e in data.get("errors") or []],
            title=data.get("title", ""),
            detail=data.get("detail", ""),
            type=data.get("type", ""),
        )

    def __str__(self) -> str:
        return f"twitter callout status {self.status_code} {self.title}:{self.detail}"