from __future__ import annotations


class OvirtApiError(Exception):
    """Base client error."""


class UnknownOptionError(OvirtApiError):
    def __init__(self, option: str):
        super().__init__(f"Unknown option: {option}")
        self.option = option


class MissingFieldError(OvirtApiError):
    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"{field} is required")
        self.field = field


class UnsupportedActionError(OvirtApiError):
    def __init__(self, action: str | None):
        super().__init__(f"Unsupported action: {action}")
        self.action = action


class XMLParseError(OvirtApiError):
    """Response body is not well-formed XML."""

    def __init__(self, message: str, status_code: int | None = None, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
