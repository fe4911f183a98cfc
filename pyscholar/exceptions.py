"""
Custom exception classes for PyScholar.

This module defines the error taxonomy shared by the page fetcher, the
HTML parser, the pagination engine and the CLI.
"""


class PyScholarException(Exception):
    """Base exception class for all PyScholar errors."""

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize PyScholar exception.

        Args:
            message: Main error message
            details: Optional additional details
        """
        self.message = message
        self.details = details
        self.context: dict[str, object] = {}
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format the complete error message."""
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"Context: {ctx}")
        return "\n".join(parts)

    def add_context(self, **context) -> "PyScholarException":
        """
        Attach context (e.g. pagination offset, entity kind) to the error.

        The exception is updated in place so that callers can re-raise it
        with a bare ``raise``.

        Args:
            **context: Key/value pairs describing where the error happened

        Returns:
            The same exception instance
        """
        self.context.update(context)
        self.args = (self.format_message(),)
        return self

    @property
    def offset(self) -> int | None:
        """Pagination offset at which the error occurred, if known."""
        return self.context.get("offset")

    @property
    def entity(self) -> str | None:
        """Entity kind being fetched when the error occurred, if known."""
        return self.context.get("entity")


class InvalidRequestError(PyScholarException):
    """
    Raised when a request cannot be built from the given parameters.

    Examples:
        - Empty or malformed author ID
        - Relative or non-HTTP article link
        - Negative fetch quantity
    """

    def __init__(
        self, message: str, field: str | None = None, value: str | None = None
    ):
        """
        Initialize invalid request error.

        Args:
            message: Error message
            field: Parameter that failed validation
            value: Invalid value
        """
        self.field = field
        self.value = value

        details = []
        if field:
            details.append(f"Field: {field}")
        if value is not None:
            details.append(f"Value: {value!r}")

        detail_str = ", ".join(details) if details else None
        super().__init__(message, detail_str)


class TransportError(PyScholarException):
    """
    Raised when a page could not be retrieved.

    Examples:
        - Connection timeout
        - DNS resolution failure
        - HTTP 429 or 5xx response
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        """
        Initialize transport error.

        Args:
            message: Error message
            url: URL that caused the error
            status_code: HTTP status code if applicable
            response_text: Response body text if applicable
        """
        self.url = url
        self.status_code = status_code
        self.response_text = response_text

        details = []
        if url:
            details.append(f"URL: {url}")
        if status_code:
            details.append(f"Status: {status_code}")
        if response_text and len(response_text) < 200:
            details.append(f"Response: {response_text}")

        detail_str = ", ".join(details) if details else None
        super().__init__(message, detail_str)


class ParseError(PyScholarException):
    """
    Raised when a page does not have the expected structure.

    This usually means the remote layout changed.
    """

    def __init__(self, message: str, page: str | None = None):
        """
        Initialize parse error.

        Args:
            message: Error message
            page: Kind of page being parsed
        """
        self.page = page
        detail_str = f"Page: {page}" if page else None
        super().__init__(message, detail_str)


class NotFoundError(PyScholarException):
    """
    Raised when a required entity or field is absent.

    Examples:
        - 404 for an article link
        - Profile summary table without citation cells
    """

    def __init__(self, message: str, resource: str | None = None):
        """
        Initialize not found error.

        Args:
            message: Error message
            resource: Identifier of the missing resource
        """
        self.resource = resource
        detail_str = f"Resource: {resource}" if resource else None
        super().__init__(message, detail_str)
