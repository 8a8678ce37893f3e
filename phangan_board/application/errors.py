class ApplicationError(Exception):
    """Base application-layer error, independent from transport concerns."""


class ApiError(ApplicationError):
    """Raised when the board API answers with a non-2xx status."""

    def __init__(self, status_code: int, status_text: str, server_message: str | None = None) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.server_message = server_message
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.server_message:
            return self.server_message
        return f"API Error: {self.status_code} {self.status_text}".rstrip()

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class NetworkError(ApplicationError):
    """Raised when the request never produced an HTTP response."""


class MalformedResponseError(ApplicationError):
    """Raised when a 2xx response body is not the JSON shape the operation expects."""


class ValidationError(ApplicationError):
    """Raised when local form validation fails; carries one message per field."""

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        super().__init__("; ".join(f"{field}: {message}" for field, message in self.field_errors.items()))


def describe_error(exc: Exception, fallback: str) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return fallback
