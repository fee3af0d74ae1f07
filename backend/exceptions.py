from typing import Any, Optional


class APIError(Exception):
    """Error surfaced to the caller as a JSON body with an ``error`` field."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, **extra: Any):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_dict(self) -> dict:
        return {"error": self.message, **self.extra}


class ClauseValidationError(APIError):
    """Bad user input: unknown state, no usable clauses, malformed body."""

    status_code = 400


class GenerationError(APIError):
    """The text-generation service failed or returned nothing usable."""

    status_code = 500
