from fastapi import status


class PaylibException(Exception):
    """Base exception for every error raised by the client."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class NetworkException(PaylibException):
    """Exception raised when the API could not be reached."""

    def __init__(
        self,
        message: str = "Unable to connect to the payments API.",
        details: dict | None = None,
    ):
        super().__init__(message, status.HTTP_503_SERVICE_UNAVAILABLE, details)


class DecodeException(PaylibException):
    """Exception raised when a response body cannot be decoded into its model."""

    def __init__(
        self,
        message: str = "Unable to decode the API response.",
        status_code: int | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status_code, details)


class APIException(PaylibException):
    """Exception raised for non-success responses from the payments API."""

    def __init__(
        self,
        message: str = "A payments API error occurred.",
        status_code: int = status.HTTP_502_BAD_GATEWAY,
        code: str | None = None,
        error_type: str = "api_error",
        param: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status_code, details)
        self.code = code
        self.error_type = error_type
        self.param = param
        self.request_id = request_id


class InvalidRequestException(APIException):
    """Exception raised for invalid parameters or unknown resources."""


class AuthenticationException(APIException):
    """Exception raised when the API key is missing or invalid."""


class PermissionException(APIException):
    """Exception raised when the API key lacks permission for an operation."""


class CardException(APIException):
    """Exception raised for card errors (declined, invalid, etc.)."""

    def __init__(
        self,
        message: str = "Card was declined.",
        code: str | None = None,
        decline_code: str | None = None,
        param: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(
            message,
            status.HTTP_402_PAYMENT_REQUIRED,
            code=code,
            error_type="card_error",
            param=param,
            request_id=request_id,
            details=details,
        )
        self.decline_code = decline_code


class RateLimitException(APIException):
    """Exception raised when the API rate limit is exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again later.",
        code: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(
            message,
            status.HTTP_429_TOO_MANY_REQUESTS,
            code=code,
            error_type="rate_limit_error",
            request_id=request_id,
            details=details,
        )


__all__ = [
    "PaylibException",
    "NetworkException",
    "DecodeException",
    "APIException",
    "InvalidRequestException",
    "AuthenticationException",
    "PermissionException",
    "CardException",
    "RateLimitException",
]
