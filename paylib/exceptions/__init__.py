from paylib.exceptions.types import (
    APIException,
    AuthenticationException,
    CardException,
    DecodeException,
    InvalidRequestException,
    NetworkException,
    PaylibException,
    PermissionException,
    RateLimitException,
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
