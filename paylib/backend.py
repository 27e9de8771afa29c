from typing import Any, Literal, Protocol, TypeVar

import httpx
from fastapi import status as http_status
from pydantic import BaseModel, ValidationError

from paylib.config import http_logger, settings
from paylib.encoding import Form
from paylib.exceptions.types import (
    APIException,
    AuthenticationException,
    CardException,
    DecodeException,
    InvalidRequestException,
    NetworkException,
    PermissionException,
    RateLimitException,
)

Method = Literal["GET", "POST", "DELETE"]
ModelT = TypeVar("ModelT", bound=BaseModel)


class Backend(Protocol):
    """The network boundary every resource client calls through."""

    def call(
        self,
        method: Method,
        path: str,
        key: str,
        form: Form | None = None,
        dest: type[ModelT] | None = None,
    ) -> ModelT | None: ...


class HttpBackend:
    """
    Backend that talks to the payments API over HTTPS using httpx.

    One request per call: no retries and no backoff. Every failure is raised
    as a PaylibException subclass and logged with the API's Request-Id.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url: str = base_url or settings.API_BASE_URL
        self._timeout: float = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @staticmethod
    def _check_api_key(key: str) -> None:
        """Validate that an API key has been configured.

        Raises
        ------
            AuthenticationException
                If the API key is missing or contains only whitespace. The key is
                expected to come from PAYLIB_API_KEY, configure() or the client.
        """
        if not key or not key.strip():
            http_logger.error("API key is missing; request not sent")
            raise AuthenticationException(
                message="API key is not set. Please set PAYLIB_API_KEY, call configure(api_key=...) or pass key= to the client.",
                status_code=http_status.HTTP_401_UNAUTHORIZED,
                error_type="authentication_error",
            )

    def _init_client(self) -> None:
        """Lazily construct the httpx.Client used for every request.

        Idempotent: an existing client is kept. The caller releases it with
        close() or by using the backend as a context manager.
        """
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
            )
            http_logger.info("HTTP client initialized")

    def close(self) -> None:
        if self._client is not None:
            try:
                self._client.close()
            finally:
                self._client = None
                http_logger.info("HTTP client closed")

    def __enter__(self) -> "HttpBackend":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def call(
        self,
        method: Method,
        path: str,
        key: str,
        form: Form | None = None,
        dest: type[ModelT] | None = None,
    ) -> ModelT | None:
        """
        Performs one request against the API and decodes the response.

        Parameters
        ----------
            method : str
                One of 'GET', 'POST' or 'DELETE'.
            path : str
                Resource path relative to the API base URL, with a leading slash.
            key : str
                Secret API key, sent as the basic-auth username.
            form : Form | None, optional
                Encoded parameters. Sent as the query string for GET and as a
                form-encoded body otherwise. None sends nothing.
            dest : type[BaseModel] | None, optional
                Model the JSON response is validated into. None discards the body.

        Returns
        -------
            BaseModel | None
                The validated ``dest`` instance, or None when ``dest`` is None.

        Raises
        ------
            CardException
                For card_error responses (declined cards, etc.)
            RateLimitException
                For 429 responses
            AuthenticationException
                For 401 responses or a missing API key
            PermissionException
                For 403 responses
            InvalidRequestException
                For invalid_request_error responses (bad parameters, 404s)
            APIException
                For any other non-success response
            NetworkException
                For timeouts and transport failures
            DecodeException
                When the response is not JSON or does not match ``dest``
        """
        self._check_api_key(key)
        if self._client is None:
            self._init_client()

        # Assert client is initialized (for type checker)
        assert self._client is not None, "HTTP client should be initialized"

        payload = form.to_dict() if form else None
        try:
            resp: httpx.Response = self._client.request(
                method,
                path,
                params=payload if method == "GET" else None,
                data=payload if method != "GET" else None,
                auth=httpx.BasicAuth(key, ""),
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise self._api_error(method, path, exc.response) from exc
        except httpx.DecodingError as exc:
            http_logger.error(
                f"Undecodable response body from {method} {path}: {exc}"
            )
            raise DecodeException(
                message=f"Response body from {method} {path} could not be decoded.",
                details={"error": str(exc), "type": "decoding_error"},
            ) from exc
        except httpx.RequestError as exc:
            http_logger.error(
                f"Network error on {method} {path}: {exc.__class__.__name__}: {exc}"
            )
            raise NetworkException(
                details={"error": str(exc), "type": "network_error"},
            ) from exc

        request_id = resp.headers.get("Request-Id")
        http_logger.info(f"{method} {path} succeeded (Request-Id: {request_id or 'N/A'})")

        if dest is None:
            return None

        try:
            body = resp.json()
        except ValueError as exc:
            http_logger.error(f"Non-JSON response from {method} {path}")
            raise DecodeException(
                message=f"Response from {method} {path} is not valid JSON.",
                status_code=resp.status_code,
                details={"body": resp.text, "request_id": request_id},
            ) from exc

        try:
            return dest.model_validate(body)
        except ValidationError as exc:
            http_logger.error(
                f"Response from {method} {path} does not match {dest.__name__}: {exc}"
            )
            raise DecodeException(
                message=f"Response from {method} {path} does not match {dest.__name__}.",
                status_code=resp.status_code,
                details={"errors": exc.errors(), "request_id": request_id},
            ) from exc

    @staticmethod
    def _api_error(method: str, path: str, response: httpx.Response) -> APIException:
        """Maps an error response and its ``{"error": {...}}`` payload to an exception."""
        status = response.status_code
        request_id = response.headers.get("Request-Id")

        # Safely extract error body
        try:
            err_body = response.json()
        except ValueError:
            err_body = {"error": {"message": response.text}}
        if not isinstance(err_body, dict):
            err_body = {"error": {"message": str(err_body)}}

        error_data = err_body.get("error") or {}
        if not isinstance(error_data, dict):
            error_data = {"message": str(error_data)}
        error_type = error_data.get("type")
        error_code = error_data.get("code")
        error_message = error_data.get("message") or f"API error {status}"
        error_param = error_data.get("param")

        http_logger.error(
            f"{method} {path} failed: {status} {error_type or 'unknown'} | "
            f"Code: {error_code or 'N/A'} | Request-Id: {request_id or 'N/A'} | "
            f"Message: {error_message}"
        )

        if error_type == "card_error":
            return CardException(
                message=error_message,
                code=error_code,
                decline_code=error_data.get("decline_code"),
                param=error_param,
                request_id=request_id,
                details=err_body,
            )
        if status == http_status.HTTP_429_TOO_MANY_REQUESTS:
            return RateLimitException(
                message=error_message,
                code=error_code,
                request_id=request_id,
                details=err_body,
            )

        if status == http_status.HTTP_401_UNAUTHORIZED:
            exc_class: type[APIException] = AuthenticationException
        elif status == http_status.HTTP_403_FORBIDDEN:
            exc_class = PermissionException
        elif error_type == "invalid_request_error" or status in (
            http_status.HTTP_400_BAD_REQUEST,
            http_status.HTTP_404_NOT_FOUND,
        ):
            exc_class = InvalidRequestException
        else:
            exc_class = APIException

        return exc_class(
            message=error_message,
            status_code=status,
            code=error_code,
            error_type=error_type or "api_error",
            param=error_param,
            request_id=request_id,
            details=err_body,
        )


__all__ = ["Backend", "HttpBackend", "Method"]
