"""Xverify verification API client.

Four operations map onto the provider's endpoint codes:

    verify_email    -> ev
    verify_phone    -> pv
    verify_address  -> av
    verify_combined -> aio

Each call validates its inputs, sends exactly one GET and returns a plain
dict. Nothing raises out of a public operation: transport and HTTP failures
come back as `{"status": "error", "message": ..., "status_code": ...}`.
"""

from typing import Any

import httpx

from xverify_client.logging.audit import (
    RequestTimer,
    generate_request_id,
    get_audit_logger,
    param_names,
    request_id_var,
)
from xverify_client.transport.http import DEFAULT_BASE_URI, build_http_client
from xverify_client.transport.results import (
    NETWORK_ERROR_MESSAGE,
    RequestFailure,
    RequestResult,
    RequestSuccess,
)
from xverify_client.verification.formatting import (
    STATUS_MESSAGES,
    UNKNOWN_ERROR_MESSAGE,
    format_response,
    get_status_message,
    validation_error,
)


class VerificationClient:
    """Synchronous client for the Xverify v2 API."""

    def __init__(
        self,
        api_key: str,
        domain: str,
        config_options: dict[str, Any] | None = None,
        base_uri: str = DEFAULT_BASE_URI,
    ):
        self._api_key = api_key
        self._domain = domain
        self._base_uri = base_uri
        self._client = build_http_client(base_uri, config_options)

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def base_uri(self) -> str:
        return self._base_uri

    def verify_email(self, email: str = "", options: dict[str, Any] | None = None) -> dict:
        if not email:
            return self._reject("ev", ["email"])
        response = self._make_request("ev", {**(options or {}), "email": email})
        return format_response(response)

    def verify_phone(self, phone: str = "", options: dict[str, Any] | None = None) -> dict:
        if not phone:
            return self._reject("pv", ["phone"])
        response = self._make_request("pv", {**(options or {}), "phone": phone})
        return format_response(response)

    def verify_address(self, params: dict[str, Any] | None = None) -> dict:
        """Verify a postal address.

        Requires `address1` plus at least one of `city` or `zip`.
        """
        params = dict(params or {})
        if not params.get("address1") or not (params.get("city") or params.get("zip")):
            return self._reject("av", ["address1", "city|zip"])

        params["api_key"] = self._api_key
        params["domain"] = self._domain

        response = self._make_request("av", params)
        return format_response(response)

    def verify_combined(self, params: dict[str, Any] | None = None) -> dict:
        """All-in-one verification of any mix of email, phone and address."""
        params = dict(params or {})
        if not any(params.get(field) for field in ("email", "phone", "address1")):
            return self._reject("aio", ["email|phone|address1"])
        response = self._make_request("aio", params)
        return format_response(response)

    def close(self) -> None:
        if not self._client.is_closed:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _reject(self, endpoint: str, required: list[str]) -> dict:
        get_audit_logger().warning(
            "Verification rejected: missing parameter",
            extra={"audit_data": {"endpoint": endpoint, "required": required}},
        )
        return validation_error()

    def _make_request(self, endpoint: str, params: dict[str, Any]) -> RequestResult:
        """Send one GET and reduce the outcome to a RequestResult."""
        logger = get_audit_logger()
        token = request_id_var.set(generate_request_id())
        try:
            query = {**params, "api_key": self._api_key, "domain": self._domain}

            with RequestTimer() as timer:
                result = self._send(endpoint, query)

            audit_data = {
                "endpoint": endpoint,
                "params": param_names(query),
                "status_code": result.status_code,
                "latency_ms": timer.elapsed_ms,
            }
            if isinstance(result, RequestFailure):
                audit_data["error_kind"] = result.kind
                logger.warning(f"Verification failed: {result.error}", extra={"audit_data": audit_data})
            else:
                logger.info("Verification completed", extra={"audit_data": audit_data})
            return result
        finally:
            request_id_var.reset(token)

    def _send(self, endpoint: str, query: dict[str, Any]) -> RequestResult:
        try:
            response = self._client.get(endpoint, params=query)
        except httpx.TransportError:
            return RequestFailure(NETWORK_ERROR_MESSAGE, 0, "network")
        except httpx.HTTPStatusError as e:
            return _status_error_failure(e)
        except Exception as e:
            return RequestFailure(str(e) or UNKNOWN_ERROR_MESSAGE, 0, "unknown")

        status_code = response.status_code
        if status_code >= 400:
            return RequestFailure(get_status_message(status_code), status_code, "http")

        try:
            data = response.json()
        except (ValueError, RecursionError):
            data = None
        return RequestSuccess(data=data, status_code=status_code)


def _status_error_failure(exc: httpx.HTTPStatusError) -> RequestFailure:
    """Failure for a status error raised by the transport itself (e.g. an event hook)."""
    status_code = exc.response.status_code
    if status_code in STATUS_MESSAGES:
        message = STATUS_MESSAGES[status_code]
    else:
        message = exc.response.reason_phrase or UNKNOWN_ERROR_MESSAGE
    return RequestFailure(message, status_code, "http")
