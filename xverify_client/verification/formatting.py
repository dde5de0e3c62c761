"""Response shaping for verification calls.

Every public operation funnels its outcome through `format_response` (or
`validation_error` when it never reached the network), so callers always
get a plain dict with a human-readable `message` and a `status_code`.
"""

from typing import Any

from xverify_client.transport.results import RequestFailure, RequestSuccess

STATUS_MESSAGES: dict[int, str] = {
    200: "API OK",
    400: "A parameter was missing or has an invalid value",
    401: (
        "Unauthorized. Either the apiKey was missing or invalid, or you are "
        "trying to use a service you are not configured for."
    ),
    403: "Forbidden. Your query limit has been exceeded.",
    500: "Internal server error. Please contact support.",
    502: "Bad gateway. The API is not available. Please try again later or contact support.",
}

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


def get_status_message(status_code: int) -> str:
    return STATUS_MESSAGES.get(status_code, UNKNOWN_ERROR_MESSAGE)


def is_empty(value: Any) -> bool:
    """None, "", False, numeric zero and empty containers count as empty."""
    if value is None or value is False:
        return True
    if isinstance(value, (str, dict, list, tuple)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def filter_empty_fields(data: Any) -> Any:
    """Drop empty values from dicts and lists, at any depth.

    Children are pruned before their parent is tested, so a nested mapping
    that ends up empty is removed as well. Walks with an explicit stack so
    arbitrarily deep payloads never hit the interpreter recursion limit.
    """
    if not isinstance(data, (dict, list)):
        return data

    root = _empty_like(data)
    # Each frame: (iterator over (key, value), pruned container, parent container, key in parent)
    stack = [(_entries(data), root, None, None)]
    while stack:
        entries, target, parent, parent_key = stack[-1]
        for key, value in entries:
            if isinstance(value, (dict, list)):
                stack.append((_entries(value), _empty_like(value), target, key))
                break
            if not is_empty(value):
                _store(target, key, value)
        else:
            stack.pop()
            if parent is not None and not is_empty(target):
                _store(parent, parent_key, target)
    return root


def _entries(container: dict | list):
    return iter(container.items()) if isinstance(container, dict) else enumerate(container)


def _empty_like(container: dict | list) -> dict | list:
    return {} if isinstance(container, dict) else []


def _store(container: dict | list, key: Any, value: Any) -> None:
    if isinstance(container, dict):
        container[key] = value
    else:
        container.append(value)


def error_response(message: str, status_code: int) -> dict:
    return {"status": "error", "message": message, "status_code": status_code}


def validation_error() -> dict:
    """Response for a call rejected before any request was sent."""
    return error_response(get_status_message(400), 400)


def _payload_fields(data: Any) -> dict:
    if isinstance(data, dict):
        return dict(data)
    if isinstance(data, list) and data:
        return {"data": data}
    return {}


def format_response(result: Any) -> dict:
    if isinstance(result, RequestSuccess):
        payload = _payload_fields(result.data)
        response = {
            **payload,
            "message": get_status_message(result.status_code),
            "status_code": result.status_code,
        }
        if not payload:
            response["status"] = "error"
        return filter_empty_fields(response)

    if isinstance(result, RequestFailure):
        return error_response(result.error, result.status_code)

    return error_response(UNKNOWN_ERROR_MESSAGE, 0)
