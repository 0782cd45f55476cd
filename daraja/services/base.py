from typing import Any, Type

import httpx

from daraja.errors import DarajaError
from daraja.utils.logger import get_logger

logger = get_logger(__name__)

_NOT_JSON = object()


def handle_response(
    resp: httpx.Response, context: str, error_cls: Type[DarajaError]
) -> Any:
    """
    Parse a Daraja response, raising error_cls on error codes.

    Returns the decoded JSON body unmodified.
    """
    try:
        data: Any = resp.json()
    except ValueError:
        data = _NOT_JSON

    logger.debug("Daraja [%s] HTTP %s", context, resp.status_code)

    body = data if isinstance(data, dict) else {}

    # Daraja sometimes returns 200 with an error in the body
    error_code = body.get("errorCode")
    error_msg = (
        body.get("errorMessage")
        or body.get("ResponseDescription")
        or resp.text[:300]
        or resp.reason_phrase
    )

    if not resp.is_success:
        raise error_cls(
            f"HTTP {resp.status_code}: {error_msg}",
            status_code=resp.status_code,
            response_data=data if data is not _NOT_JSON else {"raw": resp.text},
        )

    if data is _NOT_JSON:
        raise error_cls(
            f"HTTP {resp.status_code}: response is not JSON: {resp.text[:300]}",
            status_code=resp.status_code,
            response_data={"raw": resp.text},
        )

    # Daraja error codes in 200 responses (e.g. "500.001.1001")
    if error_code and str(error_code).startswith(("500", "400", "401")):
        raise error_cls(
            f"Daraja error {error_code}: {error_msg}",
            status_code=resp.status_code,
            response_data=data,
        )

    return data
