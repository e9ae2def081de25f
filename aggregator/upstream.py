import logging
from typing import Any

import httpx

from .config import UPSTREAM_TIMEOUT
from .errors import UpstreamError

logger = logging.getLogger(__name__)


def get_client():
    client = httpx.Client(timeout=UPSTREAM_TIMEOUT, follow_redirects=True)
    try:
        yield client
    finally:
        client.close()


def _error_message(body: Any) -> str:
    if isinstance(body, str):
        return body
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)
    return "Upstream request failed"


def fetch_json(client: httpx.Client, url: str, params: dict | None = None) -> Any:
    """GET `url` once and return its body.

    JSON bodies (by content-type) are decoded, anything else comes back as text.
    Timeouts, transport errors and non-2xx statuses raise UpstreamError; nothing
    is retried.
    """
    try:
        resp = client.get(url, params=params, timeout=UPSTREAM_TIMEOUT)
    except httpx.HTTPError as e:
        logger.warning("Upstream request to %s failed: %s", url, e)
        raise UpstreamError(str(e) or e.__class__.__name__) from e

    content_type = resp.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            body = resp.json()
        except ValueError as e:
            logger.warning("Upstream %s sent malformed JSON: %s", url, e)
            raise UpstreamError(f"Invalid JSON from upstream: {e}", status=resp.status_code) from e
    else:
        body = resp.text

    if not resp.is_success:
        message = _error_message(body)
        logger.warning("Upstream %s answered %s: %s", url, resp.status_code, message)
        raise UpstreamError(message, status=resp.status_code, body=body)

    logger.debug("Upstream %s answered %s", url, resp.status_code)
    return body
