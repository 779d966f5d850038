from __future__ import annotations

import logging
import os
from typing import Any, Optional

import httpx

SPELLS_API_BASE_URL = os.getenv("SPELLS_API_BASE_URL", "https://www.dnd5eapi.co/api/spells")
HTTP_TIMEOUT = float(os.getenv("SEED_HTTP_TIMEOUT", "10.0"))
logger = logging.getLogger(__name__)


def build_client(timeout: Optional[float] = None) -> httpx.Client:
    return httpx.Client(timeout=HTTP_TIMEOUT if timeout is None else timeout)


def get_json(client: httpx.Client, url: str) -> Any:
    """GET `url` and decode the body as JSON.

    Transport errors, non-2xx statuses and invalid JSON all propagate.
    """
    logger.debug("Spell API GET", extra={"url": url})
    resp = client.get(url)
    logger.debug("Spell API GET response", extra={"url": url, "status_code": resp.status_code})
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        # Log response body to aid debugging (404 for unknown index, etc.)
        logger.error(
            "Spell API GET error",
            extra={
                "url": url,
                "status_code": resp.status_code,
                "response_body": resp.text,
            },
        )
        raise exc
    return resp.json()
