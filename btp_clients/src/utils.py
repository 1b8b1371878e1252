from __future__ import annotations

from typing import Optional

import requests

from .exceptions import BodyReadError


def read_response_body(response: Optional[requests.Response]) -> bytes:
    """Read the whole body and release the connection."""
    if response is None:
        raise BodyReadError("did not retrieve an HTTP response")
    try:
        return response.content
    except (requests.RequestException, OSError) as exc:
        raise BodyReadError("HTTP response body could not be read") from exc
    finally:
        response.close()
