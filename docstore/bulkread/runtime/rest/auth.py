"""Master key request signing for the document store REST API."""

from __future__ import annotations

import base64
import hashlib
import hmac
from urllib.parse import quote


def build_master_key_authorization(
    verb: str,
    resource_type: str,
    resource_link: str,
    date: str,
    master_key: str,
) -> str:
    """Build the Authorization header value for a master key signed request.

    Args:
        verb: HTTP method (e.g. "POST")
        resource_type: Resource type segment (e.g. "sprocs")
        resource_link: Link of the addressed resource (e.g. "dbs/db/colls/c/sprocs/s")
        date: RFC 1123 date sent in the x-ms-date header
        master_key: Base64 encoded account key

    Returns:
        URL-encoded authorization token
    """
    payload = f"{verb.lower()}\n{resource_type.lower()}\n{resource_link}\n{date.lower()}\n\n"
    digest = hmac.new(
        base64.b64decode(master_key),
        payload.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    signature = base64.b64encode(digest).decode("utf-8")
    return quote(f"type=master&ver=1.0&sig={signature}", safe="")
