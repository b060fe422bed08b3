"""Ancestry sharing templates, sharing URLs and record URLs."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

SHARING_TEMPLATE_ERROR = "Error building sharing template."
SHARING_URL_ERROR = "Error building sharing URL."
IMAGE_URL_ERROR = "The Image URL is not in the expected format."

_PID_RE = re.compile(r"pId=(\d*)")
_COLLECTIONS_PART = "/imageviewer/collections/"


def needs_sharing_data(ed: Mapping[str, Any]) -> bool:
    """Record pages without an image have nothing to share."""
    if ed.get("pageType") == "sharingUrl":
        return False
    if ed.get("pageType") == "record" and not ed.get("imageUrl"):
        return False
    return True


def _sharing_ids(sharing_data: Mapping[str, Any]) -> tuple[Any, Any]:
    # v1: https://www.ancestry.com/sharing/24274440?h=95cf5c
    share_id, token = sharing_data.get("id"), sharing_data.get("hmac_id")
    v2 = sharing_data.get("v2") or {}
    if v2.get("share_id") and v2.get("share_token"):
        share_id, token = v2["share_id"], v2["share_token"]
    return share_id, token


def build_sharing_template(ed: Mapping[str, Any], sharing_data: Mapping[str, Any] | None) -> str | None:
    """Return "{{Ancestry Sharing|id|token}}", or None if it cannot be built."""
    if ed.get("pageType") == "sharingUrl":
        return ed.get("ancestryTemplate") or None
    if not sharing_data:
        return None
    share_id, token = _sharing_ids(sharing_data)
    if not share_id or not token:
        return None
    return f"{{{{Ancestry Sharing|{share_id}|{token}}}}}"


def build_sharing_url(ed: Mapping[str, Any], sharing_data: Mapping[str, Any] | None) -> str | None:
    if ed.get("pageType") == "sharingUrl":
        return ed.get("sharingUrl") or None
    if not sharing_data:
        return None
    url = sharing_data.get("url")
    v2 = sharing_data.get("v2") or {}
    if v2.get("share_url"):
        url = v2["share_url"]
    return url or None


def build_record_url_from_image_url(url: str) -> str | None:
    """Record page for an image viewer URL.

    ``https://www.ancestry.com/imageviewer/collections/60527/images/xyz?pId=2221897``
    gives ``https://www.ancestry.com/discoveryui-content/view/2221897:60527``.
    """
    col_index = url.find(_COLLECTIONS_PART)
    pid_match = _PID_RE.search(url)
    if col_index == -1 or pid_match is None:
        return None
    db_start = col_index + len(_COLLECTIONS_PART)
    db_end = url.find("/images/", db_start)
    if db_end == -1:
        return None
    db_id = url[db_start:db_end]
    return f"{url[:col_index]}/discoveryui-content/view/{pid_match.group(1)}:{db_id}"
