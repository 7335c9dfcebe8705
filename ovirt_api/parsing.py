"""XML response parsing."""

from __future__ import annotations

from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from .errors import XMLParseError

_DETAILS_LIMIT = 1000


def parse_xml(content: bytes | str, *, status_code: int | None = None) -> dict[str, Any]:
    try:
        return xmltodict.parse(content)
    except ExpatError as e:
        if isinstance(content, bytes):
            text = content.decode("utf-8", errors="replace")
        else:
            text = content
        raise XMLParseError(
            "Error in XML returned from REST-API.",
            status_code,
            text[:_DETAILS_LIMIT] or None,
        ) from e
