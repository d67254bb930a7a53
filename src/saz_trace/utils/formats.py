from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..entries.http_message import RawMessage


class MimeType:
    JSON_TYPES = ["application/json", "application/vnd.api+json"]
    XML_TYPES = ["application/xml", "text/xml"]
    BINARY_TYPES = ["image/", "application/octet-stream", "application/pdf"]

    def __init__(self, content_type: Optional[str]):
        if content_type is None:
            raise ValueError("Mime type cannot be None")
        self.content_type = content_type
        self.mime_type = content_type.split(";")[0].strip().lower()

    def __str__(self) -> str:
        return self.mime_type

    def _contains_any(self, candidates: List[str]) -> bool:
        # Substring match on the full header value, parameters included
        value = self.content_type.lower()
        return any(candidate in value for candidate in candidates)

    def is_json(self) -> bool:
        return self._contains_any(self.JSON_TYPES)

    def is_xml(self) -> bool:
        return self._contains_any(self.XML_TYPES)

    def is_binary(self) -> bool:
        return self._contains_any(self.BINARY_TYPES)


class BodyView(Enum):
    """Ways a message body can be presented to a reader."""

    JSON = "json"
    XML = "xml"
    HEX = "hexview"
    HEADERS = "headers"

    @staticmethod
    def from_content_type(content_type: Optional[str]) -> BodyView:
        """
        Pick the default view for a body from its Content-Type header value.

        Args:
            content_type: The raw header value, or None when absent.

        Returns:
            JSON or XML for structured text, HEX for binary payloads,
            HEADERS for anything else.
        """
        if not content_type:
            return BodyView.HEADERS
        mime_type = MimeType(content_type)
        if mime_type.is_json():
            return BodyView.JSON
        if mime_type.is_xml():
            return BodyView.XML
        if mime_type.is_binary():
            return BodyView.HEX
        return BodyView.HEADERS


def available_body_views(message: "RawMessage") -> List[BodyView]:
    """
    List every view that applies to a message, in display order.

    HEADERS is always available; HEX is also offered for any non-empty body.
    """
    mime_type = MimeType(message.content_type)
    views = [BodyView.HEADERS]
    if mime_type.is_json():
        views.append(BodyView.JSON)
    if mime_type.is_xml():
        views.append(BodyView.XML)
    if mime_type.is_binary() or len(message.body_bytes) > 0:
        views.append(BodyView.HEX)
    return views
