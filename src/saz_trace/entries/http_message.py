from typing import Optional

from ..utils.formats import BodyView
from ..utils.headers import HeaderMap


class RawMessage:
    """Start line, headers and body shared by parsed requests and responses."""

    def __init__(
        self,
        start_line: str,
        headers: HeaderMap,
        raw_body: str,
        body_bytes: bytes,
    ):
        self._start_line = start_line
        self._headers = headers
        self._raw_body = raw_body
        self._body_bytes = body_bytes

    @property
    def start_line(self) -> str:
        """The first line of the message (request line or status line)."""
        return self._start_line

    @property
    def headers(self) -> HeaderMap:
        """Headers keyed by lower-cased name."""
        return self._headers

    @property
    def raw_body(self) -> str:
        """The body as text, exactly as it follows the header block."""
        return self._raw_body

    @property
    def body_bytes(self) -> bytes:
        """The body as bytes, one byte per character of `raw_body`."""
        return self._body_bytes

    @property
    def content_type(self) -> str:
        return self._headers.get("content-type") or ""

    @property
    def content_length(self) -> int:
        """
        The declared Content-Length when it is a valid integer, otherwise the
        size of the captured body.
        """
        declared: Optional[str] = self._headers.get("content-length")
        if declared is not None and declared.strip().isdigit():
            return int(declared.strip())
        return len(self._body_bytes)

    @property
    def body_view(self) -> BodyView:
        """The preferred presentation of the body, based on its content type."""
        return BodyView.from_content_type(self.content_type)


class ParsedRequest(RawMessage):
    """A client fragment parsed as an HTTP request."""

    def __init__(
        self,
        start_line: str,
        headers: HeaderMap,
        raw_body: str,
        body_bytes: bytes,
        method: str,
        url: str,
        http_version: str,
    ):
        super().__init__(start_line, headers, raw_body, body_bytes)
        self._method = method
        self._url = url
        self._http_version = http_version

    @property
    def method(self) -> str:
        """The HTTP method (e.g., 'GET', 'CONNECT')."""
        return self._method

    @property
    def url(self) -> str:
        """The request-target as written on the request line, not resolved."""
        return self._url

    @property
    def http_version(self) -> str:
        return self._http_version

    def __repr__(self) -> str:
        return f"<ParsedRequest {self._method} {self._url} {self._http_version}>"


class ParsedResponse(RawMessage):
    """A server fragment parsed as an HTTP response."""

    def __init__(
        self,
        start_line: str,
        headers: HeaderMap,
        raw_body: str,
        body_bytes: bytes,
        http_version: str,
        status_code: int,
        status_text: str,
    ):
        super().__init__(start_line, headers, raw_body, body_bytes)
        self._http_version = http_version
        self._status_code = status_code
        self._status_text = status_text

    @property
    def http_version(self) -> str:
        return self._http_version

    @property
    def status_code(self) -> int:
        """The HTTP status code of the response."""
        return self._status_code

    @property
    def status_text(self) -> str:
        """The reason phrase, which may contain spaces."""
        return self._status_text

    def __repr__(self) -> str:
        return (
            f"<ParsedResponse {self._http_version} "
            f"{self._status_code} {self._status_text}>"
        )
