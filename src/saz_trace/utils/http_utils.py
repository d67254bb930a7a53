"""
HTTP utility functions.

Parsing of raw HTTP/1.x message text, as stored in the client and server
fragments of a capture archive.
"""
import re
from typing import List, Optional, Sequence, Tuple

from ..entries.http_message import ParsedRequest, ParsedResponse
from .headers import HeaderMap

LINE_BREAK = "\r\n"
HEADER_BLOCK_END = "\r\n\r\n"
HEADER_SEPARATOR = ": "
BODY_ENCODING = "latin-1"

DEFAULT_METHOD = "GET"
DEFAULT_URL = "/"
DEFAULT_HTTP_VERSION = "HTTP/1.1"
DEFAULT_STATUS_CODE = 200
DEFAULT_STATUS_TEXT = "OK"

_LEADING_INTEGER = re.compile(r"[+-]?\d+")


def parse_message(raw: str) -> Tuple[str, HeaderMap, str, bytes]:
    """
    Split a raw HTTP message into its start line, headers and body.

    Only the first blank line ends the header block; any later blank lines
    belong to the body. Header lines that do not contain ": " are dropped.

    Args:
        raw: The message text.

    Returns:
        (start_line, headers, raw_body, body_bytes)
    """
    header_block, _, raw_body = raw.partition(HEADER_BLOCK_END)

    lines = header_block.split(LINE_BREAK)
    start_line = lines[0]

    header_items: List[Tuple[str, str]] = []
    for line in lines[1:]:
        name, separator, value = line.partition(HEADER_SEPARATOR)
        if not separator:
            continue
        header_items.append((name, value))

    body_bytes = raw_body.encode(BODY_ENCODING, errors="replace")
    return start_line, HeaderMap(header_items), raw_body, body_bytes


def split_start_line(start_line: str, count: int) -> List[Optional[str]]:
    """
    Split a start line on single spaces into exactly `count` slots.

    The last slot receives every remaining token re-joined with single
    spaces. Missing or empty tokens are returned as None.
    """
    parts = start_line.split(" ")
    head = parts[: count - 1]
    tail = " ".join(parts[count - 1 :])
    tokens = head + [tail]
    tokens += [""] * (count - len(tokens))
    return [token or None for token in tokens]


def _fill_defaults(
    tokens: Sequence[Optional[str]], defaults: Sequence[str]
) -> List[str]:
    return [
        token if token is not None else default
        for token, default in zip(tokens, defaults)
    ]


def _parse_status_code(token: str) -> int:
    match = _LEADING_INTEGER.match(token)
    if match is None:
        return DEFAULT_STATUS_CODE
    return int(match.group())


def parse_request(raw: str) -> ParsedRequest:
    """
    Parse a client fragment as an HTTP request.

    The request line is read as `METHOD TARGET VERSION`; missing parts fall
    back to GET, "/" and HTTP/1.1. Tokens after the version are ignored and
    the target is kept verbatim (e.g. "host:443" for CONNECT).
    """
    start_line, headers, raw_body, body_bytes = parse_message(raw)

    method, url, version_and_rest = _fill_defaults(
        split_start_line(start_line, 3),
        (DEFAULT_METHOD, DEFAULT_URL, DEFAULT_HTTP_VERSION),
    )
    http_version = version_and_rest.split(" ")[0] or DEFAULT_HTTP_VERSION

    return ParsedRequest(
        start_line=start_line,
        headers=headers,
        raw_body=raw_body,
        body_bytes=body_bytes,
        method=method,
        url=url,
        http_version=http_version,
    )


def parse_response(raw: str) -> ParsedResponse:
    """
    Parse a server fragment as an HTTP response.

    The status line is read as `VERSION CODE TEXT...`. The status text keeps
    its inner spaces. A missing or non-numeric code becomes 200 and a missing
    status text becomes "OK".
    """
    start_line, headers, raw_body, body_bytes = parse_message(raw)

    http_version, status_token, status_text = _fill_defaults(
        split_start_line(start_line, 3),
        (DEFAULT_HTTP_VERSION, str(DEFAULT_STATUS_CODE), DEFAULT_STATUS_TEXT),
    )

    return ParsedResponse(
        start_line=start_line,
        headers=headers,
        raw_body=raw_body,
        body_bytes=body_bytes,
        http_version=http_version,
        status_code=_parse_status_code(status_token),
        status_text=status_text,
    )
