"""
Fiddler SAZ capture reader
"""

from .archive import SazArchive
from .entries.http_message import ParsedRequest, ParsedResponse, RawMessage
from .entries.session import Session
from .exceptions import InvalidStructureError
from .open_saz import detect_format, open_saz
from .readers.saz_reader import SazReader, assemble
from .utils.formats import BodyView, MimeType, available_body_views
from .utils.headers import HeaderMap
from .utils.http_utils import parse_message, parse_request, parse_response
from .version import get_package_version

__version__ = get_package_version()

__all__ = [
    "SazArchive",
    "SazReader",
    "Session",
    "RawMessage",
    "ParsedRequest",
    "ParsedResponse",
    "HeaderMap",
    "BodyView",
    "MimeType",
    "InvalidStructureError",
    "assemble",
    "available_body_views",
    "detect_format",
    "open_saz",
    "parse_message",
    "parse_request",
    "parse_response",
    "get_package_version",
]
