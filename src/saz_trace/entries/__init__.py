"""Entry types exposed by saz_trace.entries

This module re-exports the parsed message and session types so users can
`from saz_trace.entries import Session, ParsedRequest, ParsedResponse`.
"""
from .http_message import ParsedRequest, ParsedResponse, RawMessage
from .session import Session

__all__ = [
    "RawMessage",
    "ParsedRequest",
    "ParsedResponse",
    "Session",
]
