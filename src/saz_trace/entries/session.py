from typing import Optional

import yarl

from .http_message import ParsedRequest, ParsedResponse


class Session:
    """A captured request/response pair, identified by its id in the archive."""

    def __init__(
        self,
        session_id: str,
        raw_client: str,
        raw_server: str,
        request: ParsedRequest,
        response: ParsedResponse,
    ):
        self._id = session_id
        self._raw_client = raw_client
        self._raw_server = raw_server
        self._request = request
        self._response = response
        self._url = self.synthesize_url(request)

    @staticmethod
    def synthesize_url(request: ParsedRequest) -> str:
        """
        Build the URL shown for a session.

        With a Host header the request-target is appended to `https://<host>`;
        without one, the request-target is returned unchanged.
        """
        host = request.headers.get("host") or ""
        if host:
            return f"https://{host}{request.url}"
        return request.url

    @property
    def id(self) -> str:
        """The numeric-string id taken from the fragment file names."""
        return self._id

    @property
    def raw_client(self) -> str:
        """The client fragment text, unmodified."""
        return self._raw_client

    @property
    def raw_server(self) -> str:
        """The server fragment text, unmodified."""
        return self._raw_server

    @property
    def request(self) -> ParsedRequest:
        return self._request

    @property
    def response(self) -> ParsedResponse:
        return self._response

    @property
    def url(self) -> str:
        return self._url

    @property
    def method(self) -> str:
        return self._request.method

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def host(self) -> Optional[str]:
        """The Host header of the request, if any."""
        return self._request.headers.get("host") or None

    @property
    def parsed_url(self) -> Optional[yarl.URL]:
        """The session URL as a yarl.URL, or None if it cannot be parsed."""
        try:
            return yarl.URL(self._url)
        except (TypeError, ValueError):
            return None

    def __str__(self) -> str:
        return (
            f"Session(id={self.id} {self.method} "
            f"{self.url} -> {self.status_code})"
        )

    def __repr__(self) -> str:
        return f"<Session id={self.id} {self.method} {self.url} -> {self.status_code}>"
