from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

from .entries.session import Session


class SazArchive:
    """
    The sessions assembled from one capture archive.

    `session_order` lists every id discovered in the archive, sorted by
    numeric value, including ids for which only one side was captured.
    `sessions` only holds complete request/response pairs, so the two can
    legitimately differ in length.
    """

    def __init__(
        self,
        sessions: Mapping[str, Session],
        session_order: Sequence[str],
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.metadata: Dict[str, Any] = metadata or {}
        self._sessions: Dict[str, Session] = dict(sessions)
        self._session_order: List[str] = list(session_order)

    @property
    def sessions(self) -> Dict[str, Session]:
        """Complete sessions keyed by id."""
        return self._sessions.copy()

    @property
    def session_order(self) -> List[str]:
        """All discovered ids, in ascending numeric order."""
        return list(self._session_order)

    @property
    def incomplete_ids(self) -> List[str]:
        """Ids that were discovered but lack a client or server fragment."""
        return [sid for sid in self._session_order if sid not in self._sessions]

    @property
    def path(self) -> Optional[str]:
        """The path to the archive file, when it was opened from disk."""
        return self.metadata.get("path")

    @property
    def format(self) -> Optional[str]:
        return self.metadata.get("format")

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[Session]:
        for session_id in self._session_order:
            session = self._sessions.get(session_id)
            if session is not None:
                yield session

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    # === Getters for various session queries

    def get_session(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def get_sessions_by_ids(self, session_ids: Sequence[str]) -> List[Session]:
        missing_ids = [sid for sid in session_ids if sid not in self._sessions]
        if missing_ids:
            raise ValueError(f"Session IDs not found: {', '.join(missing_ids)}")

        selected_ids = set(session_ids)
        return [session for session in self if session.id in selected_ids]

    def get_sessions_by_host(self, host: Optional[str]) -> List[Session]:
        """
        Retrieves all sessions that match the specified host.
        Host matching is case-insensitive.

        Args:
            host: The host string to match. Case-insensitive.
                  Pass None to match sessions with no host.

        Returns:
            List of Session objects matching the host, in session order.
        """
        if host is None:
            return [session for session in self if _url_host(session) is None]

        host_lower = host.lower()
        return [
            session
            for session in self
            if (_url_host(session) or "").lower() == host_lower
        ]

    def filter(
        self,
        host: Optional[str] = None,
        method: Optional[str] = None,
        status_code: Optional[int] = None,
        partial_url: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> List[Session]:
        filtered_sessions: List[Session] = []
        for session in self:
            if host is not None:
                if (_url_host(session) or "").lower() != host.lower():
                    continue

            if method is not None and session.method.upper() != method.upper():
                continue

            if status_code is not None and session.status_code != status_code:
                continue

            if partial_url is not None and partial_url not in session.url:
                continue

            if mime_type is not None:
                content_type = session.response.content_type
                if content_type.split(";")[0].strip().lower() != mime_type.lower():
                    continue

            filtered_sessions.append(session)
        return filtered_sessions

    def __repr__(self) -> str:
        return (
            f"<SazArchive sessions={len(self._sessions)} "
            f"ids={len(self._session_order)}>"
        )


def _url_host(session: Session) -> Optional[str]:
    url = session.parsed_url
    if url is None:
        return None
    return url.host
