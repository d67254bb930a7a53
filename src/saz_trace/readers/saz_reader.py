import functools
import io
import logging
import re
import zipfile
import zlib
from typing import Dict, List, Optional, Tuple

from ..archive import SazArchive
from ..entries.session import Session
from ..exceptions import InvalidStructureError
from ..utils.http_utils import parse_request, parse_response

logger = logging.getLogger(__name__)


def _numeric_sort_key(session_id: str) -> Tuple[int, str, str]:
    # Compares digit strings by length then value, with no int() size limit
    significant = session_id.lstrip("0")
    return len(significant), significant, session_id


class _FragmentPair:
    """The client and server fragments found for one session id."""

    __slots__ = ("client", "server")

    def __init__(self) -> None:
        self.client: Optional[zipfile.ZipInfo] = None
        self.server: Optional[zipfile.ZipInfo] = None

    @property
    def is_complete(self) -> bool:
        return self.client is not None and self.server is not None


class SazReader:
    """
    Assembles the sessions of a Fiddler capture archive (.saz) held in memory.

    Each exchange is stored under 'raw/' as `<id>_c.txt` (client request) and
    `<id>_s.txt` (server response). The archive is scanned and indexed on
    construction; sessions are parsed when `archive` is first accessed.
    """

    RAW_FOLDER = "raw/"
    FRAGMENT_PATTERN = re.compile(r"raw/([0-9]+)_([a-z])\.txt")
    TEXT_ENCODING = "latin-1"
    CLIENT_SIDE = "c"
    SERVER_SIDE = "s"

    def __init__(self, archive_bytes: bytes):
        """
        Initializes the reader with the raw bytes of a .saz file.

        Args:
            archive_bytes: The content of the zip archive.

        Raises:
            InvalidStructureError: If the bytes are not a zip archive.
        """
        self._archive_bytes = bytes(archive_bytes)
        self._index: Dict[str, _FragmentPair] = {}
        self._scan_and_index()

    def _open_zip(self) -> zipfile.ZipFile:
        try:
            return zipfile.ZipFile(io.BytesIO(self._archive_bytes), "r")
        except zipfile.BadZipFile as e:
            raise InvalidStructureError(f"Corrupted or invalid zip archive: {e}")

    def _scan_and_index(self) -> None:
        """
        Groups the fragment files of the archive by session id.
        Entries outside 'raw/', directories and other file names are ignored.
        """
        with self._open_zip() as zip_ref:
            for info in zip_ref.infolist():
                if not info.filename.startswith(self.RAW_FOLDER) or info.is_dir():
                    continue

                match = self.FRAGMENT_PATTERN.fullmatch(info.filename)
                if not match:
                    logger.debug("Ignoring archive entry %s", info.filename)
                    continue

                session_id, side = match.groups()
                pair = self._index.setdefault(session_id, _FragmentPair())
                if side == self.CLIENT_SIDE:
                    pair.client = info
                elif side == self.SERVER_SIDE:
                    pair.server = info

    @functools.cached_property
    def session_order(self) -> List[str]:
        """Every discovered session id, sorted by its numerical value."""
        return sorted(self._index, key=_numeric_sort_key)

    def get_index(self) -> Dict[str, Dict[str, Optional[str]]]:
        """
        Returns the lightweight fragment index.

        Maps each session id to the archive names of its client and server
        fragments, with None for a side that was not found.
        """
        return {
            session_id: {
                "client": pair.client.filename if pair.client else None,
                "server": pair.server.filename if pair.server else None,
            }
            for session_id, pair in self._index.items()
        }

    @functools.cached_property
    def archive(self) -> SazArchive:
        """
        Parses every complete fragment pair into a Session.

        Raises:
            InvalidStructureError: If no complete pair exists in the archive.
        """
        sessions: Dict[str, Session] = {}
        with self._open_zip() as zip_ref:
            for session_id in self.session_order:
                pair = self._index[session_id]
                if not pair.is_complete:
                    logger.debug("Skipping incomplete session %s", session_id)
                    continue
                try:
                    session = self._build_session(zip_ref, session_id, pair)
                except (
                    zipfile.BadZipFile,
                    zlib.error,
                    RuntimeError,
                    NotImplementedError,
                ) as e:
                    logger.warning(
                        "Skipping unreadable session %s: %s", session_id, e
                    )
                    continue
                sessions[session_id] = session

        if not sessions:
            raise InvalidStructureError(
                "Invalid SAZ structure: the archive must contain a 'raw/' folder "
                "with paired client/server session files."
            )

        logger.info(
            "Assembled %d sessions from %d session ids",
            len(sessions),
            len(self.session_order),
        )
        return SazArchive(sessions=sessions, session_order=self.session_order)

    def _read_text(self, zip_ref: zipfile.ZipFile, info: zipfile.ZipInfo) -> str:
        return zip_ref.read(info).decode(self.TEXT_ENCODING)

    def _build_session(
        self, zip_ref: zipfile.ZipFile, session_id: str, pair: _FragmentPair
    ) -> Session:
        raw_client = self._read_text(zip_ref, pair.client)
        raw_server = self._read_text(zip_ref, pair.server)
        return Session(
            session_id=session_id,
            raw_client=raw_client,
            raw_server=raw_server,
            request=parse_request(raw_client),
            response=parse_response(raw_server),
        )


def assemble(archive_bytes: bytes) -> SazArchive:
    """
    Build the session collection for the .saz archive in `archive_bytes`.

    Raises:
        InvalidStructureError: If the bytes are not a zip archive or hold no
            paired 'raw/' client/server fragments.
    """
    return SazReader(archive_bytes).archive
