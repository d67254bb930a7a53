import pytest

from saz_trace import SazArchive, Session, parse_request, parse_response


def make_session(
    session_id: str,
    start_line: str,
    host: str = "",
    status: str = "200 OK",
    content_type: str = "",
) -> Session:
    raw_client = start_line + "\r\n"
    if host:
        raw_client += f"Host: {host}\r\n"
    raw_client += "\r\n"
    raw_server = f"HTTP/1.1 {status}\r\n"
    if content_type:
        raw_server += f"Content-Type: {content_type}\r\n"
    raw_server += "\r\n"
    return Session(
        session_id=session_id,
        raw_client=raw_client,
        raw_server=raw_server,
        request=parse_request(raw_client),
        response=parse_response(raw_server),
    )


@pytest.fixture
def archive() -> SazArchive:
    sessions = [
        make_session(
            "1",
            "GET /api/users HTTP/1.1",
            host="api.example.com",
            content_type="application/json; charset=utf-8",
        ),
        make_session(
            "2",
            "POST /api/login HTTP/1.1",
            host="API.Example.com",
            status="401 Unauthorized",
        ),
        make_session(
            "10",
            "GET /logo.png HTTP/1.1",
            host="cdn.example.com",
            content_type="image/png",
        ),
        make_session("11", "GET /relative HTTP/1.1"),
    ]
    return SazArchive(
        sessions={session.id: session for session in sessions},
        session_order=["1", "2", "3", "10", "11"],
    )


def test_len_counts_complete_sessions(archive):
    assert len(archive) == 4
    assert len(archive.session_order) == 5


def test_iteration_follows_session_order_and_skips_incomplete(archive):
    assert [session.id for session in archive] == ["1", "2", "10", "11"]


def test_incomplete_ids(archive):
    assert archive.incomplete_ids == ["3"]


def test_contains(archive):
    assert "1" in archive
    assert "3" not in archive


def test_returned_collections_are_copies(archive):
    archive.session_order.append("99")
    archive.sessions.pop("1")

    assert archive.session_order == ["1", "2", "3", "10", "11"]
    assert "1" in archive.sessions


def test_get_session(archive):
    assert archive.get_session("10").url == "https://cdn.example.com/logo.png"
    assert archive.get_session("3") is None


def test_get_sessions_by_ids(archive):
    selected = archive.get_sessions_by_ids(["10", "1"])

    assert [session.id for session in selected] == ["1", "10"]


def test_get_sessions_by_ids_missing(archive):
    with pytest.raises(ValueError, match="Session IDs not found: 3, 42"):
        archive.get_sessions_by_ids(["1", "3", "42"])


def test_get_sessions_by_host_is_case_insensitive(archive):
    matching = archive.get_sessions_by_host("api.EXAMPLE.com")

    assert [session.id for session in matching] == ["1", "2"]


def test_get_sessions_by_host_none(archive):
    assert [session.id for session in archive.get_sessions_by_host(None)] == ["11"]


def test_filter_by_method(archive):
    assert [s.id for s in archive.filter(method="post")] == ["2"]


def test_filter_by_status_code(archive):
    assert [s.id for s in archive.filter(status_code=200)] == ["1", "10", "11"]


def test_filter_by_partial_url(archive):
    assert [s.id for s in archive.filter(partial_url="/api/")] == ["1", "2"]


def test_filter_by_mime_type(archive):
    assert [s.id for s in archive.filter(mime_type="application/json")] == ["1"]


def test_filter_by_host_is_case_insensitive(archive):
    assert [s.id for s in archive.filter(host="API.example.COM")] == ["1", "2"]
    assert [s.id for s in archive.filter(host="CDN.Example.com")] == ["10"]


def test_filter_combines_criteria(archive):
    matching = archive.filter(host="cdn.example.com", method="GET", status_code=200)

    assert [s.id for s in matching] == ["10"]


def test_filter_without_criteria_returns_all(archive):
    assert len(archive.filter()) == 4


def test_metadata_defaults(archive):
    assert archive.metadata == {}
    assert archive.path is None
    assert archive.format is None
