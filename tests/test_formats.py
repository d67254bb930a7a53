import pytest

from saz_trace import BodyView, MimeType, available_body_views, parse_response


@pytest.mark.parametrize(
    "content_type,expected",
    [
        ("application/json", BodyView.JSON),
        ("application/json; charset=utf-8", BodyView.JSON),
        ("application/vnd.api+json", BodyView.JSON),
        ("application/xml", BodyView.XML),
        ("text/xml; charset=iso-8859-1", BodyView.XML),
        ("image/png", BodyView.HEX),
        ("application/octet-stream", BodyView.HEX),
        ("application/pdf", BodyView.HEX),
        ("text/html", BodyView.HEADERS),
        ("", BodyView.HEADERS),
        (None, BodyView.HEADERS),
    ],
)
def test_body_view_from_content_type(content_type, expected):
    assert BodyView.from_content_type(content_type) == expected


def test_mime_type_strips_parameters():
    mime_type = MimeType("Application/JSON; charset=utf-8")

    assert str(mime_type) == "application/json"
    assert mime_type.is_json()
    assert not mime_type.is_xml()


def test_mime_type_rejects_none():
    with pytest.raises(ValueError):
        MimeType(None)


def test_message_body_view_uses_content_type_header():
    response = parse_response(
        "HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n{}"
    )

    assert response.content_type == "application/json"
    assert response.body_view == BodyView.JSON


def test_message_without_content_type():
    response = parse_response("HTTP/1.1 204 No Content\r\n\r\n")

    assert response.content_type == ""
    assert response.body_view == BodyView.HEADERS
    assert available_body_views(response) == [BodyView.HEADERS]


def test_available_views_include_hex_for_any_body():
    response = parse_response(
        "HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n{}"
    )

    assert available_body_views(response) == [
        BodyView.HEADERS,
        BodyView.JSON,
        BodyView.HEX,
    ]


def test_available_views_for_empty_binary_body():
    response = parse_response("HTTP/1.1 200 OK\r\nContent-Type: image/gif\r\n\r\n")

    assert available_body_views(response) == [BodyView.HEADERS, BodyView.HEX]


def test_content_length_prefers_declared_header():
    response = parse_response(
        "HTTP/1.1 200 OK\r\nContent-Length: 1024\r\n\r\npartial"
    )

    assert response.content_length == 1024


@pytest.mark.parametrize("header", ["", "Content-Length: unknown\r\n"])
def test_content_length_falls_back_to_body_size(header):
    response = parse_response(f"HTTP/1.1 200 OK\r\n{header}\r\ncaf\xe9")

    assert response.content_length == 4
