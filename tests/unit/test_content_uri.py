from contentbridge.domain.models.content_uri import ContentUri


def test_parse_content_uri_splits_authority_and_path() -> None:
    uri = ContentUri.parse("content://com.example.documents/document/42")
    assert uri.scheme == "content"
    assert uri.authority == "com.example.documents"
    assert uri.path == "/document/42"
    assert uri.is_content is True
    assert uri.path_segments() == ["document", "42"]


def test_parse_decodes_percent_encoded_path() -> None:
    uri = ContentUri.parse("content://downloads/document/raw%3A%2Fstorage%2Freport%20final.pdf")
    assert uri.path == "/document/raw:/storage/report final.pdf"


def test_parse_bare_name_has_no_scheme() -> None:
    uri = ContentUri.parse("report.pdf")
    assert uri.scheme is None
    assert uri.authority is None
    assert uri.path == "report.pdf"


def test_parse_file_uri() -> None:
    uri = ContentUri.parse("file:///sdcard/Download/a.pdf")
    assert uri.is_file is True
    assert uri.path == "/sdcard/Download/a.pdf"


def test_opaque_uri_has_no_path() -> None:
    uri = ContentUri.parse("mailto:someone@example.com")
    assert uri.scheme == "mailto"
    assert uri.path is None
    assert uri.path_segments() == []


def test_parse_never_raises_on_malformed_input() -> None:
    uri = ContentUri.parse("http://[::1")
    assert uri.path is None
    assert str(uri) == "http://[::1"


def test_content_uri_without_path_has_empty_path() -> None:
    uri = ContentUri.parse("content://com.example.documents")
    assert uri.authority == "com.example.documents"
    assert uri.path == ""


def test_leading_whitespace_does_not_make_uri_opaque() -> None:
    uri = ContentUri.parse(" content://a/b/report.pdf")
    assert uri.scheme == "content"
    assert uri.authority == "a"
    assert uri.path == "/b/report.pdf"


def test_embedded_tab_does_not_make_uri_opaque() -> None:
    uri = ContentUri.parse("content:\t//a/b/report.pdf")
    assert uri.authority == "a"
    assert uri.path == "/b/report.pdf"


def test_scheme_is_case_insensitive() -> None:
    uri = ContentUri.parse("CONTENT://a/document/1")
    assert uri.is_content is True
