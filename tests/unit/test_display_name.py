from contentbridge.domain.models.display_name import NOT_FOUND, Found, NotFound, derive_display_name


def test_metadata_name_wins_over_path_tail() -> None:
    assert derive_display_name(Found("Quarterly Report.pdf"), "/document/1234") == "Quarterly Report.pdf"


def test_falls_back_to_last_path_segment() -> None:
    assert derive_display_name(NOT_FOUND, "/a/b/report.pdf") == "report.pdf"


def test_path_without_separator_is_returned_unchanged() -> None:
    assert derive_display_name(NotFound("lookup failed"), "report.pdf") == "report.pdf"


def test_empty_metadata_name_falls_through() -> None:
    assert derive_display_name(Found(""), "/docs/notes.txt") == "notes.txt"


def test_no_name_sources_gives_none_not_empty_string() -> None:
    assert derive_display_name(NOT_FOUND, None) is None
    assert derive_display_name(NOT_FOUND, "") is None
    assert derive_display_name(NOT_FOUND, "/trailing/") is None


def test_non_string_metadata_name_falls_through() -> None:
    assert derive_display_name(Found(123), "/docs/notes.txt") == "notes.txt"  # type: ignore[arg-type]
