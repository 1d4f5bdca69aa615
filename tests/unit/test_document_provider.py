from pathlib import Path

from contentbridge.application.services.content_copy_service import ContentCopyService
from contentbridge.application.services.name_resolution_service import NameResolutionService
from contentbridge.domain.models.content_uri import ContentUri
from contentbridge.domain.models.display_name import Found, NotFound
from contentbridge.infrastructure.db.repos.document_repo import DocumentRepo
from contentbridge.infrastructure.db.sqlite import initialize_schema
from contentbridge.infrastructure.host.document_provider import LocalDocumentProvider

AUTHORITY = "contentbridge.documents"


def _bootstrap(tmp_path: Path) -> LocalDocumentProvider:
    db_path = tmp_path / "bridge.db"
    initialize_schema(db_path)
    return LocalDocumentProvider(DocumentRepo(db_path), AUTHORITY)


def test_publish_issues_content_uri_with_display_name(tmp_path: Path) -> None:
    provider = _bootstrap(tmp_path)
    source = tmp_path / "statement.pdf"
    source.write_bytes(b"%PDF-1.4 fake")

    document = provider.publish(source, display_name="Bank Statement.pdf")

    assert document.content_uri == f"content://{AUTHORITY}/document/{document.id}"
    assert document.media_type == "application/pdf"
    assert document.size_bytes == len(b"%PDF-1.4 fake")
    assert provider.query_display_name(ContentUri.parse(document.content_uri)) == Found("Bank Statement.pdf")


def test_published_document_streams_its_bytes(tmp_path: Path) -> None:
    provider = _bootstrap(tmp_path)
    source = tmp_path / "notes.txt"
    source.write_text("hello bridge", encoding="utf-8")
    document = provider.publish(source)

    stream = provider.open_stream(ContentUri.parse(document.content_uri))
    assert stream is not None
    with stream:
        assert stream.read() == b"hello bridge"


def test_revoked_grant_cannot_be_opened_or_queried(tmp_path: Path) -> None:
    provider = _bootstrap(tmp_path)
    source = tmp_path / "notes.txt"
    source.write_text("secret", encoding="utf-8")
    document = provider.publish(source)
    uri = ContentUri.parse(document.content_uri)

    assert provider.revoke(document.content_uri) is True
    assert provider.revoke(document.content_uri) is False
    assert provider.open_stream(uri) is None
    assert isinstance(provider.query_display_name(uri), NotFound)
    assert provider.list_documents() == []
    assert [d.id for d in provider.list_documents(include_revoked=True)] == [document.id]


def test_foreign_authority_and_unknown_schemes_yield_nothing(tmp_path: Path) -> None:
    provider = _bootstrap(tmp_path)
    source = tmp_path / "notes.txt"
    source.write_text("data", encoding="utf-8")
    document = provider.publish(source)

    foreign = ContentUri.parse(f"content://other.authority/document/{document.id}")
    assert provider.open_stream(foreign) is None
    assert isinstance(provider.query_display_name(foreign), NotFound)
    assert provider.open_stream(ContentUri.parse("https://example.com/notes.txt")) is None


def test_file_uri_is_opened_directly(tmp_path: Path) -> None:
    provider = _bootstrap(tmp_path)
    source = tmp_path / "local.bin"
    source.write_bytes(b"\x00\x01\x02")

    stream = provider.open_stream(ContentUri.parse(source.as_uri()))
    assert stream is not None
    with stream:
        assert stream.read() == b"\x00\x01\x02"
    assert provider.open_stream(ContentUri.parse((tmp_path / "absent.bin").as_uri())) is None


def test_document_without_display_name_falls_back_to_path_tail(tmp_path: Path) -> None:
    provider = _bootstrap(tmp_path)
    source = tmp_path / "scan.pdf"
    source.write_bytes(b"%PDF")
    document = provider.publish(source, use_filename=False)

    assert document.display_name is None
    resolver = NameResolutionService(provider)
    assert resolver.resolve_name(document.content_uri) == document.id


def test_copy_from_published_document_end_to_end(tmp_path: Path) -> None:
    provider = _bootstrap(tmp_path)
    source = tmp_path / "report.pdf"
    source.write_bytes(b"%PDF-1.7 " + b"x" * 5000)
    document = provider.publish(source)
    destination = tmp_path / "app_files" / "pdfs" / "report.pdf"

    copier = ContentCopyService(provider, chunk_size=1024)
    assert copier.copy(document.content_uri, destination) is True
    assert destination.read_bytes() == source.read_bytes()

    source.unlink()
    assert copier.copy(document.content_uri, tmp_path / "again.pdf") is False
    assert not (tmp_path / "again.pdf").exists()
