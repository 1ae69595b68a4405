from pathlib import Path
from unittest.mock import patch

import pytest

from app.processor.models import UploadedDocument
from app.processor.upload_store import UploadStore


class TestSave:
    def test_writes_bytes_under_unique_name(self, tmp_path: Path) -> None:
        store = UploadStore(tmp_path / "uploads")

        doc = store.save("Report.PDF", "application/pdf", b"%PDF test content")

        assert doc.path.parent == tmp_path / "uploads"
        assert doc.path.suffix == ".pdf"
        assert doc.path.name != "Report.PDF"
        assert doc.path.read_bytes() == b"%PDF test content"
        assert doc.filename == "Report.PDF"
        assert doc.content_type == "application/pdf"
        assert doc.size_bytes == 17

    def test_two_saves_do_not_collide(self, tmp_path: Path) -> None:
        store = UploadStore(tmp_path)

        first = store.save("a.pdf", "application/pdf", b"one")
        second = store.save("a.pdf", "application/pdf", b"two")

        assert first.path != second.path

    def test_partial_file_is_removed_when_write_fails(self, tmp_path: Path) -> None:
        store = UploadStore(tmp_path)

        def write_half(path: Path, data: bytes) -> int:
            with path.open("wb") as f:
                f.write(data[: len(data) // 2])
            raise OSError("No space left on device")

        with (
            patch.object(Path, "write_bytes", autospec=True, side_effect=write_half),
            pytest.raises(OSError, match="No space left"),
        ):
            store.save("a.pdf", "application/pdf", b"%PDF test content")

        assert list(tmp_path.iterdir()) == []


class TestLoad:
    def test_returns_saved_bytes(self, tmp_path: Path) -> None:
        store = UploadStore(tmp_path)
        doc = store.save("a.docx", "application/octet-stream", b"PK docx")

        assert store.load(doc) == b"PK docx"

    def test_raises_file_not_found(self, tmp_path: Path) -> None:
        store = UploadStore(tmp_path)
        doc = UploadedDocument(
            filename="gone.pdf",
            content_type="application/pdf",
            path=tmp_path / "gone.pdf",
            size_bytes=1,
        )

        with pytest.raises(FileNotFoundError, match="File not found"):
            store.load(doc)


class TestDelete:
    def test_removes_file(self, tmp_path: Path) -> None:
        store = UploadStore(tmp_path)
        doc = store.save("a.pdf", "application/pdf", b"x")

        store.delete(doc)

        assert not doc.path.exists()

    def test_missing_file_is_ignored(self, tmp_path: Path) -> None:
        store = UploadStore(tmp_path)
        doc = store.save("a.pdf", "application/pdf", b"x")
        doc.path.unlink()

        store.delete(doc)

    def test_failed_delete_is_logged_not_raised(self, tmp_path: Path) -> None:
        store = UploadStore(tmp_path)
        doc = store.save("a.pdf", "application/pdf", b"x")

        with (
            patch.object(Path, "unlink", side_effect=PermissionError("denied")),
            patch("app.processor.upload_store.Log") as mock_log,
        ):
            store.delete(doc)

        mock_log.error.assert_called_once()
        assert "denied" in mock_log.error.call_args.args[0]
