import asyncio
from pathlib import Path

import pytest

from detector.ingestion.image_file import InMemoryImageFile, LocalImageFile, guess_content_type


class TestGuessContentType:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("photo.JPG", "image/jpeg"),
            ("photo.jpeg", "image/jpeg"),
            ("scan.png", "image/png"),
            ("frame.webp", "image/webp"),
            ("notes.txt", "text/plain"),
            ("no_suffix", ""),
        ],
    )
    def test_guesses_from_suffix(self, name: str, expected: str) -> None:
        assert guess_content_type(Path(name)) == expected


class TestLocalImageFile:
    def test_reads_bytes_and_reports_size(self, tmp_path: Path, png_bytes: bytes) -> None:
        path = tmp_path / "pic.png"
        path.write_bytes(png_bytes)
        file = LocalImageFile(path)

        assert file.content_type == "image/png"
        assert file.declared_size == len(png_bytes)
        assert asyncio.run(file.read()) == png_bytes

    def test_explicit_content_type_wins(self, tmp_path: Path) -> None:
        file = LocalImageFile(tmp_path / "pic.png", content_type="image/webp")
        assert file.content_type == "image/webp"

    def test_missing_file_has_no_declared_size(self, tmp_path: Path) -> None:
        file = LocalImageFile(tmp_path / "missing.png")
        assert file.declared_size is None

    def test_declared_size_is_captured_at_construction(
        self, tmp_path: Path, png_bytes: bytes
    ) -> None:
        path = tmp_path / "pic.png"
        path.write_bytes(png_bytes)
        file = LocalImageFile(path)
        path.write_bytes(png_bytes * 4)

        assert file.declared_size == len(png_bytes)
        assert asyncio.run(file.read()) == png_bytes * 4

    def test_missing_file_read_raises_os_error(self, tmp_path: Path) -> None:
        file = LocalImageFile(tmp_path / "missing.png")
        with pytest.raises(OSError):
            asyncio.run(file.read())


class TestInMemoryImageFile:
    def test_returns_data(self) -> None:
        file = InMemoryImageFile(b"data", "image/jpeg")
        assert file.declared_size == 4
        assert asyncio.run(file.read()) == b"data"
