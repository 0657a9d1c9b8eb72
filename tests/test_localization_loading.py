"""Tests for in-memory and directory-backed resource sources.

Python 3.13+.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from resxtext.diagnostics import DiagnosticCode, MissingResourceFileError
from resxtext.localization import (
    MemoryResourceSource,
    ResourceSource,
    TraversableResourceSource,
)


class TestMemoryResourceSource:
    """MemoryResourceSource listing and reading."""

    def test_list_all(self, greeting_files: dict[str, str]) -> None:
        """Empty prefix lists every file in insertion order."""
        source = MemoryResourceSource(greeting_files)
        assert source.list_files("") == tuple(greeting_files)

    def test_list_prefix(self) -> None:
        """Only names starting with the prefix are listed."""
        source = MemoryResourceSource({"A.x.txt": "", "B.x.txt": "", "A.y.txt": ""})
        assert source.list_files("A") == ("A.x.txt", "A.y.txt")

    def test_read(self, greeting_source: MemoryResourceSource) -> None:
        """read_text returns the stored content."""
        assert greeting_source.read_text("Resources.Greeting_en.txt") == "Hello=Hello\n"

    def test_read_missing(self, greeting_source: MemoryResourceSource) -> None:
        """Unknown names raise MissingResourceFileError."""
        with pytest.raises(MissingResourceFileError) as exc_info:
            greeting_source.read_text("Resources.Greeting_fr.txt")
        assert exc_info.value.file_name == "Resources.Greeting_fr.txt"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MISSING_RESOURCE_FILE

    def test_missing_is_file_not_found(self, greeting_source: MemoryResourceSource) -> None:
        """Callers catching FileNotFoundError see missing files."""
        with pytest.raises(FileNotFoundError):
            greeting_source.read_text("nope.txt")

    def test_contents_copied(self) -> None:
        """Later changes to the caller's dict are not visible."""
        files = {"A.txt": "x=1"}
        source = MemoryResourceSource(files)
        files["B.txt"] = "y=2"
        assert source.list_files("") == ("A.txt",)

    def test_files_read_only(self) -> None:
        """The stored mapping cannot be modified."""
        source = MemoryResourceSource({"A.txt": ""})
        with pytest.raises(TypeError):
            source.files["B.txt"] = ""  # type: ignore[index]

    def test_satisfies_protocol(self, greeting_source: MemoryResourceSource) -> None:
        """MemoryResourceSource is usable wherever a ResourceSource is expected."""
        source: ResourceSource = greeting_source
        assert source.list_files("Resources")


@pytest.fixture
def resource_tree(tmp_path: Path) -> Path:
    """Directory with a Resources subfolder and a root-level file."""
    resources = tmp_path / "Resources"
    resources.mkdir()
    (resources / "Greeting.txt").write_text("Hello=Hi\n", encoding="utf-8")
    (resources / "Greeting_de.txt").write_text("\ufeffHello=Hallo\n", encoding="utf-8")
    (tmp_path / "Strings.txt").write_text("Title=App\n", encoding="utf-8")
    cache = tmp_path / "__pycache__"
    cache.mkdir()
    (cache / "junk.txt").write_text("x=1", encoding="utf-8")
    return tmp_path


class TestTraversableResourceSource:
    """TraversableResourceSource over a directory on disk."""

    def test_dotted_listing(self, resource_tree: Path) -> None:
        """Nested files are listed with dotted names, sorted."""
        source = TraversableResourceSource.from_path(resource_tree)
        assert source.list_files("") == (
            "Resources.Greeting.txt",
            "Resources.Greeting_de.txt",
            "Strings.txt",
        )

    def test_prefix_listing(self, resource_tree: Path) -> None:
        """Prefix restricts the listing to one directory."""
        source = TraversableResourceSource.from_path(str(resource_tree))
        assert source.list_files("Resources") == (
            "Resources.Greeting.txt",
            "Resources.Greeting_de.txt",
        )

    def test_pycache_skipped(self, resource_tree: Path) -> None:
        """Bytecode cache directories are not indexed."""
        source = TraversableResourceSource.from_path(resource_tree)
        assert not any("__pycache__" in name for name in source.list_files(""))

    def test_read_text(self, resource_tree: Path) -> None:
        """Files are read as text."""
        source = TraversableResourceSource.from_path(resource_tree)
        assert source.read_text("Resources.Greeting.txt") == "Hello=Hi\n"

    def test_byte_order_mark_removed(self, resource_tree: Path) -> None:
        """A leading BOM is dropped on read."""
        source = TraversableResourceSource.from_path(resource_tree)
        assert source.read_text("Resources.Greeting_de.txt") == "Hello=Hallo\n"

    def test_custom_encoding(self, tmp_path: Path) -> None:
        """Non-UTF-8 files are read with the configured encoding."""
        (tmp_path / "Latin.txt").write_bytes("Bye=Tschüss\n".encode("latin-1"))
        source = TraversableResourceSource.from_path(tmp_path, encoding="latin-1")
        assert source.read_text("Latin.txt") == "Bye=Tschüss\n"

    def test_missing_file(self, resource_tree: Path) -> None:
        """Names not in the index raise MissingResourceFileError."""
        source = TraversableResourceSource.from_path(resource_tree)
        with pytest.raises(MissingResourceFileError):
            source.read_text("Resources.Greeting_fr.txt")

    def test_file_removed_after_indexing(self, resource_tree: Path) -> None:
        """A file deleted after construction raises MissingResourceFileError."""
        source = TraversableResourceSource.from_path(resource_tree)
        (resource_tree / "Strings.txt").unlink()
        with pytest.raises(MissingResourceFileError):
            source.read_text("Strings.txt")

    @pytest.mark.parametrize(
        "file_name",
        ["../secret.txt", "Resources..Greeting.txt", "Resources/Greeting.txt", "Resources\\Greeting.txt"],
    )
    def test_unsafe_names_rejected(self, resource_tree: Path, file_name: str) -> None:
        """Traversal sequences and path separators are refused."""
        source = TraversableResourceSource.from_path(resource_tree)
        with pytest.raises(ValueError, match="not allowed"):
            source.read_text(file_name)

    def test_root_must_be_directory(self, tmp_path: Path) -> None:
        """A file root is rejected at construction."""
        file_path = tmp_path / "plain.txt"
        file_path.write_text("", encoding="utf-8")
        with pytest.raises(NotADirectoryError):
            TraversableResourceSource.from_path(file_path)

    def test_from_package(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Package data files are indexed like a directory."""
        package = tmp_path / "resxtext_fixture_pkg"
        (package / "Resources").mkdir(parents=True)
        (package / "__init__.py").write_text("", encoding="utf-8")
        (package / "Resources" / "Greeting.txt").write_text("Hello=Hi\n", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "resxtext_fixture_pkg", raising=False)

        source = TraversableResourceSource.from_package("resxtext_fixture_pkg")

        assert "Resources.Greeting.txt" in source.list_files("Resources")
        assert source.read_text("Resources.Greeting.txt") == "Hello=Hi\n"
