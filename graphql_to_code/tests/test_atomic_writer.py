from pathlib import Path

import pytest

from graphql_to_code.pipeline import AtomicWriter


class TestAtomicWriter:
    def test_writes_content_and_creates_parents(self, tmp_path):
        path = tmp_path / "nested" / "Models.cs"

        AtomicWriter().write(path, "namespace Test {}")

        assert path.read_text(encoding="utf-8") == "namespace Test {}"

    def test_line_separators_are_written_verbatim(self, tmp_path):
        path = tmp_path / "Models.cs"

        AtomicWriter().write(path, "a\r\nb\nc")

        assert path.read_bytes() == b"a\r\nb\nc"

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "Models.cs"
        path.write_text("old", encoding="utf-8")

        AtomicWriter().write(path, "new")

        assert path.read_text(encoding="utf-8") == "new"

    def test_temp_file_removed_on_failure(self, tmp_path, monkeypatch):
        def fail(self, target):
            raise OSError("disk full")

        monkeypatch.setattr(Path, "replace", fail)

        with pytest.raises(OSError, match="disk full"):
            AtomicWriter().write(tmp_path / "Models.cs", "content")

        assert list(tmp_path.iterdir()) == []
