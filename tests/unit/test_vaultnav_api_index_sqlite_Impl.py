"""Unit tests for the in-process sqlite index backend."""

import pytest

from tests.unit.conftest import build_index
from vaultnav.api.index._queries import ALL_TAGS, BACKLINKS_FROM, BACKLINKS_TO, FILES_BY_TAG
from vaultnav.api.index._sqlite._Impl import _Impl
from vaultnav.api.index.IndexConfig import IndexConfig

pytestmark = pytest.mark.index


@pytest.fixture
def impl(tmp_path):
    return _Impl(IndexConfig(type="sqlite"), str(build_index(tmp_path / "index.db")))


class TestSqliteImpl:
    def test_backlinks_to(self, impl):
        assert impl.select(BACKLINKS_TO, "My Note") == "notes/My Note.md\n"

    def test_backlinks_to_distinct_paths(self, impl):
        out = impl.select(BACKLINKS_TO, "Twin")
        assert sorted(out.splitlines()) == ["archive/My Note.md", "notes/My Note.md"]

    def test_quote_bound_as_parameter(self, impl):
        assert impl.select(BACKLINKS_TO, "It's here") == "notes/Other.md\n"

    def test_backlinks_from_like(self, impl):
        out = impl.select(BACKLINKS_FROM, "%notes/My Note%")
        assert sorted(out.splitlines()) == ["daily/2024-01-01.md", "notes/Other.md"]

    def test_files_by_tag(self, impl):
        assert sorted(impl.select(FILES_BY_TAG, "project").splitlines()) == ["notes/My Note.md", "notes/Other.md"]

    def test_all_tags(self, impl):
        assert sorted(impl.select(ALL_TAGS).splitlines()) == ["idea", "project"]

    def test_no_match_is_empty(self, impl):
        assert impl.select(BACKLINKS_TO, "Nothing") == ""

    def test_missing_file_is_empty_and_not_created(self, tmp_path):
        path = tmp_path / "absent.db"
        impl = _Impl(IndexConfig(type="sqlite"), str(path))
        assert impl.select(ALL_TAGS) == ""
        assert not impl.is_available()
        assert not path.exists()

    def test_broken_database_is_empty(self, tmp_path):
        path = tmp_path / "broken.db"
        path.write_text("not a database")
        assert _Impl(IndexConfig(type="sqlite"), str(path)).select(ALL_TAGS) == ""

    def test_path_with_spaces_and_hash(self, tmp_path):
        folder = tmp_path / "My Vault #1"
        folder.mkdir()
        impl = _Impl(IndexConfig(type="sqlite"), str(build_index(folder / "markdown_data.db")))
        assert impl.is_available()
        assert impl.select(BACKLINKS_TO, "My Note") == "notes/My Note.md\n"
