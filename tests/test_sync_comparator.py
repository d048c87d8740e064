"""Unit tests for the file comparator."""

from pathlib import Path

from r2import.sync.comparator import FileComparator, SyncAction
from r2import.sync.modes import SyncMode
from r2import.sync.scanner import LocalEntry


def _file(relative_path: str, size: int = 100, mtime: float = 1000.0) -> LocalEntry:
    """Create a file entry for testing."""
    return LocalEntry(
        path=Path("/root") / relative_path,
        relative_path=relative_path,
        is_dir=False,
        size=size,
        mtime=mtime,
    )


def _dir(relative_path: str) -> LocalEntry:
    """Create a directory entry for testing."""
    return LocalEntry(
        path=Path("/root") / relative_path, relative_path=relative_path, is_dir=True
    )


def _actions(decisions) -> dict[str, SyncAction]:
    return {d.relative_path: d.action for d in decisions}


class TestCompareExisting:
    """Tests for entries present on both sides."""

    def test_identical_files_skipped(self):
        comparator = FileComparator(SyncMode.MIRROR)
        decisions = comparator.compare({"a": _file("a")}, {"a": _file("a")})
        assert _actions(decisions) == {"a": SyncAction.SKIP}

    def test_small_mtime_difference_skipped(self):
        comparator = FileComparator(SyncMode.MIRROR)
        decisions = comparator.compare(
            {"a": _file("a", mtime=1000.0)}, {"a": _file("a", mtime=1001.5)}
        )
        assert _actions(decisions) == {"a": SyncAction.SKIP}

    def test_size_difference_updates(self):
        comparator = FileComparator(SyncMode.MERGE)
        decisions = comparator.compare(
            {"a": _file("a", size=1)}, {"a": _file("a", size=2)}
        )
        assert _actions(decisions) == {"a": SyncAction.UPDATE}

    def test_mtime_difference_updates(self):
        comparator = FileComparator(SyncMode.MERGE)
        decisions = comparator.compare(
            {"a": _file("a", mtime=2000.0)}, {"a": _file("a", mtime=1000.0)}
        )
        assert _actions(decisions) == {"a": SyncAction.UPDATE}

    def test_type_mismatch_mirror_replaces(self):
        comparator = FileComparator(SyncMode.MIRROR)
        decisions = comparator.compare(
            {"a": _file("a")}, {"a": _dir("a"), "a/child": _file("a/child")}
        )
        # Children of the replaced directory get no decision of their own
        assert _actions(decisions) == {"a": SyncAction.REPLACE}

    def test_type_mismatch_merge_kept(self):
        comparator = FileComparator(SyncMode.MERGE)
        decisions = comparator.compare({"a": _dir("a")}, {"a": _file("a")})
        assert _actions(decisions) == {"a": SyncAction.MISMATCH}
        assert "keeps it" in decisions[0].reason


class TestSourceOnly:
    """Tests for entries only present in the source."""

    def test_new_file_copied(self):
        comparator = FileComparator(SyncMode.MIRROR)
        decisions = comparator.compare({"a": _file("a")}, {})
        assert _actions(decisions) == {"a": SyncAction.COPY}

    def test_new_directory_created(self):
        comparator = FileComparator(SyncMode.MIRROR)
        decisions = comparator.compare({"d": _dir("d"), "d/f": _file("d/f")}, {})
        assert _actions(decisions) == {
            "d": SyncAction.CREATE_DIR,
            "d/f": SyncAction.COPY,
        }
        # Parents come before their contents
        assert [d.relative_path for d in decisions] == ["d", "d/f"]

    def test_new_directory_skipped_without_subdirectories(self):
        comparator = FileComparator(SyncMode.MERGE, copy_subdirectories=False)
        decisions = comparator.compare({"d": _dir("d")}, {})
        assert _actions(decisions) == {"d": SyncAction.SKIP}


class TestDestinationOnly:
    """Tests for entries only present in the destination."""

    def test_mirror_deletes_each_entry(self):
        comparator = FileComparator(SyncMode.MIRROR)
        decisions = comparator.compare(
            {}, {"old": _dir("old"), "old/f": _file("old/f")}
        )
        assert _actions(decisions) == {
            "old": SyncAction.DELETE,
            "old/f": SyncAction.DELETE,
        }

    def test_merge_keeps_extras(self):
        comparator = FileComparator(SyncMode.MERGE)
        decisions = comparator.compare(
            {}, {"extra": _dir("extra"), "extra/f": _file("extra/f")}
        )
        # Only the top extra directory is reported
        assert _actions(decisions) == {"extra": SyncAction.EXTRA}
        assert "keeps it" in decisions[0].reason
