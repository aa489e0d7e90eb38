"""Tests for the atomic on-disk thumbnail store."""

import os
import threading

import pytest

from wallthumb.cache.store import ThumbnailStore
from wallthumb.errors.exceptions import CacheIOError


class TestThumbnailStore:
    def test_root_created_lazily(self, tmp_path):
        root = tmp_path / "thumbs"
        store = ThumbnailStore(root)
        assert not root.exists()
        assert store.lookup("k1") is None
        assert not root.exists()
        store.put("k1", b"data")
        assert root.is_dir()

    def test_put_and_lookup(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        path = store.put("k1", b"thumbnail bytes")
        assert path == tmp_path / "thumbs" / "k1.jpg"
        assert store.lookup("k1") == path
        assert path.read_bytes() == b"thumbnail bytes"

    def test_lookup_miss(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        assert store.lookup("nonexistent") is None

    def test_custom_extension(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs", extension=".webp")
        assert store.path_for("k1").name == "k1.webp"

    def test_put_leaves_no_temp_files(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        store.put("k1", b"a")
        store.put("k2", b"b")
        assert sorted(p.name for p in (tmp_path / "thumbs").iterdir()) == ["k1.jpg", "k2.jpg"]

    def test_put_replaces_existing(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        store.put("k1", b"first")
        store.put("k1", b"second")
        assert store.lookup("k1").read_bytes() == b"second"
        assert len(store.list_entries()) == 1

    def test_put_failure_cleans_up_temp(self, tmp_path, monkeypatch):
        store = ThumbnailStore(tmp_path / "thumbs")

        def failing_replace(src, dst):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr("wallthumb.cache.store.os.replace", failing_replace)
        with pytest.raises(CacheIOError):
            store.put("k1", b"data")
        assert list((tmp_path / "thumbs").iterdir()) == []

    def test_unwritable_root_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        store = ThumbnailStore(blocker / "thumbs")
        with pytest.raises(CacheIOError):
            store.put("k1", b"data")

    def test_unwritable_root_warns_once(self, tmp_path, caplog):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        store = ThumbnailStore(blocker / "thumbs")
        for _ in range(3):
            with pytest.raises(CacheIOError):
                store.put("k1", b"data")
        warnings = [r for r in caplog.records if "unavailable" in r.getMessage()]
        assert len(warnings) == 1

    def test_concurrent_readers_never_see_partial_file(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        payload = b"x" * 512 * 1024
        seen_sizes: set[int] = set()
        stop = threading.Event()

        def reader():
            target = store.path_for("k1")
            while not stop.is_set():
                try:
                    seen_sizes.add(len(target.read_bytes()))
                except FileNotFoundError:
                    pass

        t = threading.Thread(target=reader)
        t.start()
        try:
            for _ in range(20):
                store.put("k1", payload)
        finally:
            stop.set()
            t.join()

        assert seen_sizes <= {len(payload)}

    def test_delete(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        store.put("k1", b"data")
        assert store.delete("k1") is True
        assert store.lookup("k1") is None

    def test_delete_missing_returns_false(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        assert store.delete("k1") is False


class TestListEntries:
    def test_missing_root_is_empty(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        assert store.list_entries() == []

    def test_lists_sizes_and_times(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        path = store.put("k1", b"12345")
        os.utime(path, (1_600_000_000, 1_600_000_000))
        entries = store.list_entries()
        assert len(entries) == 1
        entry = entries[0]
        assert entry.key == "k1"
        assert entry.path == path
        assert entry.size_bytes == 5
        assert entry.last_accessed == pytest.approx(1_600_000_000)

    def test_skips_temp_files_by_default(self, tmp_path):
        root = tmp_path / "thumbs"
        store = ThumbnailStore(root)
        store.put("k1", b"a")
        (root / ".k2.abc123.tmp").write_bytes(b"partial")
        assert [e.key for e in store.list_entries()] == ["k1"]

    def test_include_partial_lists_temp_files(self, tmp_path):
        root = tmp_path / "thumbs"
        store = ThumbnailStore(root)
        store.put("k1", b"a")
        (root / ".k2.abc123.tmp").write_bytes(b"partial")
        (root / ".DS_Store").write_bytes(b"finder")
        entries = {e.key: e for e in store.list_entries(include_partial=True)}
        assert sorted(entries) == ["k1", "k2"]
        assert entries["k2"].partial is True
        assert entries["k1"].partial is False

    def test_lists_artifacts_of_other_formats(self, tmp_path):
        root = tmp_path / "thumbs"
        ThumbnailStore(root, extension="jpg").put("k1", b"a")
        webp_store = ThumbnailStore(root, extension="webp")
        webp_store.put("k2", b"b")
        assert sorted(e.key for e in webp_store.list_entries()) == ["k1", "k2"]

    def test_skips_subdirectories(self, tmp_path):
        root = tmp_path / "thumbs"
        store = ThumbnailStore(root)
        store.put("k1", b"a")
        (root / "nested").mkdir()
        assert [e.key for e in store.list_entries()] == ["k1"]

    def test_root_is_a_file_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        store = ThumbnailStore(blocker)
        with pytest.raises(CacheIOError):
            store.list_entries()


class TestTouch:
    def test_updates_access_time_only(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        path = store.put("k1", b"a")
        os.utime(path, (1_600_000_000, 1_600_000_000))
        store.touch("k1")
        st = path.stat()
        assert st.st_atime > 1_600_000_000 + 86400
        assert st.st_mtime == pytest.approx(1_600_000_000)

    def test_missing_entry_is_ignored(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        store.touch("missing")


class TestRemove:
    def test_removes_by_path(self, tmp_path):
        root = tmp_path / "thumbs"
        ThumbnailStore(root, extension="jpg").put("k1", b"a")
        webp_store = ThumbnailStore(root, extension="webp")
        (entry,) = webp_store.list_entries()
        assert webp_store.remove(entry.path) is True
        assert list(root.iterdir()) == []

    def test_missing_path_returns_false(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        assert store.remove(tmp_path / "thumbs" / "gone.jpg") is False
