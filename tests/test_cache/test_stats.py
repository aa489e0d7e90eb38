"""Tests for cache entry/stats models and the stats reporter."""

from pathlib import Path

from wallthumb.cache.stats import CacheEntry, CacheStats, StatsReporter
from wallthumb.cache.store import ThumbnailStore


class TestCacheEntry:
    def test_is_older_than(self):
        entry = CacheEntry(key="k1", path=Path("k1.jpg"), last_accessed=100.0)
        assert entry.is_older_than(101.0)
        assert not entry.is_older_than(100.0)

    def test_partial_uses_mtime(self):
        entry = CacheEntry(
            key="k1", path=Path(".k1.x.tmp"), last_accessed=500.0, modified_at=100.0, partial=True
        )
        assert entry.is_older_than(101.0)


class TestCacheStats:
    def test_defaults(self):
        stats = CacheStats()
        assert stats.count == 0
        assert stats.total_size_bytes == 0
        assert stats.size_mb == 0.0

    def test_size_mb_rounded(self):
        stats = CacheStats(count=1, total_size_bytes=1536 * 1024)
        assert stats.size_mb == 1.5
        assert CacheStats(total_size_bytes=1234567).size_mb == 1.18


class TestStatsReporter:
    def test_counts_and_sizes(self, tmp_path):
        store = ThumbnailStore(tmp_path / "thumbs")
        store.put("k1", b"x" * 100)
        store.put("k2", b"y" * 250)
        stats = StatsReporter(store).collect()
        assert stats.count == 2
        assert stats.total_size_bytes == 350

    def test_missing_root_is_zero(self, tmp_path):
        stats = StatsReporter(ThumbnailStore(tmp_path / "nothing")).collect()
        assert stats == CacheStats()

    def test_inaccessible_root_is_zero(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        stats = StatsReporter(ThumbnailStore(blocker)).collect()
        assert stats.count == 0
        assert stats.total_size_bytes == 0

    def test_counts_earlier_format_and_sizes_partials(self, tmp_path):
        root = tmp_path / "thumbs"
        ThumbnailStore(root, extension="jpg").put("k1", b"x" * 100)
        store = ThumbnailStore(root, extension="webp")
        store.put("k2", b"y" * 50)
        (root / ".k3.abc.tmp").write_bytes(b"z" * 25)
        stats = StatsReporter(store).collect()
        assert stats.count == 2
        assert stats.total_size_bytes == 175
