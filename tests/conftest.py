import pytest
from PIL import Image

from wallthumb.config.schema import ThumbnailCacheConfig


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep WALLTHUMB_* variables and the real home directory out of tests."""
    for name in (
        "WALLTHUMB_CACHE_DIR",
        "WALLTHUMB_DATA_DIR",
        "WALLTHUMB_WIDTH",
        "WALLTHUMB_HEIGHT",
        "WALLTHUMB_QUALITY",
        "WALLTHUMB_TTL_DAYS",
        "WALLTHUMB_BATCH_SIZE",
        "WALLTHUMB_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        "wallthumb.config.hierarchy._GLOBAL_CONFIG_PATH",
        tmp_path / "home" / ".wallthumb" / "config.yaml",
    )


@pytest.fixture
def make_image(tmp_path):
    """Factory writing a solid-colour image and returning its path."""
    def _make(name="wallpaper.jpg", size=(1600, 900), color=(30, 120, 200), fmt="JPEG", mode="RGB"):
        path = tmp_path / "src" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        img = Image.new(mode, size, color)
        img.save(path, format=fmt)
        return path
    return _make


@pytest.fixture
def corrupt_image(tmp_path):
    """A file with an image extension but garbage content."""
    path = tmp_path / "src" / "broken.jpg"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\xff\xd8\xff\xe0 definitely not a jpeg" * 4)
    return path


@pytest.fixture
def cache_config(tmp_path):
    return ThumbnailCacheConfig(cache_dir=tmp_path / "thumbnails")
