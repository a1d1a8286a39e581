import pygame
import pytest

from flappy_bird import __main__ as entry
from flappy_bird.assets import load_assets, load_image
from flappy_bird.errors import AssetLoadError, FlappyError


def write_png(path, size=(40, 20)):
    surf = pygame.Surface(size)
    surf.fill((255, 200, 0))
    pygame.image.save(surf, str(path))


def test_missing_bird_is_reported_first(tmp_path):
    with pytest.raises(AssetLoadError) as excinfo:
        load_assets(tmp_path)
    assert excinfo.value.path.name == "bird.png"
    assert "bird.png" in str(excinfo.value)
    assert isinstance(excinfo.value, FlappyError)


def test_missing_pipe_is_named(tmp_path):
    write_png(tmp_path / "bird.png")
    with pytest.raises(AssetLoadError) as excinfo:
        load_assets(tmp_path)
    assert excinfo.value.path.name == "pipe.png"


def test_missing_font_is_named(tmp_path):
    write_png(tmp_path / "bird.png")
    write_png(tmp_path / "pipe.png")
    with pytest.raises(AssetLoadError) as excinfo:
        load_assets(tmp_path)
    assert excinfo.value.path.name == "font.ttf"


def test_unreadable_image_is_a_load_error(tmp_path):
    (tmp_path / "bird.png").write_bytes(b"definitely not a png")
    with pytest.raises(AssetLoadError) as excinfo:
        load_image(tmp_path, "bird.png")
    assert excinfo.value.path.name == "bird.png"


def test_load_image_returns_surface(tmp_path):
    write_png(tmp_path / "bird.png", size=(50, 30))
    image = load_image(tmp_path, "bird.png")
    assert image.get_size() == (50, 30)


def test_entry_point_exits_nonzero_when_assets_missing(tmp_path, monkeypatch):
    monkeypatch.setattr(entry, "ASSET_DIR", tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == 1
