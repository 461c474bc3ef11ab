import pytest

from sweepfield.config import TEXTURE_MANIFEST
from sweepfield.core.asset_manager import AssetManager


def test_manifest_covers_every_texture_key():
    expected = {"empty_not_selected", "empty_selected", "flagged", "bomb",
                "bomb_exploded", *(f"mark_{n}" for n in range(1, 9))}
    assert set(TEXTURE_MANIFEST) == expected


def test_missing_files_fall_back_to_placeholders(assets):
    assets.load_all()
    for key in TEXTURE_MANIFEST:
        assert assets.texture(key, (20, 20)).get_size() == (20, 20)


def test_load_all_is_idempotent(assets):
    assets.load_all()
    first = assets.texture("bomb", (16, 16))
    assets.load_all()
    assert assets.texture("bomb", (16, 16)) is first


def test_texture_before_loading_is_an_error(tmp_path):
    with pytest.raises(RuntimeError):
        AssetManager(tmp_path, TEXTURE_MANIFEST).texture("bomb", (10, 10))


def test_unknown_texture_key(assets):
    assets.load_all()
    with pytest.raises(KeyError):
        assets.texture("mark_9", (10, 10))
