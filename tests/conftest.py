import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from sweepfield.boards.cell_visual import HeadlessCellVisual
from sweepfield.config import TEXTURE_MANIFEST
from sweepfield.core.asset_manager import AssetManager
from sweepfield.core.engine import MineSweeperEngine
from sweepfield.scenes.minesweeper import MinesweeperScene


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def assets(tmp_path):
    # empty directory: every texture falls back to a placeholder
    return AssetManager(tmp_path, TEXTURE_MANIFEST)


@pytest.fixture
def screen():
    return pygame.Surface((640, 800))


@pytest.fixture
def headless_scene(screen, assets):
    """Scene with drawing-free visuals and a 3x3 engine with a mine at id 8."""
    def factory(rows, cols, bombs):
        if (rows, cols) == (3, 3):
            return MineSweeperEngine.with_mines(3, 3, [8])
        return MineSweeperEngine.create(rows, cols, bombs)

    return MinesweeperScene(screen, assets, engine_factory=factory,
                            visual_factory=HeadlessCellVisual)
