"""
Global constants shared across modules.
"""
import os
from pathlib import Path

import pygame  # only to query default font / key modifiers

from sweepfield.core.types import DifficultyConfig

# Window ---------------------------------------------------------------
WIDTH, HEIGHT = 640, 800
FPS           = 60
TITLE         = "Sweepfield"

# Fonts / sizes --------------------------------------------------------
FONT_NAME     = pygame.font.get_default_font()
CELL_SIZE     = 40          # preferred square cell, shrunk for big fields
CELL_PADDING  = 2
BOARD_TOP     = 110         # room for title + HUD above the board
BOARD_BOTTOM  = 80          # room for the reset button below

# Assets ---------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent
TEXTURES_DIR = Path(os.getenv("SWEEPFIELD_TEXTURES_DIR",
                              PROJECT_ROOT / "assets" / "textures"))

# texture key -> file name inside TEXTURES_DIR
TEXTURE_MANIFEST = {
    "empty_not_selected": "minesweeper_00.png",
    "empty_selected":     "minesweeper_01.png",
    "flagged":            "minesweeper_02.png",
    "bomb":               "minesweeper_05.png",
    "bomb_exploded":      "minesweeper_06.png",
    **{f"mark_{n}": f"minesweeper_{n + 7:02}.png" for n in range(1, 9)},
}

# Input ----------------------------------------------------------------
FLAG_BUTTONS   = (3,)                                   # right click
FLAG_MODIFIERS = pygame.KMOD_SHIFT | pygame.KMOD_CTRL   # or modifier + left click

# Difficulty presets  (display-name -> rows/cols/bombs)
DIFFICULTIES = {
    "Easy":   DifficultyConfig.easy,
    "Medium": DifficultyConfig.medium,
    "Hard":   DifficultyConfig.hard,
}
DEFAULT_DIFFICULTY = "Medium"

# Logging --------------------------------------------------------------
LOG_LEVEL  = os.getenv("SWEEPFIELD_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
