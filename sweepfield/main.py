"""
main.py

Entry point.  Opens the window, builds the texture manager, starts the
default field and runs the event loop, handing every event to the scene.
"""

import logging
import sys
import pygame

from sweepfield.config              import (WIDTH, HEIGHT, FPS, TITLE, TEXTURES_DIR,
                                            TEXTURE_MANIFEST, DEFAULT_DIFFICULTY,
                                            LOG_LEVEL, LOG_FORMAT)
from sweepfield.core.asset_manager  import AssetManager
from sweepfield.core.diagnostics    import LoggingInspector
from sweepfield.scenes.minesweeper  import MinesweeperScene

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    pygame.init()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    assets      = AssetManager(TEXTURES_DIR, TEXTURE_MANIFEST)
    diagnostics = LoggingInspector() if logger.isEnabledFor(logging.DEBUG) else None
    scene       = MinesweeperScene(screen, assets, diagnostics=diagnostics,
                                   difficulty_name=DEFAULT_DIFFICULTY)
    scene.change_difficulty(DEFAULT_DIFFICULTY)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
                break
            if scene.handle_event(ev) == "quit":
                running = False
                break

        scene.update(dt)
        scene.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
