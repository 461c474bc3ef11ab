"""
AssetManager  –  texture manifest, loaded once, size‑aware.

Every manifest key is resolved before the first render. A file that can't
be loaded is replaced by a generated placeholder so the board stays
playable. Scaled copies are cached per (key, size) so we never upscale a
thumbnail.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Mapping, Tuple
import pygame

from sweepfield.constants import NUM_COLOURS, TEXTURE_FALLBACK_COLOURS

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = (64, 64)


class AssetManager:
    def __init__(self, textures_dir: Path, manifest: Mapping[str, str]):
        self.textures_dir = textures_dir
        self.manifest     = dict(manifest)
        self._sources: Dict[str, pygame.Surface] = {}
        # key = (texture key, size‑tuple)  -> pygame.Surface
        self._cache: Dict[Tuple[str, Tuple[int, int]], pygame.Surface] = {}
        self.loaded = False

    # ----------------------------------------------------------------
    def load_all(self) -> None:
        """Resolve every manifest key. Calling again is a no‑op."""
        if self.loaded:
            return
        missing = []
        for key, filename in self.manifest.items():
            path = self.textures_dir / filename
            try:
                surf = pygame.image.load(path)
                if pygame.display.get_surface() is not None:
                    surf = surf.convert_alpha()
            except (pygame.error, FileNotFoundError):
                missing.append(filename)
                surf = self._placeholder(key)
            self._sources[key] = surf
        if missing:
            logger.warning("Using placeholder textures for %d file(s) missing from %s",
                           len(missing), self.textures_dir)
        logger.info("Loaded %d textures", len(self._sources))
        self.loaded = True

    def texture(self, key: str, size: Tuple[int, int]) -> pygame.Surface:
        """Return the texture for *key* scaled to *size*."""
        if not self.loaded:
            raise RuntimeError("textures requested before load_all()")
        cache_key = (key, size)
        if cache_key in self._cache:
            return self._cache[cache_key]
        surf = pygame.transform.smoothscale(self._sources[key], size)
        self._cache[cache_key] = surf
        return surf

    # ----------------------------------------------------------------
    @staticmethod
    def _placeholder(key: str) -> pygame.Surface:
        surf = pygame.Surface(PLACEHOLDER_SIZE, pygame.SRCALPHA)
        if key.startswith("mark_"):
            n = int(key.split("_", 1)[1])
            surf.fill(TEXTURE_FALLBACK_COLOURS["empty_selected"])
            if pygame.font.get_init():
                font = pygame.font.Font(None, PLACEHOLDER_SIZE[1] - 8)
                lbl  = font.render(str(n), True, NUM_COLOURS.get(n, (0, 0, 0)))
                surf.blit(lbl, lbl.get_rect(center=surf.get_rect().center))
        else:
            surf.fill(TEXTURE_FALLBACK_COLOURS.get(key, (180, 50, 180)))
        return surf
