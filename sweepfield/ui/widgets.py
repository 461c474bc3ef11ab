"""
Reusable UI widgets (buttons, difficulty dropdown, HUD readouts).
"""
from __future__ import annotations
import pygame
from typing import Tuple
from sweepfield.config    import FONT_NAME
from sweepfield.constants import (BUTTON_BG_COLOR, BUTTON_FG_COLOR,
                                  DROPDOWN_BG_COLOR, DROPDOWN_FG_COLOR,
                                  DROPDOWN_HL_COLOR, HUD_FG_COLOR,
                                  NOTICE_BG_COLOR)

# --------------------------------------------------------------------
class Button:
    def __init__(self, rect: pygame.Rect, text: str,
                 bg=BUTTON_BG_COLOR, fg=BUTTON_FG_COLOR):
        self.rect = rect
        self.text = text
        self.bg   = bg
        self.fg   = fg

        font = pygame.font.Font(FONT_NAME, 20)
        self.surface = pygame.Surface(rect.size, pygame.SRCALPHA)
        self.surface.fill(bg)
        lbl = font.render(text, True, fg)
        self.surface.blit(lbl, lbl.get_rect(center=self.surface.get_rect().center))

    def draw(self, screen):  screen.blit(self.surface, self.rect.topleft)
    def hovered(self, pos):  return self.rect.collidepoint(pos)

# --------------------------------------------------------------------
class Dropdown:
    """
    A simple dropdown: click to open/close, click an option to select it.
    `handle_event` returns True when the event was consumed; `changed`
    tells whether the last consumed click picked a different option.
    """
    def __init__(
        self,
        rect: pygame.Rect,
        options: list[str],
        font: pygame.font.Font,
        selected: str | None = None,
        bg=DROPDOWN_BG_COLOR,
        fg=DROPDOWN_FG_COLOR,
        highlight=DROPDOWN_HL_COLOR,
    ):
        self.rect      = rect
        self.options   = options
        self.font      = font
        self.bg        = bg
        self.fg        = fg
        self.hl        = highlight
        self.open      = False
        self.changed   = False
        self.selected  = selected if selected in options else (options[0] if options else "")
        # pre-render labels
        self._labels = [self.font.render(opt, True, fg) for opt in options]

    def _option_rect(self, idx: int) -> pygame.Rect:
        return pygame.Rect(
            self.rect.x,
            self.rect.y + (idx+1)*self.rect.height,
            self.rect.width,
            self.rect.height,
        )

    def handle_event(self, event) -> bool:
        self.changed = False
        if not self.options:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.open:
                for idx, opt in enumerate(self.options):
                    if self._option_rect(idx).collidepoint(event.pos):
                        self.changed  = opt != self.selected
                        self.selected = opt
                        self.open = False
                        return True
                # clicked outside options: close
                self.open = False
                return self.rect.collidepoint(event.pos)
            if self.rect.collidepoint(event.pos):
                self.open = True
                return True
        return False

    def draw(self, screen):
        # draw current
        pygame.draw.rect(screen, self.bg, self.rect)
        lbl = self.font.render(self.selected, True, self.fg)
        screen.blit(lbl, lbl.get_rect(center=self.rect.center))
        # draw arrow
        pygame.draw.polygon(
            screen,
            self.fg,
            [
                (self.rect.right - 12, self.rect.centery - 4),
                (self.rect.right - 4, self.rect.centery - 4),
                (self.rect.right - 8, self.rect.centery + 4),
            ],
        )
        # draw options if open
        if self.open:
            for idx, label in enumerate(self._labels):
                opt_rect = self._option_rect(idx)
                bg_color = self.hl if self.options[idx] == self.selected else self.bg
                pygame.draw.rect(screen, bg_color, opt_rect)
                screen.blit(label, label.get_rect(center=opt_rect.center))

# --------------------------------------------------------------------
class FlagCounter:
    """HUD readout: flags placed out of bombs on the field."""
    def __init__(self, pos: Tuple[int, int], font: pygame.font.Font, fg=HUD_FG_COLOR):
        self.pos   = pos
        self.font  = font
        self.fg    = fg
        self.flags = 0
        self.bombs = 0
        self.text  = ""
        self._surf: pygame.Surface | None = None
        self.set(0, 0)

    def set(self, flags: int, bombs: int) -> None:
        if (flags, bombs) == (self.flags, self.bombs) and self._surf is not None:
            return
        self.flags, self.bombs = flags, bombs
        self.text  = f"Mines Flagged: {flags}/{bombs}"
        self._surf = self.font.render(self.text, True, self.fg)

    def draw(self, screen):
        screen.blit(self._surf, self.pos)

# --------------------------------------------------------------------
class NoticeBanner:
    """Blocking end‑of‑game notice drawn over the board until dismissed."""
    def __init__(self, text: str, font: pygame.font.Font, fg, hint_font: pygame.font.Font):
        self.text  = text
        self._lbl  = font.render(text, True, fg)
        self._hint = hint_font.render("click or press any key", True, BUTTON_FG_COLOR)

    def draw(self, screen):
        area  = screen.get_rect()
        panel = pygame.Rect(0, 0, area.width, self._lbl.get_height() + self._hint.get_height() + 40)
        panel.center = area.center
        shade = pygame.Surface(panel.size, pygame.SRCALPHA)
        shade.fill(NOTICE_BG_COLOR)
        screen.blit(shade, panel.topleft)
        screen.blit(self._lbl, self._lbl.get_rect(midtop=(panel.centerx, panel.y + 12)))
        screen.blit(self._hint, self._hint.get_rect(midbottom=(panel.centerx, panel.bottom - 10)))
