"""
Values you can freely tinker with without touching the logic.
"""

# ── Colours ───────────────────────────────────────────────────────────
BG_COLOR               = (33, 47, 61)       # behind everything
BOARD_BG_COLOR         = (28, 32, 38)
HUD_FG_COLOR           = (240, 240, 240)

HIDDEN_FILL            = (252, 243, 207)    # covered cell
REVEALED_FILL          = (213, 245, 227)    # uncovered cell
FLAGGED_FILL           = (252, 243, 207)
EXPLODED_FILL          = (255, 180, 180)    # light red under the fatal mine

BUTTON_FG_COLOR        = (240, 240, 240)
BUTTON_BG_COLOR        = (70, 120, 70)      # RESET

DROPDOWN_BG_COLOR      = (60, 60, 60)
DROPDOWN_FG_COLOR      = (220, 220, 220)
DROPDOWN_HL_COLOR      = (100, 100, 100)

NOTICE_BG_COLOR        = (20, 20, 20, 210)
NOTICE_WIN_COLOR       = (120, 220, 120)
NOTICE_LOSE_COLOR      = (230, 90, 90)

NUM_COLOURS = {
    1: (25, 71, 232), 2: (37, 129, 42), 3: (191, 35, 41), 4: (37, 17, 129),
    5: (144, 19, 19), 6: (17, 140, 140), 7: (0, 0, 0), 8: (128, 128, 128),
}

# placeholder fills for textures that can't be loaded from disk
TEXTURE_FALLBACK_COLOURS = {
    "empty_not_selected": (190, 190, 190),
    "empty_selected":     (230, 230, 230),
    "flagged":            (220, 60, 60),
    "bomb":               (30, 30, 30),
    "bomb_exploded":      (200, 30, 30),
}

# ── Layout / sizes ────────────────────────────────────────────────────
TITLE_FONT_SIZE        = 48
HUD_FONT_SIZE          = 28
BUTTON_SIZE            = (150, 40)
DROPDOWN_SIZE          = (150, 32)
HUD_MARGIN             = 12
