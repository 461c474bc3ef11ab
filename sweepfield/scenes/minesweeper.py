# scenes/minesweeper.py
"""
MinesweeperScene – keeps the board's visuals in step with the engine.

Lifecycle:  UNINITIALIZED → LOADING → READY ⇄ (commands) → FROZEN
            any state → LOADING again on reset / difficulty change

Every engine cell gets exactly one visual in the registry; every cell the
engine reports as changed is looked up there and re‑rendered. A won or
lost board is frozen: commands are rejected until the next field.
"""
from __future__ import annotations
import functools
import logging
from enum import Enum
from typing import Callable, List

import pygame

from sweepfield.boards.cell_visual  import CellVisual, merge_props
from sweepfield.boards.field_layout import canvas_size, fit_cell_size, layout
from sweepfield.boards.stage        import Stage
from sweepfield.boards.visual       import Position, Size, Visual, VisualProps
from sweepfield.config              import (BOARD_BOTTOM, BOARD_TOP, CELL_PADDING,
                                            CELL_SIZE, DEFAULT_DIFFICULTY,
                                            DIFFICULTIES, FLAG_BUTTONS, TITLE)
from sweepfield.constants           import (BG_COLOR, BUTTON_SIZE, DROPDOWN_SIZE,
                                            HUD_FG_COLOR, HUD_FONT_SIZE, HUD_MARGIN,
                                            NOTICE_LOSE_COLOR, NOTICE_WIN_COLOR,
                                            TITLE_FONT_SIZE)
from sweepfield.core.asset_manager  import AssetManager
from sweepfield.core.diagnostics    import Diagnostics
from sweepfield.core.engine         import EngineFactory, GameEngine, MineSweeperEngine
from sweepfield.core.errors         import (EngineRejected, MissingMountPoint,
                                            VisualRegistryDesync)
from sweepfield.core.types          import Cell, CellStatus, GameState, GameStatus
from sweepfield.core.visual_registry import VisualRegistry
from sweepfield.ui.input_router     import Command, Flag, Reveal, route
from sweepfield.ui.widgets          import Button, Dropdown, FlagCounter, NoticeBanner

logger = logging.getLogger(__name__)

VisualFactory = Callable[[int], Visual]
BOARD_BUTTONS = (1, *FLAG_BUTTONS)


class SceneState(str, Enum):
    UNINITIALIZED = 'UNINITIALIZED'
    LOADING = 'LOADING'
    READY = 'READY'
    FROZEN = 'FROZEN'


class MinesweeperScene:
    def __init__(self, screen: pygame.Surface | None, assets: AssetManager,
                 engine_factory: EngineFactory = MineSweeperEngine.create,
                 visual_factory: VisualFactory | None = None,
                 diagnostics: Diagnostics | None = None,
                 difficulty_name: str = DEFAULT_DIFFICULTY):
        if screen is None:
            raise MissingMountPoint("Cannot find a display surface to mount the board on")
        self.screen = screen
        self.width, self.height = screen.get_size()
        self.assets = assets
        self.difficulty = difficulty_name
        self.diagnostics = diagnostics
        self._engine_factory = engine_factory
        self._visual_factory = visual_factory or (lambda cid: CellVisual(cid, assets))

        self.registry = VisualRegistry()
        self.stage    = Stage()
        self.engine: GameEngine | None = None
        self.rows = self.cols = self.bombs = 0
        self.state = SceneState.UNINITIALIZED
        self.game_status = GameStatus.PLAYING
        self.notice: NoticeBanner | None = None
        self.elapsed = 0.0
        self._generation = 0
        self._board_press = False

        # fonts
        self.title_font = pygame.font.Font(None, TITLE_FONT_SIZE)
        self.hud_font   = pygame.font.Font(None, HUD_FONT_SIZE)
        self._build_widgets()

        if diagnostics is not None:
            diagnostics.register("scene", self)
            diagnostics.register("registry", self.registry)

    # ───────── helpers & setup ─────────────────────────────────────
    def _build_widgets(self):
        mid = self.width // 2
        self.reset_btn = Button(
            pygame.Rect(mid - BUTTON_SIZE[0] // 2, self.height - 60, *BUTTON_SIZE), "Reset")
        self.dropdown = Dropdown(
            pygame.Rect(self.width - DROPDOWN_SIZE[0] - HUD_MARGIN, 60, *DROPDOWN_SIZE),
            list(DIFFICULTIES), self.hud_font, selected=self.difficulty)
        self.flag_counter = FlagCounter((HUD_MARGIN, 66), self.hud_font)

    def _set_state(self, state: SceneState) -> None:
        if state is self.state:
            return
        logger.debug("Scene %s -> %s", self.state.value, state.value)
        if self.diagnostics is not None:
            self.diagnostics.transition(self.state.value, state.value)
        self.state = state

    @staticmethod
    def _fmt(sec: float) -> str:
        s = int(sec); h, s = divmod(s, 3600); m, s = divmod(s, 60)
        return f"{h:02}:{m:02}:{s:02}" if h else f"{m:02}:{s:02}"

    # ───────── field lifecycle ─────────────────────────────────────
    def create_battlefield(self, rows: int, cols: int, bombs: int) -> None:
        """Load textures, start a new engine and rebuild every visual."""
        self._generation += 1
        generation = self._generation

        self.registry.clear()
        self.stage.clear()
        self.engine = None
        self.notice = None
        self.rows, self.cols, self.bombs = rows, cols, bombs
        self._set_state(SceneState.LOADING)

        self.assets.load_all()
        if generation != self._generation:
            logger.info("Field %dx%d superseded while loading", rows, cols)
            return

        try:
            engine = self._engine_factory(rows, cols, bombs)
        except ValueError as exc:
            self._set_state(SceneState.UNINITIALIZED)
            raise EngineRejected(("create", rows, cols, bombs), exc) from exc

        self.engine = engine
        try:
            self._generate_field(engine.get_field())
        except VisualRegistryDesync:
            self._abandon_field()
            raise
        except (IndexError, ValueError) as exc:
            self._abandon_field()
            raise VisualRegistryDesync(
                -1, f"Field does not match {rows}x{cols}: {exc}") from exc
        engine.on_change(functools.partial(self._on_engine_change, generation))

        state = engine.get_game_state()
        self.game_status = state.status
        self.flag_counter.set(state.flag_count, bombs)
        self.elapsed = 0.0
        self._set_state(SceneState.READY)
        logger.info("Field %dx%d with %d bombs ready (%d visuals)",
                    rows, cols, bombs, len(self.registry))

    def _generate_field(self, field: List[List[Cell]]) -> None:
        rows, cols = self.rows, self.cols
        cs = fit_cell_size(rows, cols, self.width - 20,
                           self.height - BOARD_TOP - BOARD_BOTTOM, CELL_SIZE)
        canvas_w, canvas_h = canvas_size(rows, cols, cs, CELL_PADDING)
        self.stage.origin = ((self.width - canvas_w) // 2, BOARD_TOP)
        self.stage.size   = (canvas_w, canvas_h)
        geometry = layout(rows, cols, canvas_w, canvas_h, CELL_PADDING)

        for r, row in enumerate(field):
            for c, cell in enumerate(row):
                g = geometry[r][c]
                visual = self._visual_factory(cell.id)
                props = VisualProps(Position(g.x, g.y), Size(g.width, g.height),
                                    cell.status, cell.content)
                needs_render = visual.should_component_update(props)
                visual.set_props(position=props.position, size=props.size,
                                 status=props.status, content=props.content)
                if needs_render:
                    visual.render()
                self.registry.register(cell.id, visual)
                self.stage.mount(visual)

        # one visual per id 0 … rows*cols-1, nothing more
        missing = set(range(rows * cols)).difference(self.registry.ids())
        if missing or len(self.registry) != rows * cols:
            cell_id = min(missing) if missing else max(self.registry.ids())
            raise VisualRegistryDesync(
                cell_id, f"Field has {len(self.registry)} visuals for {rows}x{cols} cells")

    def _abandon_field(self) -> None:
        self.registry.clear()
        self.stage.clear()
        self.engine = None
        self._set_state(SceneState.UNINITIALIZED)

    def reset(self) -> None:
        if not self.rows:
            self.change_difficulty(self.difficulty)
            return
        self.create_battlefield(self.rows, self.cols, self.bombs)

    def change_difficulty(self, name: str) -> None:
        preset = DIFFICULTIES[name]
        self.difficulty = name
        self.dropdown.selected = name
        self.create_battlefield(preset.rows, preset.cols, preset.bombs)

    # ───────── commands ────────────────────────────────────────────
    def dispatch(self, command: Command) -> List[int]:
        """Run *command* against the engine; returns the ids it reported back."""
        if self.state is not SceneState.READY:
            logger.info("Ignoring %r: board is %s", command, self.state.value)
            return []

        try:
            if isinstance(command, Reveal):
                cells = self.engine.reveal(command.cell_id)
            elif isinstance(command, Flag):
                cells = [self.engine.flag(command.cell_id)]
            else:
                raise TypeError(f"unknown command {command!r}")
        except ValueError as exc:
            raise EngineRejected(command, exc) from exc

        for cell in cells:
            exploded = (isinstance(command, Reveal) and cell.id == command.cell_id
                        and cell.status is CellStatus.REVEALED and cell.content.is_mine)
            self._apply(cell, exploded)

        self.flag_counter.set(self.engine.get_game_state().flag_count, self.bombs)
        return [cell.id for cell in cells]

    def _apply(self, cell: Cell, exploded: bool = False) -> None:
        visual = self.registry.get(cell.id)
        if visual is None:
            raise VisualRegistryDesync(cell.id)
        changes = dict(status=cell.status, content=cell.content, exploded=exploded)
        if visual.should_component_update(merge_props(visual.props, changes)):
            visual.set_props(**changes)
            visual.render()

    def _on_engine_change(self, generation: int, state: GameState) -> None:
        if generation != self._generation:
            return
        self.game_status = state.status
        self.flag_counter.set(state.flag_count, self.bombs)
        if state.status.is_terminal and self.state is not SceneState.FROZEN:
            self._set_state(SceneState.FROZEN)
            won = state.status is GameStatus.WON
            logger.info("Game %s after %s", "won" if won else "lost", self._fmt(self.elapsed))
            self.notice = NoticeBanner("You Win!" if won else "You Lose!", self.title_font,
                                       NOTICE_WIN_COLOR if won else NOTICE_LOSE_COLOR,
                                       self.hud_font)

    # ───────── event handling ──────────────────────────────────────
    def handle_event(self, ev: pygame.event.Event):
        if self.notice is not None:
            if ev.type in (pygame.MOUSEBUTTONUP, pygame.KEYDOWN):
                self.notice = None
            return None

        if ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE: return "quit"
            if ev.key == pygame.K_r: self.reset()
            return None

        # a click that closes an open menu never reaches the board
        was_open = self.dropdown.open
        if self.dropdown.handle_event(ev) or (was_open and not self.dropdown.open):
            self._board_press = False
            if self.dropdown.changed:
                self.change_difficulty(self.dropdown.selected)
            return None

        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button in BOARD_BUTTONS:
            if ev.button == 1 and self.reset_btn.hovered(ev.pos):
                self._board_press = False
                self.reset()
                return None
            self._board_press = True
            return None

        if ev.type == pygame.MOUSEBUTTONUP and ev.button in BOARD_BUTTONS:
            if not self._board_press:
                return None
            self._board_press = False
            command = route(self.stage.pointer_up(ev.pos, ev.button, pygame.key.get_mods()))
            if command is None:
                return None
            try:
                self.dispatch(command)
            except EngineRejected as exc:
                logger.warning("%s", exc)
            except VisualRegistryDesync:
                logger.exception("Board out of sync with the engine")
        return None

    # ───────── update & draw ───────────────────────────────────────
    def update(self, dt: float) -> None:
        if self.state is SceneState.READY:
            self.elapsed += dt

    def draw(self) -> None:
        self.screen.fill(BG_COLOR)
        # Title
        if self.game_status is GameStatus.WON:    title = "You Win!"
        elif self.game_status is GameStatus.LOST: title = "You Lose!"
        else:                                     title = TITLE
        t_lbl = self.title_font.render(title, True, HUD_FG_COLOR)
        self.screen.blit(t_lbl, t_lbl.get_rect(midtop=(self.width // 2, 10)))

        # HUD
        self.screen.blit(self.hud_font.render(self._fmt(self.elapsed), True, HUD_FG_COLOR),
                         (HUD_MARGIN, 18))
        self.flag_counter.draw(self.screen)

        self.stage.draw(self.screen)
        self.reset_btn.draw(self.screen)
        self.dropdown.draw(self.screen)

        if self.notice is not None:
            self.notice.draw(self.screen)
