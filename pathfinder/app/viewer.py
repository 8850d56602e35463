# pathfinder/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinder Viewer: BFS / DFS exploration replay

- Keyboard:
    [1]/[2]/[3]  -> switch map
    [B]/[D]      -> select algorithm (BFS / DFS)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Initial algorithm:
- ENV: PATHFINDER_ALGO=bfs|dfs
- CLI: --algo=bfs|dfs
"""

import logging
import sys
import time
from pathlib import Path
from typing import Dict, Optional, Tuple

import pygame

from pathfinder.app import settings
from pathfinder.core.maps import load_map
from pathfinder.core.search import Algorithm, make_algo, validate_grid
from pathfinder.core.types import Cell, CellKind, Grid, PathfinderError

logger = logging.getLogger(__name__)

# ---------- Config ----------
MAP_FILES: Dict[str, Path] = {
    "01_default":        settings.MAP_DIR / "01_default.json",
    "02_open_field":     settings.MAP_DIR / "02_open_field.json",
    "03_walled_target":  settings.MAP_DIR / "03_walled_target.json",
}
MAP_LABELS = {"01_default": "Map 1", "02_open_field": "Map 2", "03_walled_target": "Map 3"}
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 40
FONT_NAME = None  # default pygame font

# Colors
WHITE        = (255,255,255)
BLACK        = (  0,  0,  0)
BLUE         = ( 70,130,180)
RED          = (220, 50, 47)
OPEN_GRAY    = (200,200,200)
VISITED_MAG  = (214, 92,160)
NEON_CYAN_A  = (0,150,255,110)
NEON_MINT    = (0,255,200)

CARD_BG      = (24,28,36,220)
CARD_HI      = (255,255,255,18)
TEXT_LIGHT   = (230,235,240)
ACCENT_GOLD  = (255,210,0)

CELL_COLORS = {
    CellKind.OPEN:    OPEN_GRAY,
    CellKind.BLOCKED: BLACK,
    CellKind.START:   OPEN_GRAY,
    CellKind.TARGET:  OPEN_GRAY,
    CellKind.VISITED: VISITED_MAG,
}


# ---------- Simple UI Button ----------
BTN_IDLE      = (36, 40, 48, 220)
BTN_HOVER     = (46, 50, 60, 230)
BTN_SELECTED  = (58, 86, 160, 235)
BTN_DISABLED  = (30, 32, 38, 160)
BTN_OUTLINE   = (120, 170, 255, 255)
BTN_TEXT      = (235, 238, 242)
BTN_TEXT_DIM  = (120, 124, 132)


class UIButton:
    """Panel button. Togglable buttons mark the selected map/algorithm or the
    running state; a disabled button is drawn dimmed and ignores clicks
    (used for Run/Step once the search has finished)."""

    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.togglable = togglable
        self.hover = False
        self.selected = False
        self.enabled = True

    def set_selected(self, value: bool):
        self.selected = bool(value)

    def set_enabled(self, value: bool):
        self.enabled = bool(value)
        if not self.enabled:
            self.hover = False

    def _fill(self) -> Tuple[int, int, int, int]:
        if not self.enabled:
            return BTN_DISABLED
        if self.selected and self.togglable:
            return BTN_SELECTED
        return BTN_HOVER if self.hover else BTN_IDLE

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(base, self._fill(), base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)
        if self.enabled and self.selected and self.togglable:
            pygame.draw.rect(screen, BTN_OUTLINE, self.rect, width=2, border_radius=10)
        text = font.render(self.label, True, BTN_TEXT if self.enabled else BTN_TEXT_DIM)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if not self.enabled:
            return
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, *, algorithm: Algorithm = Algorithm.BFS, map_key: str = "custom"):
        pygame.init()

        self.pristine = grid.copy()     # searches mutate self.grid; reset restores from here
        self.grid = grid.copy()
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = self._auto_cell_size(grid)
        grid_px_w = GRID_MARGIN*2 + grid.cols * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.rows * self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 600)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinder — BFS / DFS")

        self._buttons: list[UIButton] = []
        self._layout(win_w, win_h)

        self.current: Optional[Cell] = None

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 4
        self.state = "Idle"
        self.selected_map_key = map_key
        self.selected_algo = algorithm

        self.algo = make_algo(algorithm)
        self.algo.init(self.grid)
        self._last_metrics: Dict[str, object] = {"algo": algorithm.value}
        self._steps = 0

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        cols, rows = self.pristine.cols, self.pristine.rows
        self.cell_size = int(max(8, min(avail_w // cols, avail_h // rows)))

        grid_plate_w = cols * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = rows * self.cell_size + 2 * GRID_MARGIN
        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        top_y  = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(14, min(CELL_SIZE_DEFAULT, target_h // grid.rows))

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        step_interval = 1.0 / max(1, self.steps_per_sec)
        if not hasattr(self, "_last_step_t"):
            self._last_step_t = 0.0
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self.algo.step()
        if res.status == "running":
            self._steps += 1
            self.current = res.current
            self.state = "Running" if self.running else "Paused"
        elif res.status == "found":
            self.state = "Found"; self.running = False
            self.current = res.current
        elif res.status == "exhausted":
            self.state = "Exhausted"; self.running = False
        if res.metrics:
            self._last_metrics = dict(res.metrics, steps=self._steps)
        self._refresh_active_states()

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key == pygame.K_1:
                    self._switch_map("01_default")
                elif e.key == pygame.K_2:
                    self._switch_map("02_open_field")
                elif e.key == pygame.K_3:
                    self._switch_map("03_walled_target")
                elif e.key == pygame.K_b:
                    self._switch_algo(Algorithm.BFS)
                elif e.key == pygame.K_d:
                    self._switch_algo(Algorithm.DFS)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _switch_map(self, key: str):
        if key not in MAP_FILES: return
        try:
            grid = load_map(MAP_FILES[key])
            validate_grid(grid)
        except (OSError, ValueError, PathfinderError) as ex:
            print(f"Failed to load map {key}: {ex}")
            return
        self.pristine = grid
        self.selected_map_key = key
        pygame.display.set_caption(f"Pathfinder — {key}")
        self._layout(*self.screen.get_size())
        self._reset()

    def _switch_algo(self, algorithm: Algorithm):
        self.selected_algo = algorithm
        self.algo = make_algo(algorithm)
        self._reset()

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.grid = self.pristine.copy()
        self.algo.init(self.grid)
        self.current = None
        self._steps = 0
        self._last_metrics = {"algo": self.selected_algo.value}
        self._refresh_active_states()

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                rect = self._cell_rect((row, col))
                pygame.draw.rect(self.screen, CELL_COLORS[self.grid.cells[row][col]], rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        # pending cells (queue for BFS, current branch for DFS)
        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA); overlay.fill(NEON_CYAN_A)
        for cell in set(self.algo.pending()):
            self.screen.blit(overlay, self._cell_rect(cell).topleft)

        if self.current is not None:
            pygame.draw.rect(self.screen, NEON_MINT, self._cell_rect(self.current), 3)

        for row, line in enumerate(self.grid.cells):
            for col, kind in enumerate(line):
                if kind == CellKind.START:
                    self._draw_badge((row, col), BLUE, "S")
                elif kind == CellKind.TARGET:
                    self._draw_badge((row, col), RED, "T")

    def _draw_badge(self, cell: Cell, color: Tuple[int,int,int], label: str):
        rect = self._cell_rect(cell)
        pygame.draw.circle(self.screen, color, rect.center, max(6, self.cell_size//2 - 3))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step, store_as="btn_step"); y += h + gap
        add("Reset", self._reset);       y += h + gap

        half = (w-8)//2
        self._buttons.append(UIButton("Speed −", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+1)))
        y += h + gap

        add("Algo: BFS", lambda: self._switch_algo(Algorithm.BFS), togglable=True, store_as="btn_algo_b"); y += h + gap
        add("Algo: DFS", lambda: self._switch_algo(Algorithm.DFS), togglable=True, store_as="btn_algo_d"); y += h + gap

        add("Map 1: Default",       lambda: self._switch_map("01_default"),       togglable=True, store_as="btn_map1"); y += h + gap
        add("Map 2: Open field",    lambda: self._switch_map("02_open_field"),    togglable=True, store_as="btn_map2"); y += h + gap
        add("Map 3: Walled target", lambda: self._switch_map("03_walled_target"), togglable=True, store_as="btn_map3")

        self._refresh_active_states()

    def _refresh_active_states(self):
        finished = getattr(self, "state", "Idle") in ("Found", "Exhausted")
        if hasattr(self, "btn_run"):
            self.btn_run.set_selected(getattr(self, "running", False))
            self.btn_run.set_enabled(not finished)
        if hasattr(self, "btn_step"):
            self.btn_step.set_enabled(not finished)
        algo = getattr(self, "selected_algo", None)
        if hasattr(self, "btn_algo_b"):
            self.btn_algo_b.set_selected(algo is Algorithm.BFS)
        if hasattr(self, "btn_algo_d"):
            self.btn_algo_d.set_selected(algo is Algorithm.DFS)
        key = getattr(self, "selected_map_key", None)
        for attr, k in (("btn_map1", "01_default"), ("btn_map2", "02_open_field"),
                        ("btn_map3", "03_walled_target")):
            if hasattr(self, attr):
                getattr(self, attr).set_selected(key == k)

    def _toggle_run(self):
        if self.state in ("Found", "Exhausted"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(60, self.steps_per_sec + dv)))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 210), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"State: {self.state}")
        line(f"Visited: {m.get('visited_count', 0)}")
        if self.selected_algo is Algorithm.BFS:
            line(f"Frontier: {m.get('frontier_size', 0)}")
        else:
            line(f"Depth: {m.get('stack_depth', 0)}  Backtracks: {m.get('backtracks', 0)}")
        line("-" * 26)
        line(f"{MAP_LABELS.get(self.selected_map_key, 'Custom map')} active")
        line(f"Algo: {self.selected_algo.value}")
        line(f"Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    settings.configure_logging()
    try:
        algorithm = settings.resolve_algo()
        grid = load_map(MAP_FILES["01_default"])
        validate_grid(grid)
    except (OSError, ValueError, PathfinderError) as ex:
        print(f"Failed to load default map: {ex}")
        sys.exit(1)
    logger.info("starting viewer with %s", algorithm.value)
    Viewer(grid, algorithm=algorithm, map_key="01_default").run()

if __name__ == "__main__":
    main()
