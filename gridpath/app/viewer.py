#!/usr/bin/env python3
"""
Grid Pathfinding Viewer — draw walls, pick an algorithm, watch it search.

- Mouse:
    drag on empty cells      -> toggle walls
    drag the start / finish  -> move it (walls are kept)
- Keyboard:
    [1]/[2]/[3]/[4] -> BFS / DFS / Dijkstra / A*
    [SPACE]         -> run + animate
    [R]             -> reset search overlays (keeps walls)
    [C]             -> clear walls
    [M]             -> random maze
    [+]/[-]         -> playback speed
    [Q]/[ESC]       -> quit

Settings: see gridpath.config (GRIDPATH_* env vars or --key=value args).
"""

import logging
import random
import sys
import time
from typing import Dict, List, Optional, Set, Tuple

import pygame

from gridpath.app.playback import RevealEvent, events_due, reveal_schedule
from gridpath.config import Settings, load_config, setup_logging
from gridpath.core.grid import clear_walls, make_grid, random_walls, rebuild_grid, reset_search, toggle_wall
from gridpath.core.search import run_search
from gridpath.core.types import Coord, Grid, GridConfigError, SearchResult

log = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 22
FONT_NAME = None  # default pygame font

ALGO_KEYS = ["bfs", "dfs", "dijkstra", "astar"]
ALGO_LABELS = {"bfs": "BFS", "dfs": "DFS", "dijkstra": "Dijkstra", "astar": "A*"}
SPEEDS = [1, 2, 4, 8]

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
FLOOR_GRAY  = (200,200,200)
WALL_DARK   = ( 34, 38, 46)
NEON_CYAN_A = (0,150,255,110)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        hi = pygame.Surface((self.rect.width, 16), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, settings: Settings):
        pygame.init()

        self.settings = settings
        self.grid: Grid = make_grid(settings.rows, settings.cols, settings.start, settings.finish)
        self.cell_size = self._auto_cell_size()
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        win_w = GRID_MARGIN*2 + self.grid.cols * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN*2 + self.grid.rows * self.cell_size, 560)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding Visualizer")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.selected_algo = settings.algorithm
        self.speed_idx = 0
        self.state = "Idle"
        self.clock = pygame.time.Clock()

        # mouse editing
        self._mouse_pressed = False
        self._last_toggled: Optional[Coord] = None
        self._dragging: Optional[str] = None   # "start" | "finish"

        # playback
        self.result: Optional[SearchResult] = None
        self._schedule: List[RevealEvent] = []
        self._play_t0 = 0.0
        self._play_offset_ms = 0.0
        self._shown = 0
        self.visited_shown: Set[Coord] = set()
        self.path_shown: List[Coord] = []

        # seeded: the sequence of mazes is reproducible; the first one is shown at startup
        self._maze_rng = random.Random(settings.seed)
        if settings.seed is not None:
            self._random_maze()

    # ---------- layout ----------
    def _auto_cell_size(self) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(10, min(CELL_SIZE_DEFAULT, target_h // self.grid.rows))

    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(6, min(avail_w // self.grid.cols, avail_h // self.grid.rows)))

        grid_plate_w = self.grid.cols * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.rows * self.cell_size + 2 * GRID_MARGIN
        top_y = max(0, (win_h - grid_plate_h) // 2)
        self.canvas_rect = pygame.Rect(0, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _cell_from_pos(self, pos: Tuple[int, int]) -> Optional[Coord]:
        ox, oy = self._grid_origin
        x, y = pos
        if x < ox or y < oy:
            return None
        coord = ((y - oy) // self.cell_size, (x - ox) // self.cell_size)
        return coord if self.grid.in_bounds(coord) else None

    # ---------- main loop ----------
    def run(self):
        while True:
            self._handle_events()
            if self.state == "Running":
                self._tick_playback()
            self._draw()
            self.clock.tick(60)

    def _tick_playback(self):
        elapsed_ms = self._play_offset_ms + (time.time() - self._play_t0) * 1000 * SPEEDS[self.speed_idx]
        due = events_due(self._schedule, elapsed_ms)
        for ev in due[self._shown:]:
            if ev.kind == "visited":
                self.visited_shown.add(ev.coord)
            else:
                self.path_shown.append(ev.coord)
        self._shown = len(due)
        if self._shown >= len(self._schedule):
            self.state = "Done" if self.result and self.result.found else "No path"
            self._refresh_active_states()

    # ---------- actions ----------
    def _visualize(self):
        if self.state == "Running":
            return
        self._reset_overlays()
        self.result = run_search(self.grid, self.selected_algo)
        s = self.settings
        self._schedule = reveal_schedule(self.result.visited, self.result.path,
                                         self.grid.start, self.grid.finish,
                                         visit_ms=s.visit_ms, path_ms=s.path_ms)
        self._play_t0 = time.time()
        self._play_offset_ms = 0.0
        self.state = "Running"
        self._refresh_active_states()

    def _reset_overlays(self):
        self.result = None
        self._schedule = []
        self._shown = 0
        self.visited_shown.clear()
        self.path_shown = []
        reset_search(self.grid)

    def _reset(self):
        self.state = "Idle"
        self._reset_overlays()
        self._refresh_active_states()

    def _clear_walls(self):
        self.grid = clear_walls(self.grid)
        self._reset()

    def _random_maze(self):
        g = self.grid
        self.grid = random_walls(g.rows, g.cols, g.start, g.finish, seed=self._maze_rng.randrange(2**32))
        self._reset()

    def _switch_algo(self, key: str):
        if self.state == "Running":
            return
        self.selected_algo = key
        self._reset()

    def _bump_speed(self, dv: int):
        new_idx = max(0, min(len(SPEEDS) - 1, self.speed_idx + dv))
        if new_idx == self.speed_idx:
            return
        if self.state == "Running":
            # keep the playback position when the rate changes
            now = time.time()
            self._play_offset_ms += (now - self._play_t0) * 1000 * SPEEDS[self.speed_idx]
            self._play_t0 = now
        self.speed_idx = new_idx

    def _move_endpoint(self, which: str, coord: Coord):
        other = self.grid.finish if which == "start" else self.grid.start
        if coord == other:
            return
        try:
            if which == "start":
                self.grid = rebuild_grid(self.grid, start=coord)
            else:
                self.grid = rebuild_grid(self.grid, finish=coord)
        except GridConfigError as ex:
            log.warning("Failed to move %s to %s: %s", which, coord, ex)
            return
        self._reset()

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((max(480, e.w), max(360, e.h)), pygame.RESIZABLE)
                self._layout(*self.screen.get_size())
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                hit = False
                for b in self._buttons:
                    hit = b.handle_mouse(e) or hit
                if not hit:
                    self._handle_grid_mouse(e)

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            pygame.quit(); sys.exit(0)
        elif key == pygame.K_SPACE:
            self._visualize()
        elif key == pygame.K_r:
            self._reset()
        elif key == pygame.K_c:
            self._clear_walls()
        elif key == pygame.K_m:
            self._random_maze()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self._bump_speed(+1)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            self._bump_speed(-1)
        elif key in (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4):
            self._switch_algo(ALGO_KEYS[key - pygame.K_1])

    def _handle_grid_mouse(self, e: pygame.event.Event):
        if self.state == "Running":
            return
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            coord = self._cell_from_pos(e.pos)
            if coord is None:
                return
            if coord == self.grid.start:
                self._dragging = "start"
            elif coord == self.grid.finish:
                self._dragging = "finish"
            else:
                self._mouse_pressed = True
                self._toggle(coord)
        elif e.type == pygame.MOUSEMOTION and self._mouse_pressed:
            coord = self._cell_from_pos(e.pos)
            if coord is not None and coord != self._last_toggled:
                self._toggle(coord)
        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            if self._dragging:
                coord = self._cell_from_pos(e.pos)
                if coord is not None:
                    self._move_endpoint(self._dragging, coord)
            self._dragging = None
            self._mouse_pressed = False
            self._last_toggled = None

    def _toggle(self, coord: Coord):
        if self.result is not None:
            self._reset()
        toggle_wall(self.grid, *coord)
        self._last_toggled = coord

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
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin

        for cell in self.grid.iter_cells():
            rect = pygame.Rect(ox + cell.col*cs, oy + cell.row*cs, cs, cs)
            pygame.draw.rect(self.screen, WALL_DARK if cell.is_wall else FLOOR_GRAY, rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
        overlay.fill(NEON_CYAN_A)
        for (row, col) in self.visited_shown:
            self.screen.blit(overlay, (ox + col*cs, oy + row*cs))

        # path cells inset so the visited tint stays visible around them
        inset = max(2, cs // 5)
        for (row, col) in self.path_shown:
            rect = pygame.Rect(ox + col*cs + inset, oy + row*cs + inset, cs - 2*inset, cs - 2*inset)
            pygame.draw.rect(self.screen, NEON_MINT, rect, border_radius=3)

        self._draw_badge(self.grid.start, BLUE, "S")
        self._draw_badge(self.grid.finish, RED, "F")

    def _draw_badge(self, cell: Coord, color: Tuple[int,int,int], letter: str):
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        cx = ox + col*cs + cs//2
        cy = oy + row*cs + cs//2
        pygame.draw.circle(self.screen, color, (cx, cy), max(4, cs//2 - 2))
        txt = self.font_small.render(letter, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=(cx, cy)))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 210  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Visualize", self._visualize, togglable=True, store_as="btn_run"); y += h + gap
        add("Reset", self._reset);                                          y += h + gap
        add("Clear Walls", self._clear_walls);                              y += h + gap
        add("Random Maze", self._random_maze);                              y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Speed −", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+1)))
        y += h + gap

        self._algo_buttons: Dict[str, UIButton] = {}
        for key in ALGO_KEYS:
            add(f"Algo: {ALGO_LABELS[key]}", lambda k=key: self._switch_algo(k), togglable=True)
            self._algo_buttons[key] = self._buttons[-1]
            y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "state", "Idle") == "Running")
        for key, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(key == getattr(self, "selected_algo", None))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 190), pygame.SRCALPHA)
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
        m = self.result.metrics if self.result else {}
        line(f"Algo: {ALGO_LABELS.get(self.selected_algo, self.selected_algo)}")
        line(f"State: {self.state}")
        line(f"Visited: {m.get('visited_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line(f"Speed: x{SPEEDS[self.speed_idx]}")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    try:
        settings = load_config()
    except GridConfigError as ex:
        print(f"Invalid configuration: {ex}", file=sys.stderr)
        sys.exit(2)
    setup_logging(settings.log_level)
    log.info("Starting viewer: %dx%d grid, algorithm=%s", settings.rows, settings.cols, settings.algorithm)
    Viewer(settings).run()


if __name__ == "__main__":
    main()
