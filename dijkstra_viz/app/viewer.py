# dijkstra_viz/app/viewer.py
#!/usr/bin/env python3
"""
Dijkstra Pathfinding Visualizer - pygame front end

- Mouse:
    click / drag on empty cells   -> create / remove walls
    drag the green or red cell    -> move start / end
- Keyboard:
    [SPACE]      -> run Dijkstra
    [S]          -> stop the current run
    [C]          -> clear path (keeps walls)
    [R]          -> reset grid (removes walls)
    [+]/[-]      -> faster / slower
    [Q]/[ESC]    -> quit

Settings: see dijkstra_viz.app.config (env DIJKSTRA_VIZ_* or --rows= --cols= ...).
"""

# --- bootstrap import path so `from dijkstra_viz...` works when run as a script ---
import sys
import logging
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# ----------------------------------------------------------------------------------

from typing import List, Optional, Tuple
import pygame

from dijkstra_viz.app import theme as THEME
from dijkstra_viz.app.config import Settings, resolve_settings
from dijkstra_viz.core.grid import Grid
from dijkstra_viz.core.runner import SearchRunner
from dijkstra_viz.core.types import Cell, FOUND, NOT_FOUND, CANCELLED, ERROR

logger = logging.getLogger(__name__)

# ---------- Layout ----------
PANEL_W = 320            # right band: metrics + buttons + status
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font
DELAY_STEP_MS = 10
DELAY_MAX_MS = 500

MSG_READY   = "Ready. Click to create walls, drag start/end points."
MSG_RUNNING = "Running Dijkstra's algorithm..."
MSG_OUTCOME = {
    FOUND:     "Path found!",
    NOT_FOUND: "No path found.",
    CANCELLED: "Search stopped.",
    ERROR:     "Error during execution.",
}

INSTRUCTIONS = (
    "Click to create/remove walls",
    "Drag green (start) or red (end) points",
    "Light blue: visited cells",
    "Yellow: optimal path",
)


def pixel_to_cell(pos: Tuple[int, int], origin: Tuple[int, int], cell_size: int) -> Tuple[int, int]:
    """Screen position -> (row, col). May fall outside the grid; the grid ignores those."""
    x, y = pos
    ox, oy = origin
    return (y - oy) // cell_size, (x - ox) // cell_size


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.enabled = True

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle     = (36, 40, 48, 220)
        bg_hover    = (46, 50, 60, 230)
        bg_disabled = (30, 32, 38, 160)

        if not self.enabled:
            bg = bg_disabled
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle

        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        # subtle highlight top band
        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))

        screen.blit(base, self.rect.topleft)

        fg = (235,238,242) if self.enabled else (120,124,132)
        text = font.render(self.label, True, fg)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        """True when the event was a click on this button."""
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                if self.enabled:
                    self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, settings: Settings):
        pygame.init()

        self.settings = settings
        self.grid = Grid(settings.rows, settings.cols)
        self.cell_size = settings.cell_size
        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 24)

        self.runner = SearchRunner(self.grid,
                                   on_cell_visited=self._on_cell_visited,
                                   on_search_complete=self._on_search_complete,
                                   delay=settings.delay)

        grid_px_w = GRID_MARGIN*2 + self.grid.cols * self.cell_size
        grid_px_h = GRID_MARGIN*2 + self.grid.rows * self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 600)

        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption("Dijkstra Pathfinding Visualizer")

        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        self._right_band = pygame.Rect(grid_px_w, 0, win_w - grid_px_w, win_h)

        self._buttons: List[UIButton] = []
        self._build_buttons()

        # drag state
        self._mouse_pressed = False
        self._moving_start = False
        self._moving_end = False
        self._last_cell: Optional[Tuple[int, int]] = None

        self.clock = pygame.time.Clock()
        self.status = MSG_READY
        self.visited_count = 0

    def run(self):
        while True:
            self._handle_events()
            self._refresh_enabled_states()
            self._draw()
            self.clock.tick(60)

    # ---------- runner callbacks (called from the search thread) ----------
    def _on_cell_visited(self, cell: Cell):
        self.visited_count += 1

    def _on_search_complete(self, outcome: str):
        self.status = MSG_OUTCOME.get(outcome, outcome)
        res = self.runner.last_result
        if outcome == FOUND and res is not None:
            self.status = f"{self.status} Length {res.metrics.get('path_len', 0)}."

    # ---------- commands ----------
    def _run_dijkstra(self):
        if self.runner.active:
            return
        self.visited_count = 0
        self.status = MSG_RUNNING
        self.runner.start()

    def _stop(self):
        if self.runner.active:
            self.runner.stop()

    def _reset_grid(self):
        if self.runner.active:
            return
        self.grid.reset_all()
        self.runner.last_result = None
        self.visited_count = 0
        self.status = "Grid reset."

    def _clear_path(self):
        if self.runner.active:
            return
        self.grid.reset_search_state()
        self.runner.last_result = None
        self.visited_count = 0
        self.status = "Path cleared."

    def _bump_speed(self, faster: bool):
        ms = self.settings.delay_ms + (-DELAY_STEP_MS if faster else DELAY_STEP_MS)
        self.settings.delay_ms = int(max(0, min(DELAY_MAX_MS, ms)))
        self.runner.delay = self.settings.delay

    def _quit(self):
        self.runner.stop()
        self.runner.join(timeout=1.0)
        pygame.quit(); sys.exit(0)

    # ---------- input ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    self._quit()
                elif e.key == pygame.K_SPACE:
                    self._run_dijkstra()
                elif e.key == pygame.K_s:
                    self._stop()
                elif e.key == pygame.K_c:
                    self._clear_path()
                elif e.key == pygame.K_r:
                    self._reset_grid()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(faster=True)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(faster=False)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                clicked = False
                for b in self._buttons:
                    clicked = b.handle_mouse(e) or clicked
                if clicked:
                    continue
                if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    if self.runner.active:
                        continue
                    self._mouse_pressed = True
                    self._last_cell = None
                    self._handle_grid_mouse(e.pos)
                elif e.type == pygame.MOUSEMOTION and self._mouse_pressed and not self.runner.active:
                    self._handle_grid_mouse(e.pos)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self._mouse_pressed = False
                self._moving_start = False
                self._moving_end = False
                self._last_cell = None

    def _handle_grid_mouse(self, pos: Tuple[int, int]):
        row, col = pixel_to_cell(pos, self._grid_origin, self.cell_size)
        if (row, col) == self._last_cell:
            return
        self._last_cell = (row, col)

        if self._moving_start:
            self.grid.on_move_start(row, col)
            return
        if self._moving_end:
            self.grid.on_move_end(row, col)
            return

        cell = self.grid.cell_at(row, col)
        if cell is None:
            return
        if cell.is_start:
            self._moving_start = True
            return
        if cell.is_end:
            self._moving_end = True
            return
        self.grid.on_cell_toggle_wall(row, col)

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        for row in self.grid.cells:
            for cell in row:
                rect = pygame.Rect(ox + cell.col*cs, oy + cell.row*cs, cs, cs)
                pygame.draw.rect(self.screen, THEME.cell_color(cell), rect)
                pygame.draw.rect(self.screen, THEME.COLOR_BORDER, rect, 1)

    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 200  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 38
        gap = 10

        def add(label, cb, store_as: str):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb)
            self._buttons.append(btn)
            setattr(self, store_as, btn)

        add("Start Dijkstra", self._run_dijkstra, "btn_run"); y += h + gap
        add("Stop",           self._stop,         "btn_stop"); y += h + gap
        add("Reset Grid",     self._reset_grid,   "btn_reset"); y += h + gap
        add("Clear Path",     self._clear_path,   "btn_clear"); y += h + gap

        minus_rect = pygame.Rect(x, y, (w-8)//2, h)
        plus_rect  = pygame.Rect(x + (w-8)//2 + 8, y, (w-8)//2, h)
        self.btn_slower = UIButton("Speed −", minus_rect, lambda: self._bump_speed(faster=False))
        self.btn_faster = UIButton("Speed +", plus_rect,  lambda: self._bump_speed(faster=True))
        self._buttons.append(self.btn_slower)
        self._buttons.append(self.btn_faster)
        self._buttons_bottom = y + h

    def _refresh_enabled_states(self):
        busy = self.runner.active
        self.btn_run.enabled = not busy
        self.btn_stop.enabled = busy
        self.btn_reset.enabled = not busy
        self.btn_clear.enabled = not busy

    def _draw_panel(self):
        rb = self._right_band
        THEME.glass_panel(self.screen, rb.inflate(-12, -12))

        # ---- METRICS CARD (top) ----
        card_h = 180
        card = pygame.Surface((rb.width - 32, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, THEME.CARD_BG, card.get_rect(), border_radius=14)
        self.screen.blit(card, (rb.x + 16, rb.y + 14))

        x0 = rb.x + 28
        y0 = rb.y + 22

        def line(text, big=False, color=THEME.TEXT_LIGHT, font=None):
            nonlocal y0
            f = font or (self.font_big if big else self.font)
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        res = self.runner.last_result if not self.runner.active else None
        m = res.metrics if res is not None else {}
        line("Metrics", big=True, color=THEME.ACCENT_GOLD)
        line(f"Visited: {self.visited_count}")
        line(f"Walls: {self.grid.wall_count()}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line(f"Delay: {self.settings.delay_ms} ms/step")
        line(f"Grid: {self.grid.rows} x {self.grid.cols}")

        # ---- BUTTONS ----
        for b in self._buttons:
            b.draw(self.screen, self.font)

        # ---- STATUS + INSTRUCTIONS ----
        y0 = self._buttons_bottom + 20
        for chunk in _wrap(self.status, 30):
            line(chunk, color=THEME.ACCENT_GOLD)
        y0 += 10
        for text in INSTRUCTIONS:
            line(f"• {text}", font=self.font_small)


def _wrap(text: str, width: int) -> List[str]:
    words = text.split()
    out: List[str] = []
    cur = ""
    for w in words:
        if cur and len(cur) + 1 + len(w) > width:
            out.append(cur)
            cur = w
        else:
            cur = f"{cur} {w}" if cur else w
    if cur:
        out.append(cur)
    return out


# ---------- main ----------
def main():
    try:
        settings = resolve_settings()
    except ValueError as ex:
        print(f"Invalid settings: {ex}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("starting viewer with %dx%d grid", settings.rows, settings.cols)
    Viewer(settings).run()

if __name__ == "__main__":
    main()
