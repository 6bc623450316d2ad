# dijkstra_viz/app/theme.py
"""
Palette and panel helpers for the viewer (visuals only; no logic).

Cell colors follow the classic visualizer scheme: green start, red end,
black walls, light blue visited, yellow path, orange for the cell being expanded.
"""

from __future__ import annotations
from typing import Dict, Tuple
import pygame

from dijkstra_viz.core.types import Cell

# ---- cell palette ----
COLOR_START   = (0, 153, 0)
COLOR_END     = (153, 0, 0)
COLOR_WALL    = (0, 0, 0)
COLOR_EMPTY   = (255, 255, 255)
COLOR_VISITED = (173, 216, 230)
COLOR_PATH    = (255, 255, 0)
COLOR_CURRENT = (255, 165, 0)
COLOR_BORDER  = (128, 128, 128)

# ---- panel palette ----
WHITE         = (255, 255, 255)
TEXT_LIGHT    = (230, 235, 240)
ACCENT_GOLD   = (255, 210, 0)
PANEL_FILL    = (18, 20, 28, 190)
PANEL_SHADOW  = (0, 0, 0, 140)
CARD_BG       = (24, 28, 36, 220)
CARD_HI       = (255, 255, 255, 18)

GRADIENT_TOP  = (24, 26, 32)
GRADIENT_BOT  = (36, 40, 48)

# caches
_gradient_by_size: Dict[Tuple[int, int], pygame.Surface] = {}


def cell_color(cell: Cell) -> Tuple[int, int, int]:
    """Markers and walls win over search state; current wins over path over visited."""
    if cell.is_start:
        return COLOR_START
    if cell.is_end:
        return COLOR_END
    if cell.is_wall:
        return COLOR_WALL
    if cell.current:
        return COLOR_CURRENT
    if cell.is_path:
        return COLOR_PATH
    if cell.visited:
        return COLOR_VISITED
    return COLOR_EMPTY


# ---------- helpers ----------
def rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)


def glass_panel(screen: pygame.Surface, rect: pygame.Rect,
                fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), shadow_rgba, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    rounded_rect(card, pygame.Rect(0, 0, rect.width, rect.height), fill_rgba, radius=20)
    # subtle top sheen
    hi = pygame.Surface((rect.width, max(18, rect.height // 12)), pygame.SRCALPHA)
    pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=18)
    card.blit(hi, (0, 0))
    screen.blit(card, rect.topleft)


def draw_backdrop(screen: pygame.Surface):
    """Vertical dark gradient, cached per window size."""
    size = screen.get_size()
    surf = _gradient_by_size.get(size)
    if surf is None:
        w, h = size
        surf = pygame.Surface(size)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(GRADIENT_TOP[0] + (GRADIENT_BOT[0]-GRADIENT_TOP[0]) * t),
                int(GRADIENT_TOP[1] + (GRADIENT_BOT[1]-GRADIENT_TOP[1]) * t),
                int(GRADIENT_TOP[2] + (GRADIENT_BOT[2]-GRADIENT_TOP[2]) * t),
            )
            pygame.draw.line(surf, c, (0, y), (w, y))
        _gradient_by_size.clear()
        _gradient_by_size[size] = surf
    screen.blit(surf, (0, 0))
