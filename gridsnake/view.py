"""
view.py — View layer.

Paints the latest GameState it was told about:
  - Pre-rendered grid surface (drawn once, blitted every frame)
  - CRT scanline overlay for retro atmosphere
  - Pulsing food with layered glow
  - Snake with glowing head and a gradient body
  - Score panel with pause / reset buttons
  - Overlays for the idle, paused and game-over phases

Public API:
    GameView(screen)            — bind to a pygame surface
    view.on_state_changed(s)    — observer hook, keeps the latest snapshot
    view.render()               — draw the current frame
    view.button_at(pos)         — name of the clickable button under pos
"""

import math
import pygame

from .config import (
    WIDTH, HEIGHT, PANEL_H, BOARD_W, BOARD_H,
    OFFSET_X, OFFSET_Y, CELL, GRID_SIZE,
    BG, GRID_COL, SNAKE_HEAD, SNAKE_BODY, FOOD_COL, UI_COL, TEXT_COL,
    DANGER_COL, BLACK, PANEL_BG, BORDER_COL,
    PHASE_IDLE, PHASE_PLAYING, PHASE_PAUSED, PHASE_OVER,
)
from .model import GameState

# Button names returned by button_at(); the controller maps them to commands.
BTN_START = "start"
BTN_PAUSE = "pause"
BTN_RESET = "reset"

IDLE_PROMPT = "PRESS WASD / ARROWS TO START"


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


def cell_center(cell: tuple[int, int]) -> tuple[int, int]:
    """Screen pixel at the centre of a board cell."""
    return (OFFSET_X + cell[0] * CELL + CELL // 2,
            OFFSET_Y + cell[1] * CELL + CELL // 2)


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameState snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.state: GameState | None = None
        self._init_fonts()
        self._build_static_surfaces()

        # Score rack-up animation state
        self._disp_score: float = 0.0

        # Pulse animations
        self._anim_tick: int = 0

        # (name, rect) of the buttons drawn in the last frame
        self._buttons: list[tuple[str, pygame.Rect]] = []

    # ── Observer hook ────────────────────────────────────────────
    def on_state_changed(self, state: GameState) -> None:
        self.state = state

    def button_at(self, pos: tuple[int, int]) -> str | None:
        for name, rect in self._buttons:
            if rect.collidepoint(pos):
                return name
        return None

    def button_rect(self, name: str) -> pygame.Rect | None:
        for btn, rect in self._buttons:
            if btn == name:
                return rect
        return None

    # ── Main entry ───────────────────────────────────────────────
    def render(self) -> None:
        state = self.state
        if state is None:
            return
        self._anim_tick += 1
        self._buttons = []

        # Snap down on reset, ease up while scoring
        if state.score < self._disp_score:
            self._disp_score = float(state.score)
        self._disp_score += (state.score - self._disp_score) * 0.25

        # ── Base layers
        self.screen.fill(BG)
        self.screen.blit(self._grid_surf, (OFFSET_X, OFFSET_Y))

        # ── Game content
        self._draw_food(state.food)
        self._draw_head_glow(state)
        self._draw_snake(state)

        # ── CRT scanlines (over everything)
        self.screen.blit(self._scanline_surf, (0, 0))

        # ── Chrome
        self._draw_border(state)
        self._draw_panel(state)

        # ── State overlays
        if state.phase == PHASE_IDLE:
            self._draw_idle_overlay()
        elif state.phase == PHASE_PAUSED:
            self._draw_paused_overlay()
        elif state.phase == PHASE_OVER:
            self._draw_game_over_overlay(state)
        elif state.phase == PHASE_PLAYING:
            hint = self.font_tiny.render("ESC TO PAUSE", True, UI_COL)
            self.screen.blit(hint, hint.get_rect(
                topright=(OFFSET_X + BOARD_W - 6, OFFSET_Y + 6)))

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        # Grid (drawn once, alpha so BG shows through slightly)
        self._grid_surf = pygame.Surface((BOARD_W, BOARD_H), pygame.SRCALPHA)
        for i in range(GRID_SIZE + 1):
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (i * CELL, 0), (i * CELL, BOARD_H))
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (0, i * CELL), (BOARD_W, i * CELL))

        # CRT scanlines — every other horizontal line, very subtle
        self._scanline_surf = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        for y in range(0, HEIGHT, 2):
            pygame.draw.line(self._scanline_surf, (0, 0, 0, 18), (0, y), (WIDTH, y))

    # ── Food ─────────────────────────────────────────────────────
    def _draw_food(self, food: tuple[int, int]) -> None:
        pulse = 0.80 + 0.20 * math.sin(self._anim_tick * 0.10)
        x, y = cell_center(food)
        half = CELL // 2 - 2

        # Layered outer glow
        glow_r = half + 10
        glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        for gr in range(glow_r, half, -1):
            a = int(80 * (1 - (gr - half) / (glow_r - half)) * pulse)
            pygame.draw.circle(glow, _with_alpha(FOOD_COL, a), (glow_r, glow_r), gr)
        self.screen.blit(glow, (x - glow_r, y - glow_r))

        # Core square, inset 2 px like the cell padding
        rect = pygame.Rect(0, 0, CELL - 4, CELL - 4)
        rect.center = (x, y)
        pygame.draw.rect(self.screen, _brighten(FOOD_COL, pulse + 0.1), rect,
                         border_radius=3)

    # ── Snake ────────────────────────────────────────────────────
    def _draw_head_glow(self, state: GameState) -> None:
        """Soft ambient glow around the head, drawn first (additive)."""
        if state.phase == PHASE_OVER:
            return
        cx, cy = cell_center(state.head)
        glow_size = 28
        glow = pygame.Surface((glow_size * 2, glow_size * 2), pygame.SRCALPHA)
        for gr in range(glow_size, 0, -2):
            a = int(30 * (gr / glow_size) ** 0.6)
            pygame.draw.circle(glow, _with_alpha(SNAKE_HEAD, a),
                               (glow_size, glow_size), gr)
        self.screen.blit(glow, (cx - glow_size, cy - glow_size),
                         special_flags=pygame.BLEND_RGBA_ADD)

    def _draw_snake(self, state: GameState) -> None:
        length = state.length
        dead = state.phase == PHASE_OVER

        for i, (sx, sy) in enumerate(state.snake):
            if i == 0:
                color = DANGER_COL if dead else SNAKE_HEAD
                inset = 1
            else:
                t = 1.0 - (i / max(length - 1, 1)) * 0.6
                color = _lerp_color(_brighten(SNAKE_BODY, 0.55), SNAKE_BODY, t)
                inset = 2
            rect = pygame.Rect(
                OFFSET_X + sx * CELL + inset,
                OFFSET_Y + sy * CELL + inset,
                CELL - inset * 2,
                CELL - inset * 2,
            )
            radius = rect.width // 3 if i == 0 else rect.width // 5
            pygame.draw.rect(self.screen, color, rect, border_radius=radius)

            # Inner highlight stripe on head only
            if i == 0:
                hi = pygame.Rect(rect.x + 3, rect.y + 3, rect.w - 6, max(2, rect.h // 4))
                pygame.draw.rect(self.screen, _brighten(color, 1.4), hi, border_radius=2)

        self._draw_eyes(state)

    def _draw_eyes(self, state: GameState) -> None:
        cx, cy = cell_center(state.head)
        dx, dy = state.direction.x, state.direction.y
        px, py = -dy, dx  # perpendicular

        for sign in (+1, -1):
            ex = int(cx + dx * 4 + sign * px * 4)
            ey = int(cy + dy * 4 + sign * py * 4)
            pygame.draw.rect(self.screen, (230, 230, 230), (ex - 2, ey - 2, 4, 4))
            pygame.draw.rect(self.screen, BLACK, (ex - 1, ey - 1, 2, 2))

    # ── Border ───────────────────────────────────────────────────
    def _draw_border(self, state: GameState) -> None:
        color = DANGER_COL if state.phase == PHASE_OVER else BORDER_COL
        pygame.draw.rect(self.screen, color,
                         (OFFSET_X - 2, OFFSET_Y - 2, BOARD_W + 4, BOARD_H + 4),
                         2, border_radius=4)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, state: GameState) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        self.screen.blit(self.font_small.render("SCORE", True, UI_COL), (16, 8))
        self.screen.blit(
            self.font_big.render(str(int(round(self._disp_score))), True, SNAKE_HEAD),
            (16, 24),
        )

        length = self.font_tiny.render(f"LENGTH {state.length}", True, UI_COL)
        self.screen.blit(length, length.get_rect(center=(WIDTH // 2, PANEL_H // 2)))

        # Right side: pause toggle (only once started) and reset
        bx = WIDTH - 16
        bx = self._draw_panel_button(BTN_RESET, "RESET", bx)
        if state.phase in (PHASE_PLAYING, PHASE_PAUSED):
            label = "RESUME" if state.phase == PHASE_PAUSED else "PAUSE"
            self._draw_panel_button(BTN_PAUSE, label, bx - 8)

    def _draw_panel_button(self, name: str, label: str, right: int) -> int:
        txt = self.font_small.render(label, True, TEXT_COL)
        rect = pygame.Rect(0, 0, txt.get_width() + 18, 26)
        rect.midright = (right, PANEL_H // 2)
        pygame.draw.rect(self.screen, _lerp_color(PANEL_BG, BORDER_COL, 0.3), rect,
                         border_radius=4)
        pygame.draw.rect(self.screen, BORDER_COL, rect, 1, border_radius=4)
        self.screen.blit(txt, txt.get_rect(center=rect.center))
        self._buttons.append((name, rect))
        return rect.left

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self, alpha: int) -> None:
        surf = pygame.Surface((BOARD_W, BOARD_H), pygame.SRCALPHA)
        surf.fill((0, 0, 0, alpha))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

    def _draw_animated_title(self, title: str, color: tuple,
                             cy: int, font: pygame.font.Font) -> int:
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        surf = font.render(title, True, _brighten(color, pulse))
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy + surf.get_height() // 2)))
        return cy + surf.get_height() + 12

    def _draw_text_line(self, text: str, color: tuple,
                        cy: int, font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_button(self, name: str, label: str, color: tuple, cy: int) -> int:
        btn_w = max(180, self.font_small.size(label)[0] + 40)
        btn_h = 36
        rect = pygame.Rect(WIDTH // 2 - btn_w // 2, cy, btn_w, btn_h)
        bg = pygame.Surface(rect.size, pygame.SRCALPHA)
        bg.fill(_with_alpha(color, 30))
        self.screen.blit(bg, rect.topleft)
        pygame.draw.rect(self.screen, color, rect, 2, border_radius=4)
        txt = self.font_small.render(label, True, color)
        self.screen.blit(txt, txt.get_rect(center=rect.center))
        self._buttons.append((name, rect))
        return cy + btn_h + 10

    # ── State overlays ────────────────────────────────────────────
    def _draw_idle_overlay(self) -> None:
        self._draw_overlay_base(128)
        cy = OFFSET_Y + BOARD_H // 2 - 70
        cy = self._draw_animated_title("SNAKE", SNAKE_HEAD, cy, self.font_title)
        cy = self._draw_text_line(IDLE_PROMPT, TEXT_COL, cy, self.font_med)
        cy = self._draw_text_line("OR ENTER", UI_COL, cy, self.font_tiny)
        cy += 6
        self._draw_button(BTN_START, "PLAY", SNAKE_HEAD, cy)

    def _draw_paused_overlay(self) -> None:
        self._draw_overlay_base(150)
        cy = OFFSET_Y + BOARD_H // 2 - 36
        cy = self._draw_animated_title("PAUSED", FOOD_COL, cy, self.font_title)
        self._draw_text_line("PRESS  P  OR  ESC  TO RESUME", UI_COL, cy, self.font_tiny)

    def _draw_game_over_overlay(self, state: GameState) -> None:
        self._draw_overlay_base(205)
        cy = OFFSET_Y + BOARD_H // 2 - 80
        cy = self._draw_animated_title("GAME OVER!", DANGER_COL, cy, self.font_title)
        cy = self._draw_text_line(f"FINAL SCORE: {state.score}", TEXT_COL, cy, self.font_med)
        cy += 10
        self._draw_button(BTN_RESET, "PLAY AGAIN", SNAKE_HEAD, cy)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        specs = [
            ("font_title", "courier", 40, True),
            ("font_big",   "courier", 24, True),
            ("font_med",   "courier", 17, False),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except (pygame.error, OSError):
                setattr(self, attr, pygame.font.Font(None, size))
