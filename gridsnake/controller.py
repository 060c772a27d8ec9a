"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame window and event loop.
  - Translate raw keyboard and mouse events into key names and commands.
  - Drive the frame loop: feed elapsed time to the tick engine, ask the
    view to render.
  - Acquire the tick engine and input mapper on start and release them on
    every exit path.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that reads pygame events.
"""

import logging
import random

import pygame

from .config import (
    WIDTH, HEIGHT, FPS, CAPTION,
    PHASE_IDLE, PHASE_OVER,
)
from .engine import GameStore, InputMapper, TickEngine
from .view import GameView, BTN_START, BTN_PAUSE, BTN_RESET

logger = logging.getLogger(__name__)

# pygame key codes -> key names understood by the rules
KEY_NAMES = {
    pygame.K_UP:    "ArrowUp",
    pygame.K_DOWN:  "ArrowDown",
    pygame.K_LEFT:  "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_w:     "w",
    pygame.K_s:     "s",
    pygame.K_a:     "a",
    pygame.K_d:     "d",
}

PAUSE_KEYS = (pygame.K_p, pygame.K_ESCAPE, pygame.K_SPACE)
RESET_KEYS = (pygame.K_r,)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
QUIT_KEYS  = (pygame.K_q,)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, rng: random.Random | None = None):
        pygame.init()
        self.screen  = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(CAPTION)
        self.clock   = pygame.time.Clock()
        self.store   = GameStore(rng)
        self.ticks   = TickEngine(self.store)
        self.input   = InputMapper(self.store)
        self.view    = GameView(self.screen)
        self.running = False
        self._unsubscribe = None

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        self.start()
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0
                self._handle_events()
                self.ticks.update(dt)
                self.view.render()
        finally:
            self.stop()
            pygame.quit()

    # ── Lifecycle ─────────────────────────────────────────────────
    def start(self) -> None:
        """Subscribe the view and begin ticking and listening."""
        if self.running:
            return
        self._unsubscribe = self.store.subscribe(self.view.on_state_changed)
        self.view.on_state_changed(self.store.state)
        self.ticks.start()
        self.input.start()
        self.running = True
        logger.info("Game view active (%dx%d @ %d FPS)", WIDTH, HEIGHT, FPS)

    def stop(self) -> None:
        """Release the tick engine, the key listener and the view subscription."""
        self.ticks.stop()
        self.input.stop()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self.running:
            self.running = False
            logger.info("Game view torn down (final score %d)", self.store.state.score)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_click(event.pos)

    def _handle_keydown(self, key: int) -> None:
        if key in QUIT_KEYS:
            self.running = False
        elif key in KEY_NAMES:
            self.input.handle_key(KEY_NAMES[key])
        elif key in PAUSE_KEYS:
            self.store.toggle_pause()
        elif key in RESET_KEYS:
            self.store.reset()
        elif key in START_KEYS:
            if self.store.state.phase == PHASE_IDLE:
                self.store.start()
            elif self.store.state.phase == PHASE_OVER:
                self.store.reset()

    def _handle_click(self, pos: tuple[int, int]) -> None:
        button = self.view.button_at(pos)
        if button == BTN_START:
            self.store.start()
        elif button == BTN_PAUSE:
            self.store.toggle_pause()
        elif button == BTN_RESET:
            self.store.reset()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    GameController().run()
