"""
engine.py — Scheduling layer.

Sits between the pure rules in model.py and whatever hosts the game.

Classes:
    GameStore   — current GameState plus "state changed" observers
    TickEngine  — fixed-cadence simulation clock fed by the host's frame time
    InputMapper — forwards key names to the rules while listening
"""

import logging
import random
from typing import Callable

from . import model
from .config import TICK_SECONDS
from .model import GameState

logger = logging.getLogger(__name__)

Observer = Callable[[GameState], None]


# ─────────────────────────── GameStore ───────────────────────────
class GameStore:
    """
    Holds the one live GameState.
    Every change goes through dispatch(), which notifies observers.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self._state: GameState = model.new_game(self.rng)
        self._observers: list[Observer] = []

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register observer; returns a function that removes it again."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def dispatch(self, transition: Callable[..., GameState], *args) -> GameState:
        """Replace the state with transition(state, *args) and notify."""
        old = self._state
        new = transition(old, *args)
        if new == old:
            return old
        self._state = new
        if new.phase != old.phase:
            logger.info("Phase %s -> %s (score %d)", old.phase, new.phase, new.score)
        for observer in list(self._observers):
            observer(new)
        return new

    # ── Commands ─────────────────────────────────────────────────
    def tick(self) -> GameState:
        return self.dispatch(model.tick, self.rng)

    def press(self, key: str) -> GameState:
        return self.dispatch(model.apply_input, key)

    def start(self) -> GameState:
        return self.dispatch(model.start)

    def toggle_pause(self) -> GameState:
        return self.dispatch(model.toggle_pause)

    def reset(self) -> GameState:
        return self.dispatch(lambda _state: model.reset(self.rng))


# ─────────────────────────── TickEngine ──────────────────────────
class TickEngine:
    """
    Runs one tick per full interval of accumulated frame time, never more
    than one per frame.
    The host calls update(dt) every frame between start() and stop().
    """

    def __init__(self, store: GameStore, interval: float = TICK_SECONDS):
        self.store = store
        self.interval = interval
        self._elapsed: float = 0.0
        self._running: bool = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if not self._running:
            self._running = True
            self._elapsed = 0.0
            logger.debug("Tick engine started (%.3fs interval)", self.interval)

    def stop(self) -> None:
        if self._running:
            self._running = False
            self._elapsed = 0.0
            logger.debug("Tick engine stopped")

    def update(self, dt: float) -> int:
        """
        Advance by dt seconds. Returns the number of ticks evaluated.

        At most one tick per call; time missed during a long frame is
        dropped so input always gets a frame between two ticks.
        """
        if not self._running:
            return 0
        self._elapsed += dt
        if self._elapsed < self.interval:
            return 0
        self._elapsed = (self._elapsed - self.interval) % self.interval
        self.store.tick()
        return 1


# ─────────────────────────── InputMapper ─────────────────────────
class InputMapper:
    """Forwards key-down names to the store only while listening."""

    def __init__(self, store: GameStore):
        self.store = store
        self._listening: bool = False

    @property
    def listening(self) -> bool:
        return self._listening

    def start(self) -> None:
        self._listening = True

    def stop(self) -> None:
        self._listening = False

    def handle_key(self, key: str) -> bool:
        """Returns True if the key changed the game state."""
        if not self._listening:
            return False
        before = self.store.state
        after = self.store.press(key)
        if after is before:
            logger.debug("Ignored key %r in phase %s", key, before.phase)
            return False
        return True
