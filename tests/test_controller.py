"""
Tests for controller.py and view.py, run against pygame's dummy video driver.
"""

import pygame
import pytest

from gridsnake.config import PHASE_IDLE, PHASE_PLAYING, PHASE_PAUSED, PHASE_OVER
from gridsnake.controller import GameController
from gridsnake.view import BTN_START, BTN_PAUSE, BTN_RESET, IDLE_PROMPT, cell_center

from conftest import FixedRng


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


@pytest.fixture
def controller():
    ctrl = GameController(FixedRng(0, 0))
    ctrl.start()
    yield ctrl
    ctrl.stop()
    pygame.quit()


class TestLifecycle:
    """Acquiring and releasing the clock, the listener and the view."""

    def test_start_acquires(self, controller):
        assert controller.running
        assert controller.ticks.running
        assert controller.input.listening
        assert controller.view.state is controller.store.state

    def test_stop_releases(self, controller):
        controller.stop()
        assert not controller.running
        assert not controller.ticks.running
        assert not controller.input.listening
        controller.store.start()
        assert controller.view.state.phase == PHASE_IDLE

    def test_run_exits_on_quit_event(self):
        ctrl = GameController(FixedRng(0, 0))
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        ctrl.run()
        assert not ctrl.running
        assert not ctrl.ticks.running
        assert not ctrl.input.listening


class TestKeyboard:
    """pygame key codes reach the rules as key names."""

    def test_first_arrow_starts_and_steers(self, controller):
        controller.handle_event(key(pygame.K_LEFT))
        state = controller.store.state
        assert state.phase == PHASE_PLAYING
        assert state.direction == (-1, 0)
        assert controller.view.state is state

    def test_wasd(self, controller):
        controller.handle_event(key(pygame.K_d))
        assert controller.store.state.direction == (1, 0)

    def test_escape_toggles_pause(self, controller):
        controller.handle_event(key(pygame.K_w))
        controller.handle_event(key(pygame.K_ESCAPE))
        assert controller.store.state.phase == PHASE_PAUSED
        controller.handle_event(key(pygame.K_p))
        assert controller.store.state.phase == PHASE_PLAYING

    def test_pause_before_start_is_ignored(self, controller):
        controller.handle_event(key(pygame.K_SPACE))
        assert controller.store.state.phase == PHASE_IDLE

    def test_reset(self, controller):
        controller.handle_event(key(pygame.K_a))
        controller.ticks.update(1.0)
        controller.handle_event(key(pygame.K_r))
        state = controller.store.state
        assert state.phase == PHASE_IDLE
        assert state.snake == ((10, 10),)

    def test_enter_starts_then_replays(self, controller):
        controller.handle_event(key(pygame.K_RETURN))
        assert controller.store.state.phase == PHASE_PLAYING
        for _ in range(12):
            controller.ticks.update(0.15)
        assert controller.store.state.phase == PHASE_OVER
        controller.handle_event(key(pygame.K_RETURN))
        assert controller.store.state.phase == PHASE_IDLE

    def test_q_quits(self, controller):
        controller.handle_event(key(pygame.K_q))
        assert not controller.running


class TestView:
    """Drawing every phase and clicking the drawn buttons."""

    def test_renders_each_phase(self, controller):
        controller.view.render()
        controller.handle_event(key(pygame.K_UP))
        controller.view.render()
        controller.handle_event(key(pygame.K_p))
        controller.view.render()
        controller.handle_event(key(pygame.K_p))
        for _ in range(12):
            controller.ticks.update(0.15)
        assert controller.store.state.phase == PHASE_OVER
        controller.view.render()

    def test_head_is_painted(self, controller):
        controller.handle_event(key(pygame.K_w))
        controller.view.render()
        r, g, b = tuple(controller.screen.get_at(cell_center((10, 10))))[:3]
        assert g > 150
        assert g > r

    def test_click_play_button(self, controller):
        controller.view.render()
        rect = controller.view.button_rect(BTN_START)
        assert rect is not None
        controller.handle_event(click(rect.center))
        assert controller.store.state.phase == PHASE_PLAYING
        assert controller.store.state.direction == (0, -1)

    def test_click_pause_and_reset_buttons(self, controller):
        controller.handle_event(key(pygame.K_a))
        controller.view.render()
        controller.handle_event(click(controller.view.button_rect(BTN_PAUSE).center))
        assert controller.store.state.phase == PHASE_PAUSED
        controller.view.render()
        controller.handle_event(click(controller.view.button_rect(BTN_RESET).center))
        assert controller.store.state.phase == PHASE_IDLE

    def test_no_pause_button_before_start(self, controller):
        controller.view.render()
        assert controller.view.button_rect(BTN_PAUSE) is None

    def test_click_outside_buttons(self, controller):
        controller.view.render()
        controller.handle_event(click((1, 1)))
        assert controller.store.state.phase == PHASE_IDLE

    def test_eyes_follow_the_move_not_the_queued_turn(self, controller):
        controller.handle_event(key(pygame.K_w))
        controller.handle_event(key(pygame.K_d))
        assert controller.store.state.pending == (1, 0)
        controller.view.render()
        cx, cy = cell_center((10, 10))
        # Upper-left eye only exists while the head still faces up.
        r, g, b = tuple(controller.screen.get_at((cx - 6, cy - 6)))[:3]
        assert r > 180

    @pytest.mark.parametrize("code", [
        pygame.K_w, pygame.K_a, pygame.K_s, pygame.K_d,
        pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT,
    ])
    def test_idle_prompt_keys_start_the_game(self, controller, code):
        assert "WASD" in IDLE_PROMPT and "ARROWS" in IDLE_PROMPT
        controller.handle_event(key(code))
        assert controller.store.state.phase == PHASE_PLAYING

    def test_other_keys_do_not_start(self, controller):
        controller.handle_event(key(pygame.K_x))
        controller.handle_event(key(pygame.K_TAB))
        assert controller.store.state.phase == PHASE_IDLE
