from collections import namedtuple

import pygame

LEFT = "left"
RIGHT = "right"

InputState = namedtuple(
    "InputState", ["left", "right", "target_x", "clear_target"], defaults=(False, False, None, False)
)

IDLE_INPUT = InputState()

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
PAUSE_KEYS = (pygame.K_p,)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


class InputController:
    """Collects input events between ticks and hands out one snapshot per tick.

    Held keys persist across snapshots. Drag targets, pause toggles and start
    requests are consumed by the snapshot that reports them.
    """

    def __init__(self, min_x, max_x, scale_x=1.0):
        self.min_x = min_x
        self.max_x = max_x
        self.scale_x = scale_x
        self.held = {LEFT: False, RIGHT: False}
        self._target_x = None
        self._clear_target = False
        self._pause_requests = 0
        self._start_requested = False

    # --- Event sinks ---

    def press(self, direction):
        self.held[direction] = True

    def release(self, direction):
        self.held[direction] = False

    def toggle_pause(self):
        self._pause_requests += 1

    def start(self):
        self._start_requested = True

    def set_target(self, x):
        self._target_x = max(self.min_x, min(self.max_x, x))
        self._clear_target = False

    def clear_target(self):
        self._target_x = None
        self._clear_target = True

    def drop_target(self):
        """Forget a pending drag target without asking the ship to let go."""
        self._target_x = None
        self._clear_target = False

    def handle_event(self, event):
        """Translate a pygame event. Returns True if the event was consumed."""
        if event.type == pygame.KEYDOWN:
            if event.key in LEFT_KEYS:
                self.press(LEFT)
            elif event.key in RIGHT_KEYS:
                self.press(RIGHT)
            elif event.key in PAUSE_KEYS:
                self.toggle_pause()
            elif event.key in START_KEYS:
                self.start()
            else:
                return False
            return True
        if event.type == pygame.KEYUP:
            if event.key in LEFT_KEYS:
                self.release(LEFT)
            elif event.key in RIGHT_KEYS:
                self.release(RIGHT)
            else:
                return False
            return True
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.set_target(event.pos[0] * self.scale_x)
            return True
        if event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self.set_target(event.pos[0] * self.scale_x)
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.clear_target()
            return True
        return False

    # --- Per-tick sampling ---

    def take_commands(self):
        """Return (start_requested, pause_toggles) and reset both."""
        commands = (self._start_requested, self._pause_requests)
        self._start_requested = False
        self._pause_requests = 0
        return commands

    def sample(self):
        state = InputState(
            left=self.held[LEFT],
            right=self.held[RIGHT],
            target_x=self._target_x,
            clear_target=self._clear_target,
        )
        self._target_x = None
        self._clear_target = False
        return state
