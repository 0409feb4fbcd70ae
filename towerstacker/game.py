"""Game state of the tower stacker: title, play, win and lose screens."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable

from towerstacker.led import BreathingLeds
from towerstacker.screens import (
    BLOCK_GAP,
    MAX_LAYERS,
    anim_line,
    block_pair,
    box_1,
    box_2,
    box_3,
    box_4,
    box_5,
    box_6,
    col_x_start,
    high_score_digit,
    line_1,
    line_2,
    line_3,
    line_14,
    mid_line,
    title_stacker,
    title_tower,
    you_lost,
    you_win,
)
from towerstacker.storage import ScoreStore
from towerstacker.tone import Buzzer

STACK_TOLERANCE = 2
INITIAL_FRAME_DELAY = 30
DEBOUNCE_US = 200_000
RESULT_DURATION_US = 5_000_000
WIN_FREQUENCY = 500
LOSE_FREQUENCY = 150
PHASE_LAYERS = 4
FIRST_PHASE_LIMIT = 19
SECOND_PHASE_LIMIT = 26

PANEL_WIDTH = 64
PANEL_ROWS = 16
UPPER_BIT = 0b000001
LOWER_BIT = 0b001000

_TITLE_MASKS = (
    title_tower,
    lambda x, y: title_stacker(x - 12, y),
    line_1,
    line_2,
    line_3,
    box_1,
    box_2,
    box_3,
    box_4,
    box_5,
    box_6,
)
_PLAY_MASKS = (anim_line, mid_line, line_14)


def _monotonic_us() -> int:
    return time.monotonic_ns() // 1000


class State(enum.IntEnum):
    TITLE = 0
    PLAYING = 1
    WON = 2
    LOST = 3


class StackerGame:
    """One tower stacker: button presses and frame ticks drive the state."""

    def __init__(
        self,
        store: ScoreStore,
        leds: BreathingLeds | None = None,
        buzzer: Buzzer | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.store = store
        self.leds = leds if leds is not None else BreathingLeds()
        self.buzzer = buzzer if buzzer is not None else Buzzer()
        self._clock = clock if clock is not None else _monotonic_us
        self.high_score = store.read()
        self.state = State.TITLE
        self.frozen: list[int] = []
        self.active_y = 0
        self.active_dir = 1
        self.frame_counter = 0
        self.frame_delay = INITIAL_FRAME_DELAY
        self._last_press = self._clock()
        self._state_start = 0

    @property
    def num_frozen(self) -> int:
        return len(self.frozen)

    def reset_high_score(self) -> None:
        """Clear the stored high score."""
        self.store.write(0)
        self.high_score = 0

    def press(self) -> bool:
        """Handle a button press; returns False if it fell within the debounce time."""
        now = self._clock()
        if now - self._last_press <= DEBOUNCE_US:
            return False
        self._last_press = now
        if self.state is State.TITLE:
            self._start()
        elif self.state is State.PLAYING:
            self._drop()
        else:
            self._finish()
        return True

    def update(self, volume_level: int) -> None:
        """Advance one frame, with the current volume knob reading."""
        if self.state in (State.WON, State.LOST):
            frequency = WIN_FREQUENCY if self.state is State.WON else LOSE_FREQUENCY
            self.buzzer.set_volume(frequency, volume_level)
            if self._clock() - self._state_start >= RESULT_DURATION_US:
                self._finish()
        if self.state is State.PLAYING:
            self._tick()

    def _start(self) -> None:
        self.state = State.PLAYING
        self.leds.set_breathing(False)
        self.frozen = []
        self.active_y = 0
        self.active_dir = 1
        self.frame_delay = INITIAL_FRAME_DELAY
        self.frame_counter = 0

    def _drop(self) -> None:
        if self.frozen:
            target = self.frozen[-1]
            valid = abs(self.active_y - target) <= STACK_TOLERANCE
            if len(self.frozen) == PHASE_LAYERS and not valid:
                valid = abs(self.active_y - (target + BLOCK_GAP)) <= STACK_TOLERANCE
            if not valid:
                self._enter_result(State.LOST)
                self.leds.red_on()
                self.buzzer.start(LOSE_FREQUENCY)
                return

        self.frozen.append(self.active_y)
        self.frame_delay = max(self.frame_delay * 75 // 100, 1)

        if len(self.frozen) >= MAX_LAYERS:
            self._enter_result(State.WON)
            self.leds.green_on()
            self.buzzer.start(WIN_FREQUENCY)
        else:
            self.active_y = 0
            self.active_dir = 1
            self.frame_counter = 0

    def _enter_result(self, state: State) -> None:
        self.state = state
        self._state_start = self._clock()

    def _finish(self) -> None:
        self.buzzer.stop()
        self.leds.set_breathing(True)
        self.state = State.TITLE
        if len(self.frozen) > self.high_score:
            self.high_score = len(self.frozen)
            self.store.write(self.high_score)

    def _tick(self) -> None:
        self.frame_counter += 1
        if self.frame_counter < self.frame_delay:
            return
        self.frame_counter = 0
        self.active_y += self.active_dir
        limit = FIRST_PHASE_LIMIT if len(self.frozen) < PHASE_LAYERS else SECOND_PHASE_LIMIT
        if self.active_y >= limit:
            self.active_y = limit
            self.active_dir = -1
        if self.active_y <= 0:
            self.active_y = 0
            self.active_dir = 1

    def pixel(self, x: int, y: int) -> bool:
        """Whether the panel pixel at (x, y) is lit in the current state."""
        if self.state is State.TITLE:
            return any(mask(x, y) for mask in _TITLE_MASKS) or high_score_digit(
                x, y, self.high_score
            )
        if self.state is State.LOST:
            return you_lost(x, y)
        if self.state is State.WON:
            return you_win(x, y)
        if any(mask(x, y) for mask in _PLAY_MASKS):
            return True
        for col, b_y in enumerate(self.frozen):
            if block_pair(x, y, b_y, col_x_start(col), col):
                return True
        col = len(self.frozen)
        return block_pair(x, y, self.active_y, col_x_start(col), col)

    def row_data(self, row: int) -> list[int]:
        """Words shifted out for one scan row, from x = 63 down to x = 0."""
        return [
            (UPPER_BIT if self.pixel(x, row) else 0)
            | (LOWER_BIT if self.pixel(x, row + PANEL_ROWS) else 0)
            for x in reversed(range(PANEL_WIDTH))
        ]

    def frame(self) -> list[list[int]]:
        """The words for every scan row of one refresh."""
        return [self.row_data(row) for row in range(PANEL_ROWS)]