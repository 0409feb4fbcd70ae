"""RGB status LEDs: fixed win/lose colours and a breathing idle pattern."""

from __future__ import annotations

PERIOD = 255
_MAX_DUTY = 100


class BreathingLeds:
    """Active-low RGB LED levels; ``PERIOD`` means off and 0 means fully on."""

    def __init__(self) -> None:
        self.red = PERIOD
        self.green = PERIOD
        self.blue = PERIOD
        self.duty_cycle = 0
        self.color = 0
        self.rising = True
        self.breathing = True

    @property
    def levels(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def green_on(self) -> None:
        self.red, self.green, self.blue = PERIOD, 0, PERIOD

    def red_on(self) -> None:
        self.red, self.green, self.blue = 0, PERIOD, PERIOD

    def green(self) -> None:  # type: ignore[no-redef]
        self.green_on()

    def red(self) -> None:  # type: ignore[no-redef]
        self.red_on()

    def step(self) -> None:
        """Advance the breathing pattern by one percent of duty cycle."""
        if self.rising and self.duty_cycle == _MAX_DUTY:
            self.color = (self.color + 1) % 3
            self.rising = False
        elif not self.rising and self.duty_cycle == 0:
            self.rising = True

        self.duty_cycle += 1 if self.rising else -1

        level = self.duty_cycle * PERIOD // _MAX_DUTY
        self.red, self.green, self.blue = (
            level if self.color == channel else PERIOD for channel in range(3)
        )

    def set_breathing(self, state: bool) -> None:
        self.breathing = state

    def on_timer(self) -> bool:
        """Periodic tick; steps the pattern while breathing. Keeps the timer running."""
        if self.breathing:
            self.step()
        return True