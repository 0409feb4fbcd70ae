"""Buzzer tone generation: PWM wrap and duty levels scaled by the volume knob."""

from __future__ import annotations

DEFAULT_CLOCK_HZ = 150_000_000
CLOCK_DIVIDER = 16
ADC_FULL_SCALE = 4095
_UINT16_MAX = 0xFFFF


def pwm_wrap(frequency: int, clock_hz: int = DEFAULT_CLOCK_HZ) -> int:
    """Counter top value giving ``frequency`` Hz with the fixed clock divider."""
    if frequency <= 0:
        raise ValueError("frequency must be positive")
    return clock_hz // (CLOCK_DIVIDER * frequency)


def duty_level(frequency: int, volume_level: int, clock_hz: int = DEFAULT_CLOCK_HZ) -> int:
    """PWM level for a volume reading; full scale gives a 50 % duty cycle."""
    if not 0 <= volume_level <= _UINT16_MAX:
        raise ValueError("volume level must fit in 16 bits")
    return volume_level * (pwm_wrap(frequency, clock_hz) // 2) // ADC_FULL_SCALE


class Buzzer:
    """The state of the sound PWM output."""

    def __init__(self, clock_hz: int = DEFAULT_CLOCK_HZ) -> None:
        self.clock_hz = clock_hz
        self.frequency: int | None = None
        self.wrap = 0
        self.level = 0

    def start(self, frequency: int) -> None:
        """Configure the output for ``frequency``; the level starts at zero."""
        self.wrap = pwm_wrap(frequency, self.clock_hz)
        self.frequency = frequency
        self.level = 0

    def set_volume(self, frequency: int, volume_level: int) -> None:
        self.level = duty_level(frequency, volume_level, self.clock_hz)

    def stop(self) -> None:
        self.level = 0

    @property
    def audible(self) -> bool:
        return self.level > 0