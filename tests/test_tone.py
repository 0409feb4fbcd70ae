import pytest

from towerstacker.tone import (
    ADC_FULL_SCALE,
    DEFAULT_CLOCK_HZ,
    Buzzer,
    duty_level,
    pwm_wrap,
)


@pytest.mark.parametrize("frequency", [0, -5])
def test_wrap_rejects_non_positive_frequency(frequency):
    with pytest.raises(ValueError):
        pwm_wrap(frequency)


def test_wrap_shrinks_with_frequency():
    assert pwm_wrap(150) > pwm_wrap(500)
    assert pwm_wrap(500, DEFAULT_CLOCK_HZ) == pwm_wrap(500)


def test_wrap_times_divider_fits_clock():
    wrap = pwm_wrap(500)
    assert wrap * 16 * 500 <= DEFAULT_CLOCK_HZ < (wrap + 1) * 16 * 500


def test_duty_bounds():
    assert duty_level(500, 0) == 0
    assert duty_level(500, ADC_FULL_SCALE) == pwm_wrap(500) // 2


def test_duty_monotonic():
    levels = [duty_level(150, v) for v in range(0, ADC_FULL_SCALE + 1, 256)]
    assert levels == sorted(levels)


@pytest.mark.parametrize("volume", [-1, 0x10000])
def test_duty_rejects_out_of_range_volume(volume):
    with pytest.raises(ValueError):
        duty_level(500, volume)


def test_buzzer_lifecycle():
    buzzer = Buzzer()
    buzzer.start(500)
    assert buzzer.frequency == 500
    assert buzzer.wrap == pwm_wrap(500)
    assert buzzer.level == 0
    buzzer.set_volume(500, ADC_FULL_SCALE)
    assert buzzer.level == pwm_wrap(500) // 2
    assert buzzer.audible
    buzzer.stop()
    assert buzzer.level == 0
    assert not buzzer.audible


def test_buzzer_uses_its_clock():
    buzzer = Buzzer(clock_hz=DEFAULT_CLOCK_HZ // 2)
    buzzer.start(150)
    assert buzzer.wrap == pwm_wrap(150, DEFAULT_CLOCK_HZ // 2)