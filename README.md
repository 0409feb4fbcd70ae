# towerstacker

A tower-stacking arcade game. A block slides up and down the playfield;
press the button to freeze it. Each new layer must land within two
pixels of the one before it, or the game is lost. Stack eight layers to
win. The first four layers are drawn as two stacked blocks, the last
four as single blocks.

The playfield is a 64x32 pixel panel, laid out the way a two-half HUB75
LED matrix is scanned: sixteen rows, each word carrying one pixel from
the upper half and one from the lower half.

## Install

```
pip install .
```

## Play in the terminal

```
towerstacker [--store FILE] [--volume N]
```

- `--store` – file that keeps the high score (default `high_score.bin`).
- `--volume` – the volume knob reading, 0 to 4095 (default 4095).

The whole panel is printed with `#` for lit pixels and `.` for dark
ones, followed by the state, the number of frozen layers and the high
score. Then type one command per line:

- `p` or an empty line – press the button
- `w N` – advance N frames (1 if N is left out)
- `r` – reset the stored high score to 0
- `q` – quit

Game time only moves when frames are advanced; each frame is 6.4 ms.
A press only counts if more than 200 ms of game time (about 32 frames)
have passed since the last accepted press, so advance frames between
presses. After a win or a loss the result screen stays for five seconds
of game time, or until the next press; the high score is then saved if
it was beaten.

## Using the pieces

- `towerstacker.screens` – pixel functions for every screen:
  `title_tower`, `title_stacker`, `you_win`, `you_lost`,
  `high_score_digit` (one digit, clamped to 0..8), the frame lines and
  boxes, and the block helpers `block`, `col_x_start` and `block_pair`.
- `towerstacker.storage` – `ScoreStore(path)` with `read()` and
  `write(score)`. The score is a big-endian signed 32-bit value at the
  start of the file (`encode_score` / `decode_score`); bytes never
  written read as `0xFF`.
- `towerstacker.tone` – `pwm_wrap(frequency, clock_hz)` and
  `duty_level(frequency, volume_level, clock_hz)`, and a `Buzzer` with
  `start(frequency)`, `set_volume(frequency, volume_level)`, `stop()`,
  and the `frequency`, `wrap`, `level` and `audible` attributes. Full
  volume gives a 50 % duty cycle.
- `towerstacker.led` – `BreathingLeds`, active-low RGB levels (255 is
  off, 0 fully on): `green_on()`, `red_on()`, `step()` for the
  colour-cycling breath, `set_breathing(state)`, `on_timer()` and the
  `levels` tuple.
- `towerstacker.game` – `State` (`TITLE`, `PLAYING`, `WON`, `LOST`) and
  `StackerGame(store, leds, buzzer, clock)`, where `clock` returns
  microseconds. Call `press()` for a button press (it returns `False`
  when debounced), `update(volume_level)` once per frame,
  `reset_high_score()`, and `pixel(x, y)`, `row_data(row)` or `frame()`
  to get what to draw.
- `towerstacker.cli` – `render(game)` and `main(argv)`.

## What it does not do

The package models the game, the buzzer and the status light as state;
it plays no sound, lights no LEDs and drives no real panel. The terminal
front end is turn-based: it advances only when frames are requested.

## Tests

```
pip install .[test]
pytest
```