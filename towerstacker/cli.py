"""Terminal front end: play the stacker with typed commands."""

from __future__ import annotations

import argparse
import sys

from towerstacker.game import PANEL_ROWS, PANEL_WIDTH, StackerGame
from towerstacker.storage import ScoreStore
from towerstacker.tone import ADC_FULL_SCALE

# One refresh scans 16 rows with a 400 us hold on each.
FRAME_US = PANEL_ROWS * 400

_HELP = "commands: p (or empty) press, w N advance N frames, r reset high score, q quit"


class _FrameClock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


def render(game: StackerGame) -> str:
    """Draw the whole panel, '#' for lit pixels and '.' for dark ones."""
    return "\n".join(
        "".join("#" if game.pixel(x, y) else "." for x in range(PANEL_WIDTH))
        for y in range(PANEL_ROWS * 2)
    )


def _status(game: StackerGame) -> str:
    return (
        f"state: {game.state.name.lower()} layers: {game.num_frozen} "
        f"high score: {game.high_score}"
    )


def _show(game: StackerGame) -> None:
    print(render(game))
    print(_status(game))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="towerstacker", description=_HELP)
    parser.add_argument("--store", default="high_score.bin", help="high score file")
    parser.add_argument("--volume", type=int, default=ADC_FULL_SCALE, help="0..4095")
    args = parser.parse_args(argv)
    if not 0 <= args.volume <= ADC_FULL_SCALE:
        parser.error(f"--volume must be between 0 and {ADC_FULL_SCALE}")

    clock = _FrameClock()
    game = StackerGame(ScoreStore(args.store), None, None, clock)
    _show(game)

    for line in sys.stdin:
        command, *rest = line.split() or ["p"]
        if command == "q":
            break
        if command == "p":
            game.press()
        elif command == "r":
            game.reset_high_score()
        elif command == "w":
            try:
                frames = int(rest[0]) if rest else 1
            except ValueError:
                print(f"not a frame count: {rest[0]}", file=sys.stderr)
                continue
            for _ in range(frames):
                clock.now += FRAME_US
                game.update(args.volume)
        else:
            print(f"unknown command: {command}; {_HELP}", file=sys.stderr)
            continue
        _show(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())