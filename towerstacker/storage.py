"""High-score persistence in a file laid out like the serial EEPROM."""

from __future__ import annotations

import os
from pathlib import Path

HIGH_SCORE_ADDR = 0x0000
SCORE_SIZE = 4
ERASED_BYTE = 0xFF


def encode_score(score: int) -> bytes:
    """Encode a score as four big-endian bytes of a 32-bit word."""
    return (score & 0xFFFFFFFF).to_bytes(SCORE_SIZE, "big")


def decode_score(data: bytes) -> int:
    """Decode four big-endian bytes into a signed 32-bit score."""
    if len(data) != SCORE_SIZE:
        raise ValueError(f"score needs {SCORE_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, "big", signed=True)


class ScoreStore:
    """A file standing in for the EEPROM; unwritten bytes read as erased (0xFF)."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _image(self) -> bytearray:
        try:
            image = bytearray(self.path.read_bytes())
        except FileNotFoundError:
            image = bytearray()
        needed = HIGH_SCORE_ADDR + SCORE_SIZE
        if len(image) < needed:
            image.extend([ERASED_BYTE] * (needed - len(image)))
        return image

    def read(self) -> int:
        """Read the stored high score."""
        image = self._image()
        return decode_score(bytes(image[HIGH_SCORE_ADDR:HIGH_SCORE_ADDR + SCORE_SIZE]))

    def write(self, score: int) -> None:
        """Store a high score, keeping any other bytes of the image."""
        image = self._image()
        image[HIGH_SCORE_ADDR:HIGH_SCORE_ADDR + SCORE_SIZE] = encode_score(score)
        self.path.write_bytes(bytes(image))