"""
blockicon/rng.py
Seeded xorshift128 generator

The output stream must match the reference identicon generator bit for bit,
including its quirks:

- seeding folds UTF-16 code units into four words with a *31 hash
- right shifts are arithmetic on the signed 32-bit reading of each word
- generate() divides by 2**31, not 2**32, so values fall in [0, 2)

Do NOT "fix" the range to [0, 1). Colors and cell values are calibrated to it.
"""

from typing import Iterator, List, Optional

MASK32 = 0xFFFFFFFF
DIVISOR = float(1 << 31)


def _signed32(value: int) -> int:
    """Reinterpret the low 32 bits of value as a signed integer."""
    value &= MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _code_units(text: str) -> List[int]:
    """UTF-16 code units of text (surrogate pairs count as two units)."""
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


class SeededRNG:
    """
    Xorshift generator holding four 32-bit words [x, y, z, w].

    Each icon build owns one instance. There is no shared module-level
    generator.
    """

    def __init__(self, seed: Optional[str] = None):
        self._state = [0, 0, 0, 0]
        self.draws = 0
        if seed is not None:
            self.seed(seed)

    @property
    def state(self) -> List[int]:
        """Copy of the current [x, y, z, w] words as unsigned integers."""
        return list(self._state)

    def seed(self, text: str) -> None:
        """Reset and initialize state from text. Empty text leaves all zeros."""
        if not isinstance(text, str):
            raise TypeError(f"seed must be a string, got {type(text).__name__}")

        state = [0, 0, 0, 0]
        for i, unit in enumerate(_code_units(text)):
            state[i % 4] = (state[i % 4] * 31 + unit) & MASK32
        self._state = state
        self.draws = 0

    def next_word(self) -> int:
        """Advance the state and return the new w word as unsigned 32-bit."""
        x, y, z, w = self._state
        x = _signed32(x)
        t = _signed32(x ^ (x << 11))
        w = _signed32(w)
        w = (w ^ (w >> 19) ^ t ^ (t >> 8)) & MASK32
        self._state = [y, z, self._state[3], w]
        self.draws += 1
        return w

    def generate(self) -> float:
        """Next value in [0, 2)."""
        return self.next_word() / DIVISOR

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.generate()
