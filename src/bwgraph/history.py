"""Fixed-width rolling history of per-interval transfer rates."""

from __future__ import annotations

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)

# Narrowest history that still has a defined average.
MIN_WIDTH = 2


class RateHistory:
    """Rate samples for one direction of one interface, oldest first.

    The history always holds exactly ``width`` samples. The last index is
    the newest sample, which lines up with the right-most graph column.
    """

    def __init__(self, width: int) -> None:
        _check_width(width)
        self._samples: list[int] = [0] * width

    @property
    def width(self) -> int:
        return len(self._samples)

    @property
    def samples(self) -> tuple[int, ...]:
        return tuple(self._samples)

    @property
    def current(self) -> int:
        """Most recently pushed sample."""
        return self._samples[-1]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[int]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return f"RateHistory(width={self.width}, current={self.current})"

    def push(self, sample: int) -> None:
        """Drop the oldest sample and append ``sample`` as the newest."""
        del self._samples[0]
        self._samples.append(int(sample))

    def resize(self, new_width: int) -> None:
        """Change the width, keeping the newest samples right-aligned.

        Growing pads zeros on the left; shrinking drops the oldest samples.
        """
        _check_width(new_width)
        old_width = len(self._samples)
        if new_width == old_width:
            return
        if new_width > old_width:
            self._samples = [0] * (new_width - old_width) + self._samples
        else:
            self._samples = self._samples[old_width - new_width :]
        logger.debug("History resized %d -> %d", old_width, new_width)

    def average(self) -> int:
        """Sum of all samples divided by ``width - 1``.

        The divisor leaves out one interval, so a full window of identical
        values averages slightly above that value. Changing the divisor
        changes the displayed average, so it stays.
        """
        return sum(self._samples) // (len(self._samples) - 1)

    def max(self) -> int:
        """Largest sample, never below 0."""
        return max(0, *self._samples)


def _check_width(width: int) -> None:
    if width < MIN_WIDTH:
        raise ValueError(f"history width must be at least {MIN_WIDTH}, got {width}")
