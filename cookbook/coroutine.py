"""A long job that can be run a given number of ticks at a time and then resumed."""

from __future__ import annotations

from typing import Generator

_Work = Generator[None, int, None]


class CoroutineTask:
    """Endless copy-and-process work, advanced by :meth:`run` in slices of ticks.

    Each tick appends ``"o"`` to :attr:`result`.
    """

    def __init__(self) -> None:
        self.result = ""
        self._copies = 0
        self._worker = self._work()
        next(self._worker)

    def run(self, ticks: int) -> str:
        """Do ``ticks`` ticks of work (at least one), then return :attr:`result`."""
        if ticks < 0:
            raise ValueError("ticks must not be negative")
        self._worker.send(ticks)
        return self.result

    def _copy_to_buffer(self) -> bool:
        self._copies += 1
        return self._copies % 2 == 1

    def _tick(self, ticks: int) -> Generator[None, int, int]:
        self.result += "o"
        if ticks:
            ticks -= 1
        if not ticks:
            ticks = yield
        return ticks

    def _work(self) -> _Work:
        ticks = yield
        while True:
            requires_one_more_copy = self._copy_to_buffer()
            ticks = yield from self._tick(ticks)
            if requires_one_more_copy:
                self._copy_to_buffer()
                ticks = yield from self._tick(ticks)
                ticks = yield from self._tick(ticks)
            ticks = yield from self._tick(ticks)