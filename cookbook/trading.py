"""A trading simulation that always ends in bankruptcy, reporting how it got there."""

from __future__ import annotations

import argparse
import sys
import traceback


class Bankruptcy(Exception):
    """Raised when the trader runs out of money; carries the call stack at that point."""

    def __init__(self, money: int, stack: traceback.StackSummary) -> None:
        super().__init__(f"bankrupt with {money} left")
        self.money = money
        self.stack = stack

    @property
    def frames(self) -> list[str]:
        """Function names on the stack, outermost first."""
        return [frame.name for frame in self.stack]

    @property
    def report(self) -> str:
        return "".join(self.stack.format())


class Trader:
    """Bets, wins, parties and loses until bankrupt."""

    def __init__(self) -> None:
        self._first_casino_visit = True
        self._bets_until_win = 3

    def start_trading(self, money: int) -> None:
        """Start betting with ``money``; raises :class:`Bankruptcy` when it runs out."""
        self._make_a_bet(money)

    def _report_bankruptcy(self, money: int) -> None:
        raise Bankruptcy(money, traceback.extract_stack())

    def _loose(self, money: int) -> None:
        if money < 10:
            self._report_bankruptcy(money)
        self._make_a_bet(money)

    def _go_to_casino(self, money: int) -> int:
        if self._first_casino_visit:
            self._first_casino_visit = False
            self._win(money * 2)
        money = int(money * 0.00000003)
        self._loose(money)
        return self._party(money)

    def _go_to_bar(self, money: int) -> int:
        money -= 11
        money -= 11 * 20
        return self._party(money)

    def _party(self, money: int) -> int:
        if money > 0:
            return self._go_to_casino(money) if money & 1 else self._go_to_bar(money)
        self._report_bankruptcy(money)
        return 0

    def _win(self, money: int) -> None:
        money = self._party(money)
        self._make_a_bet(money)

    def _make_a_bet(self, money: int) -> None:
        self._bets_until_win -= 1
        if not self._bets_until_win:
            self._bets_until_win = 3
            self._win(money * 100500)
        else:
            self._loose(int(money * 0.9))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the trading simulation.")
    parser.add_argument("--money", type=int, default=1000)
    args = parser.parse_args(argv)
    try:
        Trader().start_trading(args.money)
    except Bankruptcy as exc:
        sys.stdout.write("Sorry, you're bankrupt!\n")
        sys.stdout.write("Here's how it happened:\n" + exc.report)
    return 0


if __name__ == "__main__":
    sys.exit(main())