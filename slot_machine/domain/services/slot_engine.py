"""Slot engine: credits, bet and payout rules"""
import logging
from threading import Lock
from typing import List, Sequence

from slot_machine.domain.entities.reel import Reel
from slot_machine.domain.entities.slot_symbols import Symbol
from slot_machine.domain.entities.spin_result import SpinResult

logger = logging.getLogger(__name__)

MAX_BET = 50
MIN_BET = 1
INITIAL_CREDITS = 100


def clamp_bet(value: int) -> int:
    return max(MIN_BET, min(value, MAX_BET))


def calculate_winnings(symbols: Sequence[Symbol], bet: int) -> int:
    """Payout for a drawn line.

    Three of a kind pays double the symbol value times the bet. A single pair pays
    the value of the first reel's symbol times the bet, whichever two symbols
    actually matched. Three distinct glyphs pay nothing.
    """
    unique_count = len({s.glyph for s in symbols})
    if unique_count == 1:
        return symbols[0].value * bet * 2
    if unique_count == 2:
        return symbols[0].value * bet
    return 0


class SlotEngine:
    """Owns the player's credits and bet and settles spins across the reels"""

    def __init__(self, reels: Sequence[Reel], initial_credits: int = INITIAL_CREDITS):
        self._reels: List[Reel] = list(reels)
        self._credits = initial_credits
        self._bet = MIN_BET
        self._lock = Lock()

    @property
    def reels(self) -> List[Reel]:
        return list(self._reels)

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def bet(self) -> int:
        return self._bet

    def get_credits(self) -> int:
        return self._credits

    def get_bet(self) -> int:
        return self._bet

    def set_bet(self, value: int) -> int:
        """Clamp value into [1, MAX_BET], store it and return the stored bet"""
        with self._lock:
            self._bet = clamp_bet(value)
            return self._bet

    def can_spin(self) -> bool:
        return self._credits >= self._bet and MIN_BET <= self._bet <= MAX_BET

    def spin(self) -> SpinResult:
        with self._lock:
            if not self.can_spin():
                logger.debug(f"Spin skipped: credits={self._credits} bet={self._bet}")
                return SpinResult(symbols=None, winnings=0, credits=self._credits)

            bet = self._bet
            self._credits -= bet
            symbols = tuple(reel.spin() for reel in self._reels)
            winnings = calculate_winnings(symbols, bet)
            self._credits += winnings

            return SpinResult(
                symbols=symbols,
                winnings=winnings,
                credits=self._credits,
                bet=bet
            )
