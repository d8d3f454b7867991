"""Spin result entity"""
from dataclasses import dataclass, field
from typing import Optional, Tuple
import time

from slot_machine.domain.entities.slot_symbols import Symbol


@dataclass(frozen=True)
class SpinResult:
    """Outcome of one spin; symbols is None when the spin did not execute"""

    symbols: Optional[Tuple[Symbol, ...]]
    winnings: int
    credits: int
    bet: int = 0
    timestamp: float = field(default_factory=time.time)

    @property
    def executed(self) -> bool:
        return self.symbols is not None

    @property
    def win(self) -> bool:
        return self.winnings > 0

    @property
    def balance_change(self) -> int:
        """Net credit change caused by this spin"""
        return -self.bet + self.winnings

    def to_dict(self) -> dict:
        """Convert to dictionary for transport"""
        return {
            "symbols": [s.to_dict() for s in self.symbols] if self.symbols is not None else None,
            "winnings": self.winnings,
            "credits": self.credits,
            "bet": self.bet,
            "win": self.win
        }
