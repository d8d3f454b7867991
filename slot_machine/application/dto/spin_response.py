"""Spin response DTO"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from slot_machine.domain.entities.spin_result import SpinResult


@dataclass
class SpinResponse:
    """Response DTO for a spin"""

    executed: bool
    win: bool
    winnings: int
    credits: int
    bet: int
    symbols: Optional[List[Dict[str, Any]]] = None
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: SpinResult) -> 'SpinResponse':
        data = result.to_dict()
        return cls(
            executed=result.executed,
            win=result.win,
            winnings=result.winnings,
            credits=result.credits,
            bet=result.bet,
            symbols=data['symbols']
        )

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        result = {
            "executed": self.executed,
            "win": self.win,
            "winnings": self.winnings,
            "credits": self.credits,
            "bet": self.bet,
            "symbols": self.symbols
        }
        if self.error:
            result["error"] = self.error
        return result
