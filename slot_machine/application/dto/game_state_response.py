"""Game state response DTO"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class GameStateResponse:
    """Credits and bet as shown to the player"""

    credits: int
    bet: int
    max_bet: int
    can_spin: bool
    error: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "credits": self.credits,
            "bet": self.bet,
            "max_bet": self.max_bet,
            "can_spin": self.can_spin
        }
        if self.error:
            result["error"] = self.error
        return result
