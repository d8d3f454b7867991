"""Bet change request DTO"""
from dataclasses import dataclass
from typing import Any, Optional


def parse_bet(raw: Any) -> int:
    """Parse bet input from the client; anything unparseable counts as 0"""
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else 0
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return 0


@dataclass
class BetRequest:
    """Request DTO for bet changes.

    Without a delta, ``bet`` is the absolute value to stake. With a delta, ``bet`` is
    the value the client currently displays and the delta is applied on top of it.
    """

    bet: int = 0
    delta: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'BetRequest':
        """Create from dictionary"""
        delta = data.get('delta')
        return cls(
            bet=parse_bet(data.get('bet')),
            delta=parse_bet(delta) if delta is not None else None
        )
