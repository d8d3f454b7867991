"""In-memory spin history implementation"""
import logging
from collections import deque
from threading import Lock
from typing import Any, Deque, Dict, List, Optional

from slot_machine.domain.entities.spin_result import SpinResult
from slot_machine.application.ports.spin_history_port import SpinHistoryPort

logger = logging.getLogger(__name__)


class InMemorySpinHistory(SpinHistoryPort):
    """Keeps the latest spins of this process; nothing survives a restart"""

    def __init__(self, max_size: int = 1000):
        self.max_size = max_size
        self._spins: Deque[SpinResult] = deque(maxlen=max_size)
        self.lock = Lock()

    def save(self, result: SpinResult) -> SpinResult:
        """Append an executed spin, dropping the oldest when full"""
        if not result.executed:
            return result
        with self.lock:
            self._spins.append(result)
        return result

    def recent(self, limit: int = 20) -> List[SpinResult]:
        with self.lock:
            spins = list(self._spins)
        return list(reversed(spins))[:limit]

    def get_session_stats(self) -> Optional[Dict[str, Any]]:
        """Totals for RTP calculation"""
        with self.lock:
            spins = list(self._spins)
        if not spins:
            return None

        return {
            "spin_count": len(spins),
            "total_bets": sum(s.bet for s in spins),
            "total_winnings": sum(s.winnings for s in spins),
            "win_count": sum(1 for s in spins if s.win),
            "biggest_win": max(s.winnings for s in spins)
        }

    def clear(self):
        with self.lock:
            self._spins.clear()
        logger.info("Spin history cleared")
