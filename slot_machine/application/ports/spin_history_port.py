"""Spin history port (interface)"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from slot_machine.domain.entities.spin_result import SpinResult


class SpinHistoryPort(ABC):
    """Port for keeping the spins of the running session"""

    @abstractmethod
    def save(self, result: SpinResult) -> SpinResult:
        """Record an executed spin"""
        pass

    @abstractmethod
    def recent(self, limit: int = 20) -> List[SpinResult]:
        """Most recent spins, newest first"""
        pass

    @abstractmethod
    def get_session_stats(self) -> Optional[Dict[str, Any]]:
        """Aggregate totals over the recorded spins, None when empty"""
        pass
