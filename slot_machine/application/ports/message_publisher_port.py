"""Message publisher port (interface)"""
from abc import ABC, abstractmethod
from typing import Dict

from slot_machine.domain.entities.spin_result import SpinResult


class MessagePublisherPort(ABC):
    """Port for publishing settled spins"""

    @abstractmethod
    def publish_spin(self, result: SpinResult, trace_headers: Dict[str, str]) -> None:
        """Publish an executed spin for analytics"""
        pass

    def close(self) -> None:
        """Release broker resources on shutdown"""
        pass
