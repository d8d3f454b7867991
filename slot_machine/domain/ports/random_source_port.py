"""Random source port (interface)"""
from abc import ABC, abstractmethod


class RandomSourcePort(ABC):
    """Port for the entropy consumed by reels"""

    @abstractmethod
    def next_index(self, upper: int) -> int:
        """Return an integer drawn uniformly from [0, upper)"""
        pass
