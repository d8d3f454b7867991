"""Standard library random source"""
import random
from typing import Optional

from slot_machine.domain.ports.random_source_port import RandomSourcePort


class PythonRandomSource(RandomSourcePort):
    """random.Random backed source; identical seeds give identical draws"""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_index(self, upper: int) -> int:
        return self._random.randrange(upper)
