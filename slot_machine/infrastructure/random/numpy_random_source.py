"""NumPy random source"""
from typing import Optional

import numpy as np

from slot_machine.domain.ports.random_source_port import RandomSourcePort


class NumpyRandomSource(RandomSourcePort):
    """numpy Generator backed source (PCG64)"""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_index(self, upper: int) -> int:
        return int(self._rng.integers(0, upper))
