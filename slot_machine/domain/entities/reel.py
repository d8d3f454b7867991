"""Reel entity"""
from typing import Sequence, Tuple

from slot_machine.domain.entities.slot_symbols import Symbol
from slot_machine.domain.ports.random_source_port import RandomSourcePort


class Reel:
    """A single reel drawing one symbol per spin, uniformly over its strip"""

    def __init__(self, symbols: Sequence[Symbol], random_source: RandomSourcePort):
        if not symbols:
            raise ValueError("A reel needs at least one symbol")
        self._symbols: Tuple[Symbol, ...] = tuple(symbols)
        self._random_source = random_source

    @property
    def symbols(self) -> Tuple[Symbol, ...]:
        return self._symbols

    def spin(self) -> Symbol:
        return self._symbols[self._random_source.next_index(len(self._symbols))]
