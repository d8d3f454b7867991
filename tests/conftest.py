"""Shared fixtures for slot machine tests"""
from typing import Iterable, List

import pytest

from slot_machine.domain.entities.reel import Reel
from slot_machine.domain.entities.slot_symbols import SlotSymbols
from slot_machine.domain.ports.random_source_port import RandomSourcePort
from slot_machine.domain.services.slot_engine import SlotEngine


class ScriptedRandomSource(RandomSourcePort):
    """Returns pre-set indices in order, then fails loudly"""

    def __init__(self, indices: Iterable[int] = ()):
        self.indices: List[int] = list(indices)
        self.calls = 0

    def queue(self, *indices: int):
        self.indices.extend(indices)

    def next_index(self, upper: int) -> int:
        if not self.indices:
            raise AssertionError("random source exhausted")
        self.calls += 1
        index = self.indices.pop(0)
        assert 0 <= index < upper
        return index


def glyph_indices(catalog: SlotSymbols, *names: str) -> List[int]:
    """Catalog positions for symbol names, for scripting reel draws"""
    symbols = catalog.as_list()
    return [symbols.index(catalog.by_name(name)) for name in names]


def build_engine(catalog: SlotSymbols, source: RandomSourcePort, credits: int = 100) -> SlotEngine:
    reels = [Reel(catalog.as_list(), source) for _ in range(3)]
    return SlotEngine(reels, initial_credits=credits)


@pytest.fixture
def catalog():
    return SlotSymbols()


@pytest.fixture
def scripted():
    return ScriptedRandomSource()


@pytest.fixture
def engine(catalog, scripted):
    return build_engine(catalog, scripted)
