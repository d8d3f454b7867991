"""Slot machine symbols configuration"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Symbol:
    """A game token; combinations are matched by glyph"""

    glyph: str
    name: str
    value: int
    color: str

    def to_dict(self) -> dict:
        return {
            "glyph": self.glyph,
            "name": self.name,
            "value": self.value,
            "color": self.color
        }


class SlotSymbols:
    """Fixed symbol catalog shared by every reel"""

    CHERRY = Symbol('🍒', 'cherry', 10, 'red')
    LEMON = Symbol('🍋', 'lemon', 5, 'yellow')
    ORANGE = Symbol('🍊', 'orange', 3, 'orange')
    STAR = Symbol('⭐', 'star', 1, 'cyan')
    DIAMOND = Symbol('💎', 'diamond', 20, 'magenta')

    def __init__(self):
        self.SYMBOLS: Tuple[Symbol, ...] = (
            self.CHERRY,
            self.LEMON,
            self.ORANGE,
            self.STAR,
            self.DIAMOND
        )
        self._by_glyph: Dict[str, Symbol] = {s.glyph: s for s in self.SYMBOLS}
        self._by_name: Dict[str, Symbol] = {s.name: s for s in self.SYMBOLS}

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.SYMBOLS)

    def __len__(self) -> int:
        return len(self.SYMBOLS)

    def as_list(self) -> List[Symbol]:
        """Catalog in reel order, as a fresh list"""
        return list(self.SYMBOLS)

    def by_glyph(self, glyph: str) -> Optional[Symbol]:
        return self._by_glyph.get(glyph)

    def by_name(self, name: str) -> Optional[Symbol]:
        return self._by_name.get(name)

    def get_value(self, glyph: str) -> int:
        """Get payout value for a glyph, 0 when unknown"""
        symbol = self._by_glyph.get(glyph)
        return symbol.value if symbol else 0
