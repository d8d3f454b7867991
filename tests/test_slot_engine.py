"""
Slot engine tests
Tests for: bet clamping, affordability, spin settlement, determinism, locking
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from slot_machine.domain.services.slot_engine import (
    SlotEngine,
    calculate_winnings,
    clamp_bet,
    INITIAL_CREDITS,
    MAX_BET
)
from slot_machine.infrastructure.random.numpy_random_source import NumpyRandomSource
from slot_machine.infrastructure.random.python_random_source import PythonRandomSource

from tests.conftest import ScriptedRandomSource, build_engine, glyph_indices


class TestBet:
    """Bet is clamped, never rejected"""

    def test_defaults(self, engine):
        assert engine.get_credits() == INITIAL_CREDITS == 100
        assert engine.get_bet() == 1

    @pytest.mark.parametrize("value,expected", [
        (0, 1), (51, 50), (-5, 1), (1, 1), (50, 50), (25, 25), (10_000, 50)
    ])
    def test_set_bet_clamps(self, engine, value, expected):
        assert engine.set_bet(value) == expected
        assert engine.get_bet() == expected == max(1, min(value, MAX_BET))

    def test_clamp_bet(self):
        assert clamp_bet(-1) == 1
        assert clamp_bet(99) == 50


class TestCanSpin:
    """Affordability predicate"""

    def test_affordable(self, engine):
        engine.set_bet(50)
        assert engine.can_spin()

    def test_bet_above_credits(self, catalog, scripted):
        engine = build_engine(catalog, scripted, credits=9)
        engine.set_bet(10)
        assert not engine.can_spin()
        engine.set_bet(9)
        assert engine.can_spin()

    def test_no_credits(self, catalog, scripted):
        engine = build_engine(catalog, scripted, credits=0)
        assert not engine.can_spin()


class TestSpin:
    """Settlement of a spin"""

    def test_unaffordable_spin_is_noop(self, catalog, scripted):
        engine = build_engine(catalog, scripted, credits=0)
        result = engine.spin()
        assert result.symbols is None
        assert result.winnings == 0
        assert result.credits == 0
        assert engine.get_credits() == 0
        assert scripted.calls == 0, "reels must not be drawn for a skipped spin"

    def test_three_diamonds(self, engine, catalog, scripted):
        scripted.queue(*glyph_indices(catalog, "diamond", "diamond", "diamond"))
        engine.set_bet(10)
        result = engine.spin()
        assert [s.name for s in result.symbols] == ["diamond"] * 3
        assert result.winnings == 400
        assert result.credits == 490
        assert engine.get_credits() == 490

    def test_pair_first_two(self, engine, catalog, scripted):
        scripted.queue(*glyph_indices(catalog, "cherry", "cherry", "star"))
        result = engine.spin()
        assert result.winnings == 10
        assert result.credits == 109

    def test_pair_split_pays_first_symbol(self, engine, catalog, scripted):
        scripted.queue(*glyph_indices(catalog, "cherry", "star", "cherry"))
        result = engine.spin()
        assert result.winnings == 10
        assert result.credits == 109

    def test_pair_on_last_reels_pays_first_symbol(self, engine, catalog, scripted):
        scripted.queue(*glyph_indices(catalog, "star", "cherry", "cherry"))
        result = engine.spin()
        assert result.winnings == 1
        assert result.credits == 100

    def test_losing_spin(self, engine, catalog, scripted):
        scripted.queue(*glyph_indices(catalog, "cherry", "lemon", "orange"))
        engine.set_bet(5)
        result = engine.spin()
        assert result.winnings == 0
        assert result.credits == 95
        assert result.bet == 5

    def test_reel_order_preserved(self, engine, catalog, scripted):
        scripted.queue(*glyph_indices(catalog, "lemon", "orange", "star"))
        result = engine.spin()
        assert [s.name for s in result.symbols] == ["lemon", "orange", "star"]

    def test_can_spin_exactly_all_credits(self, catalog, scripted):
        engine = build_engine(catalog, scripted, credits=10)
        engine.set_bet(10)
        scripted.queue(*glyph_indices(catalog, "cherry", "lemon", "orange"))
        result = engine.spin()
        assert result.credits == 0
        assert not engine.can_spin()
        assert engine.spin().symbols is None

    def test_balance_law_over_random_spins(self, catalog):
        engine = build_engine(catalog, PythonRandomSource(seed=42), credits=1000)
        for i in range(300):
            engine.set_bet(1 + i % MAX_BET)
            before = engine.get_credits()
            bet = engine.get_bet()
            affordable = engine.can_spin()
            result = engine.spin()
            if affordable:
                assert result.winnings == calculate_winnings(result.symbols, bet)
                assert result.credits == before - bet + result.winnings
            else:
                assert result.symbols is None
                assert result.credits == before
            assert engine.get_credits() >= 0


class TestDeterminism:
    """Identical seeds replay identical games"""

    @pytest.mark.parametrize("source_cls", [PythonRandomSource, NumpyRandomSource])
    def test_same_seed_same_sequence(self, catalog, source_cls):
        def play(seed):
            engine = build_engine(catalog, source_cls(seed=seed), credits=10_000)
            return [
                (tuple(s.glyph for s in r.symbols), r.winnings, r.credits)
                for r in (engine.spin() for _ in range(50))
            ]

        assert play(7) == play(7)
        assert play(7) != play(8)


class TestConcurrency:
    """Concurrent callers never corrupt the balance"""

    def test_parallel_spins_keep_ledger(self, catalog):
        engine = build_engine(catalog, PythonRandomSource(seed=1), credits=100_000)
        engine.set_bet(3)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: engine.spin(), range(400)))

        executed = [r for r in results if r.executed]
        assert len(executed) == 400
        expected = 100_000 + sum(r.balance_change for r in executed)
        assert engine.get_credits() == expected


def test_engine_uses_given_reels(catalog):
    source = ScriptedRandomSource(glyph_indices(catalog, "lemon", "lemon", "lemon"))
    engine = SlotEngine(build_engine(catalog, source).reels, initial_credits=5)
    result = engine.spin()
    assert result.winnings == 10
    assert result.credits == 14
