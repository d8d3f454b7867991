"""Prometheus business metrics for the slot machine"""
import logging
from prometheus_client import Counter, Gauge, Histogram

logger = logging.getLogger(__name__)


class BusinessMetrics:
    """Process-wide game counters exposed on /metrics"""

    SPINS = Counter(
        'slot_spins_total',
        'Spin requests by outcome',
        ['outcome']
    )
    BET_VOLUME = Counter('slot_bet_credits_total', 'Credits staked')
    PAYOUT_VOLUME = Counter('slot_payout_credits_total', 'Credits paid out')
    CREDITS = Gauge('slot_player_credits', 'Current player credits')
    WINNINGS = Histogram(
        'slot_winnings_credits',
        'Winnings per executed spin',
        buckets=(0, 1, 5, 10, 50, 100, 500, 1000, 2000)
    )

    @classmethod
    def track_spin(cls, bet: int, winnings: int, credits: int, executed: bool = True):
        if not executed:
            cls.SPINS.labels(outcome='skipped').inc()
            cls.CREDITS.set(credits)
            return

        cls.SPINS.labels(outcome='win' if winnings > 0 else 'loss').inc()
        cls.BET_VOLUME.inc(bet)
        cls.PAYOUT_VOLUME.inc(winnings)
        cls.WINNINGS.observe(winnings)
        cls.CREDITS.set(credits)

    @staticmethod
    def rtp(total_bets: float, total_winnings: float) -> float:
        """Return-to-player percentage"""
        if total_bets <= 0:
            return 0.0
        return round(total_winnings / total_bets * 100, 2)
