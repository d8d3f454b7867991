"""Session statistics use case"""
import logging
import sentry_sdk
from sentry_sdk import start_span

from slot_machine.domain.services.slot_engine import SlotEngine
from slot_machine.application.dto.session_stats_response import SessionStatsResponse
from slot_machine.application.ports.spin_history_port import SpinHistoryPort
from slot_machine.infrastructure.metrics.business_metrics import BusinessMetrics

logger = logging.getLogger(__name__)


class SessionStatsUseCase:
    """Summarise the spins played since the process started"""

    def __init__(self, engine: SlotEngine, spin_history: SpinHistoryPort):
        self.engine = engine
        self.spin_history = spin_history

    def execute(self, recent_limit: int = 10) -> SessionStatsResponse:
        try:
            with start_span(op="stats.session", name="Aggregate session stats"):
                stats = self.spin_history.get_session_stats()
                recent = [r.to_dict() for r in self.spin_history.recent(recent_limit)]

            if not stats:
                return SessionStatsResponse(
                    status="no spins yet",
                    data={
                        "spin_count": 0,
                        "total_bets": 0,
                        "total_winnings": 0,
                        "win_count": 0,
                        "biggest_win": 0,
                        "hit_rate": 0.0,
                        "rtp": 0.0,
                        "credits": self.engine.credits,
                        "recent": []
                    }
                )

            hit_rate = round(stats["win_count"] / stats["spin_count"] * 100, 2)
            data = dict(stats)
            data.update({
                "hit_rate": hit_rate,
                "rtp": BusinessMetrics.rtp(stats["total_bets"], stats["total_winnings"]),
                "credits": self.engine.credits,
                "recent": recent
            })
            return SessionStatsResponse(status="ok", data=data)

        except Exception as e:
            sentry_sdk.capture_exception(e)
            return SessionStatsResponse(status="error", error=str(e))
