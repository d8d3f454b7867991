"""Bet adjustment and game state use cases"""
import logging
import sentry_sdk

from slot_machine.domain.services.slot_engine import SlotEngine, MAX_BET, MIN_BET
from slot_machine.application.dto.bet_request import BetRequest
from slot_machine.application.dto.game_state_response import GameStateResponse

logger = logging.getLogger(__name__)


def _state(engine: SlotEngine) -> GameStateResponse:
    return GameStateResponse(
        credits=engine.credits,
        bet=engine.bet,
        max_bet=MAX_BET,
        can_spin=engine.can_spin()
    )


class GameStateUseCase:
    """Read-only view of credits and bet"""

    def __init__(self, engine: SlotEngine):
        self.engine = engine

    def execute(self) -> GameStateResponse:
        return _state(self.engine)


class AdjustBetUseCase:
    """Translate +/- and typed bet input into engine bet changes"""

    def __init__(self, engine: SlotEngine):
        self.engine = engine

    def execute(self, request: BetRequest) -> GameStateResponse:
        try:
            if request.delta is None:
                new_bet = request.bet
            else:
                # Stepping never proposes more than the player can cover
                ceiling = min(self.engine.credits, MAX_BET)
                new_bet = max(MIN_BET, min(request.bet + request.delta, ceiling))

            stored = self.engine.set_bet(new_bet)
            logger.debug(f"Bet set to {stored} (requested {new_bet})")
            return _state(self.engine)

        except Exception as e:
            sentry_sdk.capture_exception(e)
            state = _state(self.engine)
            state.error = str(e)
            return state
