from .bet_request import BetRequest, parse_bet
from .spin_response import SpinResponse
from .game_state_response import GameStateResponse
from .session_stats_response import SessionStatsResponse

__all__ = [
    'BetRequest',
    'parse_bet',
    'SpinResponse',
    'GameStateResponse',
    'SessionStatsResponse'
]
