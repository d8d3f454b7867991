from .spin_use_case import SpinUseCase
from .adjust_bet_use_case import AdjustBetUseCase, GameStateUseCase
from .session_stats_use_case import SessionStatsUseCase

__all__ = [
    'SpinUseCase',
    'AdjustBetUseCase',
    'GameStateUseCase',
    'SessionStatsUseCase'
]
