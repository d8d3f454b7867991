from .handlers import (
    HealthHandler,
    MetricsHandler,
    StateHandler,
    BetHandler,
    SpinHandler,
    SessionStatsHandler
)

__all__ = [
    'HealthHandler',
    'MetricsHandler',
    'StateHandler',
    'BetHandler',
    'SpinHandler',
    'SessionStatsHandler'
]
