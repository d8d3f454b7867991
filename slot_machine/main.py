"""
Slot Machine - Tornado entry point

REST and WebSocket front ends over the same single-player engine:
- REST:      GET /state, POST /bet, POST /spin, GET /stats
- WebSocket: /ws (streams the reel animation)
"""
import os
import logging
from typing import Optional

import sentry_sdk
from tornado import web, ioloop
from sentry_sdk.integrations.tornado import TornadoIntegration

from slot_machine import __version__
from slot_machine.config.container import Container
from slot_machine.presentation.http.handlers import (
    HealthHandler,
    MetricsHandler,
    StateHandler,
    BetHandler,
    SpinHandler,
    SessionStatsHandler
)
from slot_machine.presentation.websocket.handlers import SlotSocketHandler

logger = logging.getLogger(__name__)


def init_sentry():
    """Initialize Sentry from the environment; a missing DSN disables sending"""
    version = os.environ.get('APP_VERSION', __version__)
    sentry_sdk.init(
        dsn=os.environ.get('SENTRY_DSN'),
        integrations=[TornadoIntegration()],
        traces_sample_rate=float(os.environ.get('SENTRY_TRACES_SAMPLE_RATE', '1.0')),
        environment=os.environ.get('SENTRY_ENVIRONMENT', 'development'),
        debug=os.environ.get('SENTRY_DEBUG', 'false').lower() == 'true',
        release=f"slot-machine@{version}"
    )


def make_app(container: Optional[Container] = None):
    """Create Tornado application"""
    container = container or Container.get_instance()
    controller = container.get_spin_controller()

    routes = [
        (r"/health", HealthHandler),
        (r"/metrics", MetricsHandler),
        (r"/state", StateHandler, {
            "state_use_case": container.get_state_use_case(),
            "controller": controller
        }),
        (r"/bet", BetHandler, {
            "bet_use_case": container.get_bet_use_case(),
            "controller": controller
        }),
        (r"/spin", SpinHandler, {"controller": controller}),
        (r"/stats", SessionStatsHandler, {
            "stats_use_case": container.get_stats_use_case()
        }),
        (r"/ws", SlotSocketHandler, {
            "controller": controller,
            "bet_use_case": container.get_bet_use_case(),
            "state_use_case": container.get_state_use_case()
        }),
    ]

    return web.Application(routes)


def main():
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO').upper())
    init_sentry()

    app = make_app()
    port = int(os.environ.get('PORT', 8082))
    app.listen(port)

    logger.info(f"Slot machine started on :{port}")
    logger.info("Routes: GET /state, POST /bet, POST /spin, GET /stats, WS /ws")

    try:
        ioloop.IOLoop.current().start()
    finally:
        Container.get_instance().close()


if __name__ == "__main__":
    main()
