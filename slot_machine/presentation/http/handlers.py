"""HTTP REST handlers for the slot machine"""
import json
import logging
import sentry_sdk
from tornado import web
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from slot_machine.application.dto.bet_request import BetRequest
from slot_machine.application.use_cases.adjust_bet_use_case import AdjustBetUseCase, GameStateUseCase
from slot_machine.application.use_cases.session_stats_use_case import SessionStatsUseCase
from slot_machine.presentation.spin_controller import SpinController, SpinInProgressError

logger = logging.getLogger(__name__)


class JsonHandler(web.RequestHandler):
    """Shared JSON body parsing"""

    def json_body(self) -> dict:
        """Parse the request body; an empty body is an empty object"""
        if not self.request.body:
            return {}
        data = json.loads(self.request.body)
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        return data

    def write_json_error(self, status: int, message: str):
        self.set_status(status)
        self.write({"error": message})


class HealthHandler(web.RequestHandler):
    """Health check endpoint"""

    def get(self):
        self.write({"status": "ok"})


class MetricsHandler(web.RequestHandler):
    """Prometheus metrics endpoint"""

    def get(self):
        self.set_header('Content-Type', CONTENT_TYPE_LATEST)
        self.write(generate_latest())


class StateHandler(web.RequestHandler):
    """GET /state - credits, bet and lockout for display"""

    def initialize(self, state_use_case: GameStateUseCase, controller: SpinController):
        self.state_use_case = state_use_case
        self.controller = controller

    def get(self):
        result = self.state_use_case.execute().to_dict()
        result["spinning"] = self.controller.spinning
        self.write(result)


class BetHandler(JsonHandler):
    """POST /bet - absolute bet or +/- step"""

    def initialize(self, bet_use_case: AdjustBetUseCase, controller: SpinController):
        self.bet_use_case = bet_use_case
        self.controller = controller

    def post(self):
        try:
            request = BetRequest.from_dict(self.json_body())
        except ValueError as e:
            self.write_json_error(400, str(e))
            return

        result = self.bet_use_case.execute(request)
        if result.error:
            self.write_json_error(500, result.error)
            return

        data = result.to_dict()
        data["spinning"] = self.controller.spinning
        self.write(data)


class SpinHandler(web.RequestHandler):
    """POST /spin - animate and settle one spin"""

    def initialize(self, controller: SpinController):
        self.controller = controller

    async def post(self):
        # Continue trace from upstream
        sentry_trace = self.request.headers.get("sentry-trace")
        baggage = self.request.headers.get("baggage")

        transaction = sentry_sdk.continue_trace({
            "sentry-trace": sentry_trace,
            "baggage": baggage
        }, op="game.spin", name="spin")

        with sentry_sdk.start_transaction(transaction):
            try:
                current_span = sentry_sdk.get_current_span()
                trace_headers = {
                    'sentry-trace': current_span.to_traceparent() if current_span else '',
                    'baggage': sentry_sdk.get_baggage() or ''
                }

                result = await self.controller.spin(trace_headers=trace_headers)

                if result.error:
                    self.set_status(500)
                    self.write({"error": result.error})
                else:
                    self.set_status(200)
                    self.write(result.to_dict())

            except SpinInProgressError as e:
                self.set_status(409)
                self.write({"error": str(e)})
            except Exception as e:
                sentry_sdk.capture_exception(e)
                self.set_status(500)
                self.write({"error": str(e)})


class SessionStatsHandler(web.RequestHandler):
    """GET /stats - session RTP and hit rate"""

    def initialize(self, stats_use_case: SessionStatsUseCase):
        self.stats_use_case = stats_use_case

    def get(self):
        limit = self.get_query_argument("recent", "10")
        try:
            recent_limit = max(0, int(limit))
        except ValueError:
            recent_limit = 10

        result = self.stats_use_case.execute(recent_limit=recent_limit)
        if result.error:
            self.set_status(500)
            self.write({"error": result.error})
        else:
            self.write(result.to_dict())
