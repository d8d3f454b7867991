"""Spin use case"""
import logging
from typing import Dict, Optional
import sentry_sdk
from sentry_sdk import start_span

from slot_machine.domain.entities.spin_result import SpinResult
from slot_machine.domain.services.slot_engine import SlotEngine
from slot_machine.application.dto.spin_response import SpinResponse
from slot_machine.application.ports.spin_history_port import SpinHistoryPort
from slot_machine.application.ports.message_publisher_port import MessagePublisherPort
from slot_machine.infrastructure.metrics.business_metrics import BusinessMetrics

logger = logging.getLogger(__name__)


class SpinUseCase:
    """Use case for settling one spin of the machine"""

    def __init__(
        self,
        engine: SlotEngine,
        spin_history: SpinHistoryPort,
        message_publisher: Optional[MessagePublisherPort] = None
    ):
        self.engine = engine
        self.spin_history = spin_history
        self.message_publisher = message_publisher

    def execute(self, trace_headers: Optional[Dict[str, str]] = None) -> SpinResponse:
        """Execute a spin.

        Once the engine returns, the player has been settled and the response always
        reflects that result; bookkeeping failures are logged and captured only.
        """
        try:
            with start_span(op="game.spin", name="Spin reels") as span:
                result = self.engine.spin()
                span.set_data("executed", result.executed)
                span.set_data("bet", result.bet)
                span.set_data("winnings", result.winnings)
        except Exception as e:
            logger.exception("Spin failed")
            sentry_sdk.capture_exception(e)
            return SpinResponse(
                executed=False,
                win=False,
                winnings=0,
                credits=self.engine.credits,
                bet=0,
                error=str(e)
            )

        self._record(result)

        if not result.executed:
            logger.info(f"Spin not affordable: credits={result.credits} bet={self.engine.bet}")
            return SpinResponse.from_result(result)

        if self.message_publisher:
            self._publish(result, trace_headers or {})

        sentry_sdk.set_tag("game.win", str(result.win))
        return SpinResponse.from_result(result)

    def _record(self, result: SpinResult):
        """Metrics and session history for a settled spin"""
        try:
            BusinessMetrics.track_spin(
                result.bet, result.winnings, result.credits, executed=result.executed
            )
            if result.executed:
                with start_span(op="history.save", name="Record spin"):
                    self.spin_history.save(result)
        except Exception as e:
            logger.error(f"Failed to record settled spin: {e}")
            sentry_sdk.capture_exception(e)

    def _publish(self, result: SpinResult, trace_headers: Dict[str, str]):
        with start_span(op="mq.publish", name="Publish spin result") as mq_span:
            try:
                self.message_publisher.publish_spin(result, trace_headers)
                mq_span.set_tag("mq.published", "true")
            except Exception as mq_error:
                logger.error(f"Failed to publish to RabbitMQ: {mq_error}")
                mq_span.set_tag("mq.published", "false")
                mq_span.set_tag("mq.error", str(mq_error))
