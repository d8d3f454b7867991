"""WebSocket handler streaming the spin animation

Messages from the client are JSON objects with an ``action``:
    {"action": "spin"}
    {"action": "bet", "bet": "5"}              absolute
    {"action": "bet", "bet": "5", "delta": 1}  step
    {"action": "state"}

A spin answers with ``frame`` messages while the reels flicker and a final
``result`` message carrying the settled spin.
"""
import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import sentry_sdk
from tornado import websocket

from slot_machine.application.dto.bet_request import BetRequest
from slot_machine.application.use_cases.adjust_bet_use_case import AdjustBetUseCase, GameStateUseCase
from slot_machine.presentation.spin_controller import SpinController, SpinInProgressError

logger = logging.getLogger(__name__)


class SlotSocketHandler(websocket.WebSocketHandler):
    """One player session over a WebSocket"""

    def initialize(
        self,
        controller: SpinController,
        bet_use_case: AdjustBetUseCase,
        state_use_case: GameStateUseCase
    ):
        self.controller = controller
        self.bet_use_case = bet_use_case
        self.state_use_case = state_use_case
        self._spin_task: Optional[asyncio.Future] = None

    def open(self):
        logger.info("WebSocket session opened")
        self._send_state()

    def on_message(self, message):
        try:
            data = json.loads(message)
            if not isinstance(data, dict):
                raise ValueError("Message must be a JSON object")
        except ValueError as e:
            self._send({"type": "error", "error": f"invalid message: {e}"})
            return

        action = data.get("action")
        if action == "spin":
            if self.controller.spinning:
                self._send({"type": "error", "error": "A spin is already in progress"})
                return
            self._spin_task = asyncio.ensure_future(self._run_spin())
        elif action == "bet":
            result = self.bet_use_case.execute(BetRequest.from_dict(data))
            if result.error:
                self._send({"type": "error", "error": result.error})
            else:
                self._send_state()
        elif action == "state":
            self._send_state()
        else:
            self._send({"type": "error", "error": f"unknown action: {action}"})

    def on_close(self):
        logger.info("WebSocket session closed")
        if self._spin_task is not None and not self._spin_task.done():
            self.controller.cancel(owner=self)

    async def _run_spin(self):
        try:
            result = await self.controller.spin(on_frame=self._send_frame, owner=self)
        except SpinInProgressError as e:
            self._send({"type": "error", "error": str(e)})
            return
        except asyncio.CancelledError:
            logger.info("Spin cancelled before settling")
            return
        except Exception as e:
            sentry_sdk.capture_exception(e)
            self._send({"type": "error", "error": str(e)})
            return

        if result.error:
            self._send({"type": "error", "error": result.error})
            return
        payload = result.to_dict()
        payload["type"] = "result"
        self._send(payload)
        self._send_state()

    def _send_frame(self, frame: List[Dict[str, Any]]):
        self._send({"type": "frame", "reels": frame})

    def _send_state(self):
        state = self.state_use_case.execute().to_dict()
        state["type"] = "state"
        state["spinning"] = self.controller.spinning
        self._send(state)

    def _send(self, payload: Dict[str, Any]):
        try:
            self.write_message(payload)
        except websocket.WebSocketClosedError:
            logger.debug("Dropped message for closed WebSocket")
