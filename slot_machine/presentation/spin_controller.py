"""Spin controller: trigger lockout and the cosmetic reel animation

The engine settles a spin instantly. Everything that makes a spin take time on
screen lives here: the flicker frames, the delay between them and the lockout that
refuses a second spin while one is still animating.
"""
import asyncio
import inspect
import logging
import random
from typing import Any, Callable, Dict, List, Optional, Sequence

from slot_machine.domain.entities.slot_symbols import Symbol
from slot_machine.application.dto.spin_response import SpinResponse
from slot_machine.application.use_cases.spin_use_case import SpinUseCase

logger = logging.getLogger(__name__)

FrameCallback = Callable[[List[Dict[str, Any]]], Any]


class SpinInProgressError(Exception):
    """Raised when a spin is requested while another one is animating"""


class SpinController:
    """Serialises spin requests and plays the flicker animation before settling"""

    def __init__(
        self,
        spin_use_case: SpinUseCase,
        symbols: Sequence[Symbol],
        reel_count: int = 3,
        frames: int = 10,
        step_ms: int = 100,
        cosmetic_random: Optional[random.Random] = None
    ):
        self.spin_use_case = spin_use_case
        self.symbols = list(symbols)
        self.reel_count = reel_count
        self.frames = frames
        self.step_ms = step_ms
        # Separate from the reels' source so seeded games stay reproducible
        self._random = cosmetic_random or random.Random()
        self._spinning = False
        self._animation: Optional[asyncio.Future] = None
        self._owner: Optional[object] = None

    @property
    def spinning(self) -> bool:
        return self._spinning

    async def spin(
        self,
        on_frame: Optional[FrameCallback] = None,
        trace_headers: Optional[Dict[str, str]] = None,
        owner: Optional[object] = None
    ) -> SpinResponse:
        """Animate, then settle the spin.

        Raises SpinInProgressError when locked, and asyncio.CancelledError when the
        animation is cancelled, in which case the engine is never asked to spin.
        ``owner`` identifies the session holding the lock for cancel().
        """
        if self._spinning:
            raise SpinInProgressError("A spin is already in progress")

        self._spinning = True
        self._owner = owner
        try:
            self._animation = asyncio.ensure_future(self._animate(on_frame))
            await self._animation
            return self.spin_use_case.execute(trace_headers)
        finally:
            self._animation = None
            self._owner = None
            self._spinning = False

    def cancel(self, owner: Optional[object] = None) -> bool:
        """Cancel a running animation.

        With an owner, only that session's own spin is cancelled. Returns False when
        nothing matching was running.
        """
        if self._animation is None or self._animation.done():
            return False
        if owner is not None and owner is not self._owner:
            return False
        logger.info("Spin animation cancelled")
        self._animation.cancel()
        return True

    def random_frame(self) -> List[Dict[str, Any]]:
        """One flicker frame: a random glyph and a random colour per reel"""
        return [
            {
                "glyph": self._random.choice(self.symbols).glyph,
                "color": "#{:02x}{:02x}{:02x}".format(
                    self._random.randrange(256),
                    self._random.randrange(256),
                    self._random.randrange(256)
                )
            }
            for _ in range(self.reel_count)
        ]

    async def _animate(self, on_frame: Optional[FrameCallback]):
        for i in range(self.frames):
            await asyncio.sleep(i * self.step_ms / 1000.0)
            frame = self.random_frame()
            if on_frame is not None:
                outcome = on_frame(frame)
                if inspect.isawaitable(outcome):
                    await outcome
