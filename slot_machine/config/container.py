"""Dependency Injection Container"""
import os
import logging
from typing import Mapping, Optional

from slot_machine.domain.entities.reel import Reel
from slot_machine.domain.entities.slot_symbols import SlotSymbols
from slot_machine.domain.ports.random_source_port import RandomSourcePort
from slot_machine.domain.services.slot_engine import SlotEngine
from slot_machine.infrastructure.random.python_random_source import PythonRandomSource
from slot_machine.infrastructure.random.numpy_random_source import NumpyRandomSource
from slot_machine.infrastructure.persistence.in_memory_spin_history import InMemorySpinHistory
from slot_machine.infrastructure.messaging.rabbitmq_message_publisher import RabbitMQMessagePublisher
from slot_machine.application.use_cases.spin_use_case import SpinUseCase
from slot_machine.application.use_cases.adjust_bet_use_case import AdjustBetUseCase, GameStateUseCase
from slot_machine.application.use_cases.session_stats_use_case import SessionStatsUseCase
from slot_machine.presentation.spin_controller import SpinController

logger = logging.getLogger(__name__)

REEL_COUNT = 3


def _flag(value: str) -> bool:
    return value.lower() == 'true'


class Container:
    """Simple DI Container for the slot machine"""

    _instance = None

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self._initialize()

    def _initialize(self):
        """Initialize all dependencies"""
        env = self.environ

        # Randomness
        seed = env.get('RNG_SEED')
        self.rng_seed = int(seed) if seed not in (None, '') else None
        self.rng_backend = env.get('RNG_BACKEND', 'python').lower()
        self.random_source = self._make_random_source()

        # Domain
        self.symbols = SlotSymbols()
        self.reels = [Reel(self.symbols.as_list(), self.random_source) for _ in range(REEL_COUNT)]
        self.engine = SlotEngine(self.reels)

        # Repositories
        self.spin_history = InMemorySpinHistory(int(env.get('SPIN_HISTORY_SIZE', '1000')))

        # Message publisher (optional)
        use_publisher = _flag(env.get('PUBLISH_SPIN_RESULTS', 'false'))
        self.message_publisher = (
            RabbitMQMessagePublisher(env.get('RABBITMQ_URL')) if use_publisher else None
        )

        # Use cases
        self.spin_use_case = SpinUseCase(
            engine=self.engine,
            spin_history=self.spin_history,
            message_publisher=self.message_publisher
        )
        self.bet_use_case = AdjustBetUseCase(self.engine)
        self.state_use_case = GameStateUseCase(self.engine)
        self.stats_use_case = SessionStatsUseCase(self.engine, self.spin_history)

        # Presentation
        self.spin_controller = SpinController(
            spin_use_case=self.spin_use_case,
            symbols=self.symbols.as_list(),
            reel_count=REEL_COUNT,
            frames=int(env.get('ANIMATION_FRAMES', '10')),
            step_ms=int(env.get('ANIMATION_STEP_MS', '100'))
        )

        logger.info(
            f"Slot machine ready: rng={self.rng_backend} seed={self.rng_seed} "
            f"publisher={'on' if use_publisher else 'off'}"
        )

    def _make_random_source(self) -> RandomSourcePort:
        if self.rng_backend == 'numpy':
            return NumpyRandomSource(self.rng_seed)
        if self.rng_backend != 'python':
            logger.warning(f"Unknown RNG_BACKEND '{self.rng_backend}', using python")
            self.rng_backend = 'python'
        return PythonRandomSource(self.rng_seed)

    def close(self):
        """Release external resources on shutdown"""
        if self.message_publisher:
            self.message_publisher.close()

    @classmethod
    def get_instance(cls) -> 'Container':
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_spin_controller(self) -> SpinController:
        return self.spin_controller

    def get_bet_use_case(self) -> AdjustBetUseCase:
        return self.bet_use_case

    def get_state_use_case(self) -> GameStateUseCase:
        return self.state_use_case

    def get_stats_use_case(self) -> SessionStatsUseCase:
        return self.stats_use_case
