from .spin_history_port import SpinHistoryPort
from .message_publisher_port import MessagePublisherPort

__all__ = [
    'SpinHistoryPort',
    'MessagePublisherPort'
]
