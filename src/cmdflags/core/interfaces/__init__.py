from .slot import SlotProtocol

__all__ = [
    'SlotProtocol',
]
