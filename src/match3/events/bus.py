from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# BOARD NOTIFICATIONS
# ============================================================================
EVENT_BOARD_MOVE = "board_move"        # reserved, never emitted
EVENT_BOARD_SWAP = "board_swap"        # reserved, never emitted
EVENT_BOARD_MATCH = "board_match"      # payload: event=BoardEvent, match=Match
EVENT_BOARD_REFILL = "board_refill"    # payload: event=BoardEvent
