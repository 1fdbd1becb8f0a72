from blinker import ANY, Signal
from ordered_set import OrderedSet
from typing import Dict


class OrderedSignal(Signal):
    """Signal that calls receivers in the order they were connected."""
    set_class = OrderedSet


class EventBus:
    """Simple event bus leveraging blinker Signal objects.

    Receivers subscribed with a sender only hear emits from that sender;
    the default ANY hears everything.
    """
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn, *, sender=ANY):
        sig = self._signals.setdefault(name, OrderedSignal(name))
        # weak=False keeps lambdas and bound methods alive without the caller holding them.
        sig.connect(fn, sender=sender, weak=False)

    def emit(self, name: str, *, sender=None, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self if sender is None else sender, **payload)


# ============================================================================
# BOARD RESOLUTION
# ============================================================================
EVENT_MATCH_FOUND = "match_found"            # payload: event=MatchEvent
EVENT_REFILL_COMPLETED = "refill_completed"  # payload: event=RefillEvent

BOARD_EVENTS = (EVENT_MATCH_FOUND, EVENT_REFILL_COMPLETED)
