"""
input_bridge.py
---------------
Routes pygame input events to registered listeners.

Listeners are keyed by pygame event type (KEYUP, KEYDOWN, ...). Each callback
can be bound at most once per event type and is removed by identity, so a
scene that binds on enter and unbinds in its own handler never accumulates
duplicates across repeated activations.
"""

from typing import Callable, Dict, List

from src.core.debug.debug_logger import DebugLogger


class InputBridge:
    """Listener registry and dispatcher for host input events."""

    def __init__(self):
        self._listeners: Dict[int, List[Callable]] = {}
        DebugLogger.init_entry("InputBridge")

    # ===========================================================
    # Binding
    # ===========================================================

    def add_listener(self, event_type: int, callback: Callable) -> None:
        """
        Bind a callback to an event type.

        Args:
            event_type: pygame event constant (e.g. pygame.KEYUP)
            callback: Function receiving the pygame event
        """
        listeners = self._listeners.setdefault(event_type, [])
        if callback in listeners:
            DebugLogger.warn(f"Listener '{_name(callback)}' already bound", category="input")
            return

        listeners.append(callback)
        DebugLogger.system(f"Bound '{_name(callback)}' to event {event_type}", category="input")

    def remove_listener(self, event_type: int, callback: Callable) -> None:
        """Unbind exactly this callback. Unknown callbacks are ignored."""
        listeners = self._listeners.get(event_type)
        if not listeners:
            return
        try:
            listeners.remove(callback)
        except ValueError:
            return
        DebugLogger.system(f"Unbound '{_name(callback)}' from event {event_type}", category="input")

    def has_listener(self, event_type: int, callback: Callable) -> bool:
        return callback in self._listeners.get(event_type, ())

    def listener_count(self, event_type: int = None) -> int:
        """Count bound listeners for one event type, or all of them."""
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(len(listeners) for listeners in self._listeners.values())

    def clear(self) -> None:
        self._listeners.clear()

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event) -> None:
        """
        Deliver an event to every listener bound to its type.

        Iterates over a snapshot, so listeners may unbind themselves.
        Listener exceptions propagate to the caller.
        """
        listeners = self._listeners.get(event.type)
        if not listeners:
            return

        for callback in list(listeners):
            callback(event)


def _name(callback: Callable) -> str:
    return getattr(callback, "__name__", repr(callback))
