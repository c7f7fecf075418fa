# events.py
"""
Synchronous publish/subscribe used for map-surface, marker and clusterer
notifications (``idle``, ``zoom_changed``, ``dragend``, ``clusterclick`` ...).

Callbacks run to completion on the publishing call, in subscription order.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

Handle = Tuple[str, Callable[..., Any]]


class EventEmitter:
    """Minimal pub/sub keyed by event type."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Callable[..., Any]]] = {}

    def subscribe(self, event_type: str, callback: Callable[..., Any]) -> Handle:
        self._subscribers.setdefault(event_type, []).append(callback)
        return (event_type, callback)

    def unsubscribe(self, handle: Handle) -> bool:
        event_type, callback = handle
        callbacks = self._subscribers.get(event_type, [])
        try:
            callbacks.remove(callback)
        except ValueError:
            return False
        return True

    def publish(self, event_type: str, *args: Any) -> None:
        # copy: a callback may unsubscribe itself
        for callback in list(self._subscribers.get(event_type, [])):
            callback(*args)

    def subscriber_count(self, event_type: Optional[str] = None) -> int:
        if event_type is not None:
            return len(self._subscribers.get(event_type, []))
        return sum(len(v) for v in self._subscribers.values())
