"""Web-facing observer for pantry and shopping events.

EventLog subscribes to an EventBus and keeps a ring buffer of recent events
that the web layer can poll (``since=<last_id_seen>``) to prompt the user,
e.g. for a manual translation of an unresolved pantry term.

  * Each event gets an auto-increment integer id (cursor).
  * A Lock guards the buffer; uvicorn workers each keep their own log.
  * ``max_events`` caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from fridge.events.Event_Bus import (
    EventBus, TRANSLATION_UNRESOLVED, TRANSLATION_CORRECTED,
    SHOPPING_ITEM_ADDED, SHOPPING_ITEM_BOUGHT
)
from fridge.utilities.constants import EVENT_LOG_MAX_EVENTS

OBSERVED_EVENTS = (TRANSLATION_UNRESOLVED, TRANSLATION_CORRECTED, SHOPPING_ITEM_ADDED, SHOPPING_ITEM_BOUGHT)


class EventLog:
    def __init__(self, max_events: int = EVENT_LOG_MAX_EVENTS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._started = False

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        with self._lock:
            evt: Dict[str, Any] = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            }
            if isinstance(payload, dict):
                term = payload.get('term')
                if term is not None and hasattr(term, 'name'):
                    evt['name'] = term.name
                    evt['target_term'] = getattr(term, 'target_term', '')
                for k in ('name', 'source_term', 'target_term', 'updated', 'reactivated', 'added_to_pantry'):
                    if k in payload and k not in evt:
                        evt[k] = payload[k]
            self._events.append(evt)
            self._next_id += 1
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def start(self, bus: EventBus):
        """Idempotent start: subscribe to the observed events once."""
        if self._started:
            return
        for name in OBSERVED_EVENTS:
            bus.subscribe(name, self.record)
        self._started = True

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive), plus next_cursor for the next poll."""
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventLog', 'OBSERVED_EVENTS']
