"""Simple Event Bus / Observer implementation for pantry and shopping notices.

Event names used so far:
  pantry.translation_unresolved -> payload {"term": PantryTerm}
  pantry.translation_corrected  -> payload {"source_term": str, "target_term": str, "updated": int}
  shopping.item_added           -> payload {"name": str, "reactivated": bool}
  shopping.item_bought          -> payload {"name": str, "added_to_pantry": bool}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
TRANSLATION_UNRESOLVED = "pantry.translation_unresolved"
TRANSLATION_CORRECTED = "pantry.translation_corrected"
SHOPPING_ITEM_ADDED = "shopping.item_added"
SHOPPING_ITEM_BOUGHT = "shopping.item_bought"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"[EventBus] Error delivering {event_name} to {cb}")


__all__ = [
	'EventBus', 'TRANSLATION_UNRESOLVED', 'TRANSLATION_CORRECTED',
	'SHOPPING_ITEM_ADDED', 'SHOPPING_ITEM_BOUGHT'
]
