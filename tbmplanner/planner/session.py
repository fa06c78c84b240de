# tbmplanner/planner/session.py
"""
State owned by one planning session: lookup caches and a cancellation token.
Nothing here is module-global, so concurrent sessions never share entries.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..fuel_stops.data_models import FuelPrice

@dataclass
class PlanningSession:
    wind_cache: Dict[str, Any] = field(default_factory=dict)
    fuel_price_cache: Dict[str, Optional[FuelPrice]] = field(default_factory=dict)
    cancel_event: threading.Event = field(default_factory=threading.Event)

    def cancel(self):
        """Marks the session stale; in-flight fetches discard their results."""
        logging.info("Planning session cancelled.")
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()
