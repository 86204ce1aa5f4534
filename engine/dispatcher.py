# dispatcher.py
#
# Latest-wins front door for the simulator. Overlapping requests each run to
# completion, but only the most recently submitted one gets to publish.
#

import logging
import threading
from typing import Callable, Optional

from models import SimulationInput, SimulationResult
from engine.simulator import run_goal_simulation

logger = logging.getLogger(__name__)

STALE = object()  # returned instead of a result that was superseded


class LatestResultDispatcher:
    def __init__(self, runner: Callable[..., Optional[SimulationResult]] = run_goal_simulation, **run_kwargs):
        self.runner = runner
        self.run_kwargs = run_kwargs
        self._lock = threading.Lock()
        self._latest_ticket = 0

    def _issue_ticket(self) -> int:
        with self._lock:
            self._latest_ticket += 1
            return self._latest_ticket

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._latest_ticket

    def submit(self, inputs: SimulationInput, **overrides):
        """
        Runs the engine for inputs. Returns the result (or None for an invalid
        horizon), or STALE when a newer submit() started before this one finished.
        """
        ticket = self._issue_ticket()
        result = self.runner(inputs, **{**self.run_kwargs, **overrides})

        if not self.is_current(ticket):
            logger.debug("Discarding result for ticket %d; newer request pending", ticket)
            return STALE
        return result
