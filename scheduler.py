# scheduler.py
"""
Cooperative fixed-interval scheduling on a simulated clock.

Each task does one unit of work per call to step() and then returns, so
shared state only changes between calls.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class StepOutcome(Enum):
    """Result of one task step."""
    PROGRESSED = "progressed"
    WAITING = "waiting"
    DONE = "done"


@dataclass
class ScheduledTask:
    name: str
    task: object
    interval: int
    next_due: int = 0
    calls: int = 0
    last_outcome: StepOutcome = StepOutcome.WAITING


class Scheduler:
    def __init__(self):
        self.now = 0
        self.tasks = []

    def add(self, name, task, interval, offset=0):
        """Register a task whose step() runs every `interval` ms."""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        if any(t.name == name for t in self.tasks):
            raise ValueError(f"Task {name!r} already registered")
        entry = ScheduledTask(name, task, int(interval), next_due=self.now + offset)
        self.tasks.append(entry)
        return entry

    def get(self, name):
        for t in self.tasks:
            if t.name == name:
                return t
        raise KeyError(name)

    def next_due(self):
        return min(t.next_due for t in self.tasks)

    def tick(self):
        """Advance to the next due time and step every task due then, in registration order."""
        if not self.tasks:
            raise RuntimeError("No tasks registered")
        self.now = self.next_due()
        for t in self.tasks:
            if t.next_due == self.now:
                t.last_outcome = t.task.step()
                t.calls += 1
                t.next_due += t.interval
        return self.now

    def run_for(self, duration):
        """Run every task due in the next `duration` ms."""
        end = self.now + duration
        while self.tasks and self.next_due() <= end:
            self.tick()
        self.now = end
        return self.now

    def run_until(self, predicate, limit):
        """Tick until predicate() holds or `limit` ms have passed. Returns whether it held."""
        end = self.now + limit
        while not predicate():
            if not self.tasks or self.next_due() > end:
                logger.debug("run_until gave up after %d ms", limit)
                return False
            self.tick()
        return True
