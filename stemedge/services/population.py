"""
Two-species predator-prey simulator (discrete Lotka-Volterra).
"""
from collections import deque
from typing import Callable, Literal
from stemedge.core.config import get_settings
from stemedge.models.schemas import PopulationSample
from stemedge.services.tick_timer import TickTimer
import logging

logger = logging.getLogger(__name__)

ALPHA = 0.1    # prey growth rate
BETA = 0.005   # predation rate
DELTA = 0.002  # predator growth per prey eaten
GAMMA = 0.08   # predator death rate
PREY_CEILING = 200.0

SEED_SAMPLE = PopulationSample(tick=0, prey=40, predator=10)


def advance(sample: PopulationSample) -> PopulationSample:
    """One Euler step (dt = 1)."""
    prey, predator = sample.prey, sample.predator

    d_prey = ALPHA * prey - BETA * prey * predator
    d_predator = DELTA * prey * predator - GAMMA * predator

    return PopulationSample(
        tick=sample.tick + 1,
        prey=min(max(prey + d_prey, 0.0), PREY_CEILING),
        predator=max(predator + d_predator, 0.0),
    )


class PopulationSimulator:
    """Stopped/Running state machine over a bounded sample history."""

    def __init__(self, tick_interval: float | None = None, history_limit: int | None = None):
        settings = get_settings()
        self.tick_interval = tick_interval or settings.SIM_TICK_INTERVAL
        self.history: deque[PopulationSample] = deque(
            [SEED_SAMPLE], maxlen=history_limit or settings.POPULATION_HISTORY_LIMIT
        )
        self._timer: TickTimer | None = None
        self._listeners: list[Callable[[PopulationSample], None]] = []

    @property
    def state(self) -> Literal["stopped", "running"]:
        return "running" if self.running else "stopped"

    @property
    def running(self) -> bool:
        return self._timer is not None and self._timer.active

    @property
    def latest(self) -> PopulationSample:
        return self.history[-1]

    def start(self):
        """Begin ticking. Needs a running event loop."""
        if self.running:
            return
        # a timer whose callback failed has stopped on its own
        self._release_timer()
        timer = TickTimer(self.tick_interval, self.tick)
        timer.start()
        self._timer = timer
        logger.info("Population simulation started")

    def pause(self):
        was_running = self.running
        self._release_timer()
        if was_running:
            logger.info(f"Population simulation paused at tick {self.latest.tick}")

    def reset(self):
        self._release_timer()
        self.history.clear()
        self.history.append(SEED_SAMPLE)

    def close(self):
        """Tear down: stop ticking and drop listeners."""
        self._release_timer()
        self._listeners.clear()

    def tick(self) -> PopulationSample:
        sample = advance(self.latest)
        self.history.append(sample)
        for listener in list(self._listeners):
            listener(sample)
        return sample

    def subscribe(self, listener: Callable[[PopulationSample], None]) -> Callable[[], None]:
        """Register a per-tick listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _release_timer(self):
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
