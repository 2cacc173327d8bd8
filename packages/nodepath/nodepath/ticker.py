"""Ticker - fixed-timestep host scheduler for path controllers."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nodepath.controller import NodePathController

logger = logging.getLogger(__name__)


class Ticker:
    """Feeds ``advance(dt)`` to registered controllers at a fixed rate.

    ``feed()`` takes variable real frame time (e.g. from a render loop) and
    steps as many whole ticks as fit; the remainder carries to the next call.
    """

    def __init__(self, tps: int = 60) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._accumulator = 0.0
        self._started = False
        self._controllers: list[NodePathController] = []

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._tick_number * self._dt

    @property
    def controllers(self) -> tuple[NodePathController, ...]:
        return tuple(self._controllers)

    def add(self, controller: NodePathController) -> None:
        """Register a controller. Already-started tickers activate it at once."""
        self._controllers.append(controller)
        if self._started:
            controller.on_start()

    def remove(self, controller: NodePathController) -> None:
        try:
            self._controllers.remove(controller)
        except ValueError:
            pass

    def start(self) -> None:
        """Activate every controller once (autoplay hook)."""
        if self._started:
            return
        self._started = True
        logger.debug("ticker started with %d controllers", len(self._controllers))
        for controller in list(self._controllers):
            controller.on_start()

    def click(self, controller: NodePathController) -> None:
        controller.on_pointer_clicked()

    def step(self) -> None:
        self._tick_number += 1
        for controller in list(self._controllers):
            controller.advance(self._dt)

    def run(self, n: int) -> None:
        self.start()
        for _ in range(n):
            self.step()

    def feed(self, seconds: float) -> int:
        """Accumulate ``seconds`` of frame time and step whole ticks. Returns ticks run."""
        if seconds < 0:
            raise ValueError(f"seconds must be non-negative, got {seconds}")
        self.start()
        self._accumulator += seconds
        steps = 0
        while self._accumulator >= self._dt:
            self.step()
            self._accumulator -= self._dt
            steps += 1
        return steps
