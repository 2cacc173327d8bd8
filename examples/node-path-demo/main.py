"""Node Path Demo — click-triggered waypoint playback.

Exercises nodepath and nodepath-easing.

Controls:
  Click   Play (when clicking the orb)
  Space   Play
  S       Stop
  [ / ]   Previous / next easing style
  L       Toggle loop
  R       Reset orb to the first node
  Esc     Quit
"""
from __future__ import annotations

import dataclasses
import logging
import sys

import pygame

from nodepath import NodePathController, PathConfig, Ticker

from ui.constants import (
    BG_COLOR,
    DURATIONS,
    EASING_ORDER,
    FPS,
    ORB_RADIUS,
    SCREEN_H,
    SCREEN_W,
    TPS,
    WAYPOINTS,
)
from ui.scene import draw_path, draw_sidebar, draw_status_bar

logger = logging.getLogger("node_path_demo")


class DemoState:
    """Holds the ticker and the single path controller."""

    def __init__(self) -> None:
        self.ticker = Ticker(tps=TPS)
        config = PathConfig(
            waypoints=tuple(WAYPOINTS),
            durations=tuple(DURATIONS),
            easing=EASING_ORDER[3],
            trigger_on_click=True,
            autoplay_on_start=True,
        )
        self.ctrl = self._make_controller(config, WAYPOINTS[-1])

    def _make_controller(
        self, config: PathConfig, position: tuple[float, ...]
    ) -> NodePathController:
        ctrl = NodePathController(
            config,
            start_position=position,
            on_finished=lambda c: logger.info("orb back at node 0"),
        )
        self.ticker.add(ctrl)
        return ctrl

    def reconfigure(self, **changes) -> None:
        """Swap in a new config, keeping the orb where it is (playback stops)."""
        old = self.ctrl
        old.stop()
        self.ticker.remove(old)
        config = dataclasses.replace(old.config, autoplay_on_start=False, **changes)
        self.ctrl = self._make_controller(config, old.position)

    def cycle_easing(self, step: int) -> None:
        i = EASING_ORDER.index(self.ctrl.config.easing)
        self.reconfigure(easing=EASING_ORDER[(i + step) % len(EASING_ORDER)])

    def hit_orb(self, mx: int, my: int) -> bool:
        x, y = self.ctrl.position
        return (mx - x) ** 2 + (my - y) ** 2 <= ORB_RADIUS ** 2


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Node Path Demo — nodepath")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.ctrl.play()
                elif event.key == pygame.K_s:
                    state.ctrl.stop()
                elif event.key == pygame.K_LEFTBRACKET:
                    state.cycle_easing(-1)
                elif event.key == pygame.K_RIGHTBRACKET:
                    state.cycle_easing(1)
                elif event.key == pygame.K_l:
                    state.reconfigure(loop=not state.ctrl.config.loop)
                elif event.key == pygame.K_r:
                    state.ctrl.stop()
                    state.ctrl.target.position = state.ctrl.config.waypoints[0]

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if state.hit_orb(*event.pos):
                    state.ticker.click(state.ctrl)

        # --- Tick ---
        state.ticker.feed(dt)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_path(screen, state.ctrl)
        draw_sidebar(screen, font, state.ctrl)
        draw_status_bar(screen, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
