"""Path, orb, curve, and sidebar renderers."""
from __future__ import annotations

import pygame

from nodepath import NodePathController
from nodepath_easing import sample, warp

from ui.constants import (
    CURVE_BG,
    CURVE_H,
    LABEL_COLOR,
    NODE_COLOR,
    NODE_RADIUS,
    NODE_TARGET,
    ORB_IDLE,
    ORB_MOVING,
    ORB_RADIUS,
    PATH_COLOR,
    PLAY_W,
    SCREEN_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_path(surface: pygame.Surface, ctrl: NodePathController) -> None:
    """Draw the waypoint polyline, nodes, and the orb."""
    points = [(int(x), int(y)) for x, y in ctrl.config.waypoints]
    if len(points) > 1:
        pygame.draw.lines(surface, PATH_COLOR, ctrl.config.loop, points, 2)
    for i, p in enumerate(points):
        color = NODE_TARGET if ctrl.is_moving and i == ctrl.current_index else NODE_COLOR
        pygame.draw.circle(surface, color, p, NODE_RADIUS)

    x, y = ctrl.position
    fill = ORB_MOVING if ctrl.is_moving else ORB_IDLE
    pygame.draw.circle(surface, fill, (int(x), int(y)), ORB_RADIUS)
    outline = tuple(min(c + 40, 255) for c in fill)
    pygame.draw.circle(surface, outline, (int(x), int(y)), ORB_RADIUS, 1)


def draw_curve(surface: pygame.Surface, ctrl: NodePathController) -> None:
    """Plot the active easing curve with a dot at the current progress."""
    x, y = PLAY_W + 10, 10
    w, h = SIDEBAR_W - 20, CURVE_H - 20
    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))
    pygame.draw.line(surface, TEXT_DIM, (x, y + h), (x + w, y + h))
    pygame.draw.line(surface, TEXT_DIM, (x, y + h), (x, y))

    style = ctrl.config.easing
    points = [(x + t * w, y + h - v * h) for t, v in sample(style, steps=60)]
    pygame.draw.lines(surface, ORB_MOVING, False, points, 2)

    if ctrl.is_moving:
        t = ctrl.progress
        dot = (int(x + t * w), int(y + h - warp(style, t) * h))
        pygame.draw.circle(surface, (255, 255, 255), dot, 4)


def draw_sidebar(
    surface: pygame.Surface, font: pygame.font.Font, ctrl: NodePathController
) -> None:
    """Draw the info panel below the curve plot."""
    x = PLAY_W
    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, SCREEN_H - STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, SCREEN_H - STATUS_H))
    draw_curve(surface, ctrl)

    cx, cy, line_h = x + 10, CURVE_H + 4, 22
    state = ctrl.state
    rows = [
        ("INFO", LABEL_COLOR),
        (ctrl.config.easing.pascal_name, ORB_MOVING),
        (f"State: {'moving' if state.is_moving else 'idle'}", TEXT_COLOR),
        (f"Node: {state.current_index}/{ctrl.config.node_count}", TEXT_COLOR),
        (f"Progress: {state.progress:.2f}", TEXT_COLOR),
        (f"Loop: {'ON' if ctrl.config.loop else 'OFF'}", TEXT_COLOR),
    ]
    for text, color in rows:
        surface.blit(font.render(text, True, color), (cx, cy))
        cy += line_h


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))
    text = "[Click orb] Play  [Space] Play  [S] Stop  [ [ ] ] Easing  [L] Loop  [R] Reset  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
