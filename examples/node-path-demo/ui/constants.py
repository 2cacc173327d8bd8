"""Layout constants and color definitions."""
from nodepath import EasingStyle

# Timing
FPS = 60
TPS = 30

# Layout dimensions
PLAY_W = 640
SIDEBAR_W = 170
CURVE_H = 150
STATUS_H = 36

SCREEN_W = PLAY_W + SIDEBAR_W
SCREEN_H = 480 + STATUS_H

# Orb
ORB_RADIUS = 14
NODE_RADIUS = 6

# Colors
BG_COLOR = (20, 20, 30)
PATH_COLOR = (60, 60, 80)
NODE_COLOR = (120, 120, 140)
NODE_TARGET = (255, 200, 60)
ORB_IDLE = (128, 128, 128)
ORB_MOVING = (0, 220, 220)
CURVE_BG = (15, 15, 25)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)

# [ and ] step through styles in declaration order.
EASING_ORDER = list(EasingStyle)

WAYPOINTS = [
    (120.0, 100.0),
    (520.0, 100.0),
    (520.0, 380.0),
    (120.0, 380.0),
]
DURATIONS = [1.2, 0.8, 1.2]  # last segment uses the default duration
