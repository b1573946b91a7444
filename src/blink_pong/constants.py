"""
Constants for Blink Pong.
"""

from __future__ import annotations

FPS = 60

WIDTH = 600
HEIGHT = 400
WINDOW_SIZE = (WIDTH, HEIGHT)

# inset of the court border; goals are detected at half of it
OFFSET = 10

BALL_RADIUS = 10
BALL_SPEED = 300.0  # px/s
BALL_BLINK_DURATION = 0.5
BLINK_FLICKER_RATE = 100.0

PADDLE_WIDTH = 10
PADDLE_HEIGHT = 100
PADDLE_SIZE = (PADDLE_WIDTH, PADDLE_HEIGHT)
PADDLE_SPEED = BALL_SPEED * 0.8
PADDLE_HIGHLIGHT_DURATION = 0.5
PLAYER_DAMPING = 5.0

CPU_TRYHARD_MIN = 4
CPU_TRYHARD_MAX = 8
CPU_RESPONSIVENESS_MIN = 0.5
CPU_RESPONSIVENESS_MAX = 5.0

END_GAME_SCORE = 10

# keyboard stand-in for the pointer, px/s
POINTER_SPEED = 420.0

# Colors
BACKGROUND = (0, 0, 0)
WHITE = (255, 255, 255)
DIM = (85, 85, 85)
OVERLAY = (0, 0, 0, 0.4)
CPU_WINS = (255, 0, 0)
PLAYER_WINS = (0, 255, 0)
HIGHLIGHT_HUE = 30.0
