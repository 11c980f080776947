import math

# Playfield (logical units; the window scales on top of this)
FIELD_WIDTH = 800
FIELD_HEIGHT = 500

# Paddles
PADDLE_WIDTH = 14
PADDLE_HEIGHT = 100
PADDLE_INSET = 20
PLAYER_SPEED = 8    # per tick
OPPONENT_SPEED = 5  # per tick, caps the CPU

# Ball
BALL_RADIUS = 9
BALL_BASE_SPEED = 5.0
BALL_MAX_SPEED = 15.0
BALL_SPEED_GROWTH = 1.05
MAX_BOUNCE_ANGLE = 5 * math.pi / 12  # 75 degrees
SERVE_ANGLE = math.pi / 6            # serves within +/- 30 degrees
PADDLE_PUSH_EPSILON = 0.5

# Rules
MAX_SCORE = 10

# Opponent tuning
AI_CHASE_GAIN = 0.12
AI_RETURN_GAIN = 0.05
AI_CHASE_FRACTION = 0.3

# Speeds above are tuned for this cadence
TARGET_FPS = 60

# Colors
BACKGROUND = (11, 18, 32)
ACCENT = (125, 211, 252)
CENTER_LINE = (25, 39, 55)
WHITE = (255, 255, 255)
OVERLAY_DARK = (0, 0, 0, 153)
DEBUG_TEXT = (150, 160, 170)

SCORE_FONT_SIZE = 42
OVERLAY_FONT_SIZE = 28
DEBUG_FONT_SIZE = 20

# Sides (fixed placement: player left, opponent right)
SIDE_PLAYER = "player"
SIDE_OPPONENT = "opponent"
