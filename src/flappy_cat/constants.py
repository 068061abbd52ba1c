"""
constants.py: Centralized configuration for simulation and presentation settings.
"""

# -------- Time Config --------
TICK_RATE = 50                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (20 ms)
MAX_CATCH_UP_TICKS = 5          # Late ticks beyond this are coalesced away
RENDER_FPS = 60                 # Presentation frame rate, independent of TICK_RATE

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.6                   # Added to vertical velocity every tick
JUMP_STRENGTH = -10.0           # Velocity set by an impulse (negative is up)
ROTATION_STEP = 4.0             # Degrees added to rotation every tick
MIN_ROTATION = -45.0            # Rotation set by an impulse
MAX_ROTATION = 90.0             # Nose-down cap

# -------- Character Config --------
CAT_WIDTH = 40
CAT_HEIGHT = 30

# -------- Pipe Config --------
PIPE_WIDTH = 80
PIPE_GAP = 200
PIPE_SPEED = 3.0                # Horizontal speed (pixels/tick)
PIPE_SPACING = 300              # Distance between consecutive spawned pipes
MIN_PIPE_HEIGHT = 50            # Minimum solid height above and below the gap
MIN_PIPES = 3                   # Live pipes kept in the stream while running

# -------- Window Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
WINDOW_CAPTION = "Flappy Cat"
DEFAULT_LOCALE = "tr"

# -------- Colors --------
SKY_TOP_COLOR = (147, 197, 253)
SKY_BOTTOM_COLOR = (59, 130, 246)
PIPE_COLOR = (22, 163, 74)
CAT_COLOR = (251, 146, 60)
CAT_DETAIL_COLOR = (30, 30, 30)
TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0)
START_OVERLAY_ALPHA = 128
GAME_OVER_OVERLAY_ALPHA = 178
BUTTON_COLOR = (59, 130, 246)
BUTTON_HOVER_COLOR = (37, 99, 235)
