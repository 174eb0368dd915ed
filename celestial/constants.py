"""Default settings for the simulation and the pygame host."""

import math

# --- World ---
WIDTH = 800
HEIGHT = 600

# --- Bodies ---
NUM_BODIES = 100
SUN_MASS = 10000.0
SUN_ID = -1
INITIAL_SPEED = 0.0
BODY_INITIAL_MASS_MAX = 50.0
DENSITY_VOLUME_FACTOR = 4.0 / 3.0 * math.pi

# --- Physics ---
GRAVITATIONAL_CONSTANT = 100.0
TIME_STEP = 1.0 / 60.0
MIN_DISTANCE = 1e-3
GROW_ON_MERGE = False

# --- Selection & prediction ---
SELECTION_TOLERANCE = 5.0
PREDICTION_STEPS = 10000
PREDICTION_INTERVAL = 100

# --- Host ---
FPS = 60
CAMERA_SPEED = 200.0
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
SUN_COLOR = (255, 128, 0)
SELECTION_COLOR = (255, 40, 40)
ORBIT_COLOR = (90, 160, 255)
HUD_COLOR = (200, 200, 200)
SELECTION_MARKER_PADDING = 3

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
