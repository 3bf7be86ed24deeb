# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs. They
describe the shared State Buffer layout (which the force engine and the
integrator must agree on), the fixed numeric limits of the force kernels,
and the rendering properties of the debugging viewer.
"""

# --- State Buffer layout ---
# Each particle occupies STATE_SIZE consecutive float64 slots. Field k of
# particle i lives at i * STATE_SIZE + k.
P_X = 0
P_Y = 1
P_Z = 2
V_X = 3
V_Y = 4
V_Z = 5
F_X = 6
F_Y = 7
F_Z = 8
MASS = 9
STATE_SIZE = 10

# --- Force kernel constants ---
# Per-axis saturation of the spring force.
SPRING_FORCE_LIMIT = 12.0
# Distances below this are treated as degenerate and skipped.
ZERO_DISTANCE = 1e-9
# Closest distance to a line/vortex axis an affected particle can be.
FIELD_EPSILON = 0.01
# Strength of the line attractor pull.
LINE_ATTRACTOR_STRENGTH = 9.8
# Rotational frequency at the edge of a vortex, and its cap near the core.
VORTEX_EDGE_FREQUENCY = 2.0
VORTEX_MAX_FREQUENCY = 10.0 ** (VORTEX_EDGE_FREQUENCY + 1)

# --- Diagnostic line geometry ---
# Two vertices of (x, y, z, r, g, b, enabled).
FLOATS_PER_VERTEX = 7
FLOATS_PER_LINE = FLOATS_PER_VERTEX * 2
# Band around the natural length in which a spring is drawn white.
SPRING_REST_EPSILON = 0.01

# --- Visualization settings ---
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
UI_PANEL_WIDTH = 280
FPS = 60
BACKGROUND_COLOR = (24, 24, 24)  # Dark Gray
PARTICLE_COLOR = (0, 255, 255)   # Cyan
PREDATOR_COLOR = (255, 0, 102)   # Hot Pink
GOAL_COLOR = (255, 204, 0)       # Gold
DEFAULT_PARTICLE_RADIUS = 3
DEFAULT_WORLD_SCALE = 40.0
