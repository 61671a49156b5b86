import math

# ============================================================================
# CONFIGURATION
# ============================================================================

# Sphere mesh (latitude rings including the two single-point poles)
RING_COUNT = 41
RING_POINT_COUNT = 80

# Every Nth meridian / ring is drawn
LINE_SPACING = 4
RING_SPACING = 4

# Projection toggle
TRANSITION_DURATION_MS = 1000.0

# Line-length guard, in unit-circle space (before the viewport scale)
MAX_LINE_DELTA = 20.0

# Drag rotation: full viewport width/height maps to these angles
MAX_ROTATION_Y = math.pi
MAX_ROTATION_Z = math.pi / 2

# Autonomous rotation, radians per millisecond of simulated time
ROTATION_SPEED_Y = 0.0004
ROTATION_SPEED_Z = 0.00015

# Drawing style
BACKGROUND_COLOR = '#101018'
LINE_COLOR = '#e0e0e0'
LINE_WIDTH = 1.0
COMPOSITE_OPERATION = 'lighter'

# Fraction of the half-viewport used as the unit-circle radius
VIEW_MARGIN = 0.45

# Host window / output size
WINDOW_SIZE = (900, 900)
FRAME_MS = 1000.0 / 60.0

# Number of render-time samples in the rolling readout
READOUT_WINDOW = 30
