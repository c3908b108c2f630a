# Field
TILE_RADIUS = 40                   # px, nominal honeycomb cell radius
HIT_MULTIPLIER = 1.2               # hit box relative to the drawn radius
POP_STEP = 0.1                     # pop progress per frame
GOLDEN_PROBABILITY = 0.05

# Scoring
GOLDEN_BONUS = 5                   # extra pops counted for a golden bubble
FLUSH_PERIOD_SEC = 5.0             # push local pops to the shared counter
COUNTER_NAME = "global"

# Audio
POP_VOLUME = 0.5
GOLDEN_PITCH = 1.5

# UX
BACKDROP_ALPHA = 0.8
QUOTE_MS = 3000
HUD_COLOR = (230, 230, 230)
HUD_ACCENT = (253, 224, 71)
TIP_COLOR = (255, 0, 0)
SKELETON_COLOR = (0, 255, 0)

QUOTES = [
    "Breathe in calm, breathe out stress.",
    "You are doing enough.",
    "Peace comes from within.",
    "Visualise your highest self.",
    "Let go of what you cannot control.",
]
