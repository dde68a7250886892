# Reference ruleset: 34 kinds x 4 copies fill an 8 x 17 board exactly.
BOARD_ROWS = 8
BOARD_COLS = 17
COPIES_PER_KIND = 4

MAX_UNDO_STEPS = 20

# Retry budgets for the solvability gates (new deal / reshuffle).
MAX_SHUFFLE_RETRIES = 100
MAX_RESHUFFLE_ATTEMPTS = 200

# Tile metrics used to translate drag offsets (pixels) into cell deltas.
TILE_WIDTH = 60
TILE_HEIGHT = 80
TILE_GAP = 4

# Pointer travel (pixels) before a drag locks onto an axis.
DRAG_THRESHOLD = 10

# Wave pacing in seconds of tick time.
ELIMINATE_DURATION = 0.3
CHAIN_DELAY = 0.1
WAVE_INTERVAL = ELIMINATE_DURATION + CHAIN_DELAY
