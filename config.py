
GRID_WIDTH = 20
GRID_HEIGHT = 20
CELL_SIZE = 20

FPS = 60
TIMESTEP = 0.25

INITIAL_HEAD = (0, 0)
INITIAL_DIRECTION = (1, 0)

# Rejection-sampling attempts before falling back to a full scan of free cells
FOOD_MAX_ATTEMPTS = 1000

WHITE = (255,255,255)
RED = (255,50,50)
DARK_GREY = (50,50,50)

BACKGROUND_COLOR = (230, 230, 230)
HEAD_COLOR = (80, 80, 255)
BODY_COLOR = (128, 128, 255)
FOOD_COLOR = RED
GRID_LINE_COLOR = (210, 210, 210)

# Info strip under the board for the HUD
INFO_PANEL_HEIGHT = 32

# One of these tones is picked at random each time the snake eats
EAT_SOUND_FREQUENCIES = (523, 660, 784)
EAT_SOUND_DURATION = 0.10
SOUND_VOLUME = 0.22

LOG_LEVEL = "INFO"
