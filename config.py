# === Global configuration & tuning ===
# All simulation values are in world units: 1 unit = 1 tile side, y points up.
WIDTH, HEIGHT = 1280, 720
FPS = 60
FIXED_TIMESTEP = 1.0 / 60.0
MAX_FRAME_TIME = 0.25  # Cap on a single measured frame (seconds)

# Camera view in world units
CAMERA_WIDTH = 32.0
CAMERA_HEIGHT = 18.0

# Colors
BG = (178, 220, 239)
TILE_COL = (54, 60, 78)
TEXT_COL = (55, 60, 66)
ACCENT = (255, 199, 95)
RED = (220, 72, 72)
YELLOW = (240, 210, 60)
GREEN = (80, 200, 120)
WHITE = (240, 240, 240)
CYAN = (80, 220, 220)
OVERLAY = (18, 20, 27)

# Assets
LEVEL_PATH = "assets/level.txt"
GAME_CONFIG_PATH = "config/game_config.json"
SOUND_DIR = "assets"
MUSIC_PATH = "assets/music.ogg"
MUSIC_VOLUME = 0.2

# Physics
GRAVITY = (0.0, -40.0)
DRAG = 5.0
DRAG_SNAP = 0.1  # |vx| below this snaps to zero while grounded

# Player tuning
PLAYER_SIDES = (0.9, 1.8)
PLAYER_SPEED = 30.0
PLAYER_AIR_CONTROL = 0.25  # Fraction of PLAYER_SPEED available airborne
PLAYER_JUMP_SPEED = 15.0
PLAYER_JUMP_CUT = 0.5  # Releasing jump early clamps vy to this fraction
PLAYER_MAX_VELOCITY = (10.0, 100.0)
PLAYER_CROUCH_SCALE = 0.5
FALL_MARGIN = 2.0  # Fall death below min_y - FALL_MARGIN * player height

# Stomp / hit boxes
FOOT_OFFSET = 0.08
FOOT_SIDES = (0.55, 0.05)
HEAD_HEIGHT = 0.4
HITBOX_SCALE = (0.8, 0.9)

# Patrol probes
PATROL_PROBE_DISTANCE = 1.0
LEDGE_PROBE_DEPTH = 0.2

# Enemy tuning
ENEMY_SIDES = (1.0, 2.0)
ENEMY_SPEED = 5.0
ENEMY_HEALTH = 1

# Monkey (boss) tuning
MONKEY_SIDES = (2.0, 3.5)
MONKEY_HEALTH = 3
MONKEY_RAGE_SPEED = 15.0
MONKEY_RAGE_SPEED_INCREMENT = 5.0
MONKEY_RAGE_DELAY = 0.75  # Seconds per remaining health point before charging
MONKEY_THROW_INTERVAL = (1.0, 2.0)  # Seconds, uniform
MONKEY_RAGE_THRESHOLD = (5, 10)  # Bananas thrown before rage, [lo, hi)

# Banana tuning
BANANA_SIDES = (0.5, 0.3)
BANANA_MAX_DISTANCE = 30.0
BANANA_THROW_JITTER = 7.5
BANANA_MIN_VY = 1.0

# Scoring
SCORE_ENEMY = 100
SCORE_BOSS = 500
TIME_BONUS = 3000
TIME_BONUS_DECAY = 10  # Points lost per whole second

TILE_SIDE = 1.0
