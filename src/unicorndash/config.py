TITLE = "Magical Unicorn Adventure"
WIDTH = 400
HEIGHT = 300
GROUND_HEIGHT = 50

# Player
PLAYER_X = 100
PLAYER_WIDTH = 80
PLAYER_HEIGHT = 80
JUMP_HEIGHT = 150
GRAVITY = 7  # pixels per tick, both directions
GROUND_Y = HEIGHT - PLAYER_HEIGHT - GROUND_HEIGHT  # player top when standing
APEX_Y = GROUND_Y - JUMP_HEIGHT

# Entities
OBSTACLE_WIDTH = 50
OBSTACLE_HEIGHT = 50
POWERUP_SIZE = 40
POWERUP_BAND_BOTTOM = HEIGHT - 100
POWERUP_BAND_RANGE = 200

# Rules
INITIAL_HEALTH = 100
MAX_HEALTH = 100
INITIAL_OBSTACLE_SPEED = 4
OBSTACLE_DAMAGE = 10
SHIELD_DURATION_TICKS = 180  # ~3s at TICK_RATE
LEVEL_DURATION = 7  # seconds per level
OBSTACLE_SPAWN_BASE = 0.02
OBSTACLE_SPAWN_PER_LEVEL = 0.005
POWERUP_SPAWN_CHANCE = 0.01
STAR_COUNT = 200

# Clocks
TICK_RATE = 60
CLOCK_INTERVAL_MS = 1000
MAX_CATCH_UP_STEPS = 5

# Assets, resolved against the working directory
PLAYER_IMAGE = "UnicornPic.png"
GOLD_IMAGE = "GoldDiamond.png"
PURPLE_IMAGE = "PurpleDiamond.png"
OBSTACLE_IMAGE = "AngryCloud.png"
JUMP_SOUND = "Jump_sound.wav"
COLLECT_SOUND = "Collect_sound.wav"
DEATH_SOUND = "Death_sound.wav"
