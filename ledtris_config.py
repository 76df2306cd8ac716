"""Runtime configuration for the LED matrix game."""

WIDTH, HEIGHT = 8, 8
LEVELS = 16

CONFIG = {
    "LOCKED_BRIGHTNESS": 4,
    "ACTIVE_BRIGHTNESS": 15,
    "LOCK_DELAY_MS": 500,
    "GRAVITY_MS": 600,
    "FLASH_MS": 250,
    "BLINK_CYCLES": 3,
    "BLINK_MS": 1200,
    "INPUT_INTERVAL_MS": 120,
    "SUBLEVEL_HOLD_US": 40,
    "ROTATE_CW": True,
    "RNG_SEED": None,
    "RNG_MAX_DRAWS": 16,
    "CELL_SIZE": 48,
    "WINDOW_FPS": 60,
}


def validate(cfg=None):
    cfg = CONFIG if cfg is None else cfg
    locked, active = cfg["LOCKED_BRIGHTNESS"], cfg["ACTIVE_BRIGHTNESS"]
    for key, val in (("LOCKED_BRIGHTNESS", locked), ("ACTIVE_BRIGHTNESS", active)):
        if not 1 <= val < LEVELS:
            raise ValueError(f"{key} must be in 1..{LEVELS - 1}, got {val}")
    if active <= locked:
        raise ValueError("ACTIVE_BRIGHTNESS must be brighter than LOCKED_BRIGHTNESS")
    for key in ("LOCK_DELAY_MS", "GRAVITY_MS", "BLINK_MS", "RNG_MAX_DRAWS", "CELL_SIZE", "WINDOW_FPS"):
        if cfg[key] <= 0:
            raise ValueError(f"{key} must be positive, got {cfg[key]}")
    for key in ("FLASH_MS", "BLINK_CYCLES", "INPUT_INTERVAL_MS", "SUBLEVEL_HOLD_US"):
        if cfg[key] < 0:
            raise ValueError(f"{key} must not be negative, got {cfg[key]}")
