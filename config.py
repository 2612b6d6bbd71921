# config.py

# ===== Potentiometer =====
POT_SAMPLING_RATE_HZ = 50

POT_INPUT_RANGE  = (0, 4095)   # 12-bit ADC
POT_OUTPUT_RANGE = (0, 4095)

POT_MOVEMENT_THRESHOLD = 30    # 10–255 обычно нормально


# ===== Replay / characterization =====
REPLAY_PRINT_EVERY = 10
REPLAY_LOG_DIR = "logs"

SETTLE_TOLERANCE = 8
