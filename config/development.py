import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the demo sessions/events on startup
SEED_FIXTURES = bool(int(os.getenv("SEED_FIXTURES", "1")))

# Students per session used for fill-rate charts
SESSION_CAPACITY = int(os.getenv("SESSION_CAPACITY", "50"))

# Fake "camera" wait before a simulated scan hits the store
SCAN_DELAY_SECONDS = float(os.getenv("SCAN_DELAY_SECONDS", "2"))
