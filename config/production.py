import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_FIXTURES = bool(int(os.getenv("SEED_FIXTURES", "1")))
SESSION_CAPACITY = int(os.getenv("SESSION_CAPACITY", "50"))
SCAN_DELAY_SECONDS = float(os.getenv("SCAN_DELAY_SECONDS", "2"))
