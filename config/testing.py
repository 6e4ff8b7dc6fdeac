import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

SEED_FIXTURES = True
SESSION_CAPACITY = 50
SCAN_DELAY_SECONDS = 0
