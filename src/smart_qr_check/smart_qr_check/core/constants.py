"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_CAPACITY = 50
ATTENDANCE_TARGET_PERCENT = 75
DEFAULT_STUDENT_ROLL_NO = "CS2024001"

SESSION_QR_PREFIX_LEN = 3
EVENT_QR_PREFIX_LEN = 4
QR_SUFFIX_LEN = 6
MAX_CODE_ATTEMPTS = 10

CHART_ITEMS = 5
SESSION_LABEL_LEN = 10
EVENT_LABEL_LEN = 15
ADMIN_LABEL_LEN = 12

WEEK_BUCKETS = 3
SESSIONS_PER_WEEK = 5
