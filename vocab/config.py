from datetime import timedelta

WRONG_RETRY = timedelta(minutes=10)
HOLD_RETRY = timedelta(hours=12)
CORRECT_INTERVALS = {
    1: timedelta(days=1),
    2: timedelta(days=3),
    3: timedelta(days=7),
    4: timedelta(days=14),
}
MAX_INTERVAL = timedelta(days=30)  # streak >= 5

DEFAULT_QUEUE_LIMIT = 20
DEFAULT_NEW_LIMIT = 10
MAX_QUEUE_LIMIT = 100
MAX_SELECTED_IDS = 100

DEFAULT_CARD_LIST_LIMIT = 50
DEFAULT_RECENT_DAYS = 7
MAX_RECENT_DAYS = 30
MAX_RECENT_REVIEWS = 1000
