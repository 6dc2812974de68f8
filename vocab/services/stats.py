from datetime import timedelta, timezone as dt_tz

from django.utils import timezone
import structlog
from ..config import DEFAULT_RECENT_DAYS, MAX_RECENT_REVIEWS
from ..data.repos import DjangoCardRepository
from ..domain.enums import ReviewResult

logger = structlog.get_logger()

_COUNTER_KEYS = {
    ReviewResult.CORRECT.value: "correct",
    ReviewResult.HOLD.value: "hold",
    ReviewResult.WRONG.value: "wrong",
}


def recent_summaries(days=DEFAULT_RECENT_DAYS, now=None, repo=None):
    """Per-day review counts for the last `days` days (today included), newest first."""
    repo = repo or DjangoCardRepository()
    now = now or timezone.now()
    since = now - timedelta(days=days - 1)

    by_date = {}
    for review in repo.reviews_since(since, MAX_RECENT_REVIEWS):
        date = review.reviewed_at.astimezone(dt_tz.utc).date().isoformat()
        row = by_date.setdefault(
            date, {"date": date, "total": 0, "correct": 0, "hold": 0, "wrong": 0}
        )
        row["total"] += 1
        row[_COUNTER_KEYS.get(review.result, "wrong")] += 1

    summaries = sorted(by_date.values(), key=lambda r: r["date"], reverse=True)
    logger.info("recent_summaries_built", days=days, day_count=len(summaries))
    return summaries
