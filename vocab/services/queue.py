from django.utils import timezone
import structlog
from ..config import DEFAULT_NEW_LIMIT, DEFAULT_QUEUE_LIMIT, MAX_SELECTED_IDS
from ..data.repos import DjangoCardRepository, parse_card_id

logger = structlog.get_logger()


class StudyQueueBuilder:
    """
    Read-only assembly of study sessions.

    today:    due cards with review history first, then brand-new cards
              filling whatever capacity is left.
    retry:    cards last answered HOLD or WRONG, most recently touched first,
              regardless of due time.
    selected: an explicit list of ids in caller order.
    """

    def __init__(self, repo=None):
        self.repo = repo or DjangoCardRepository()

    def today(self, limit=DEFAULT_QUEUE_LIMIT, new_limit=DEFAULT_NEW_LIMIT, now=None):
        if limit <= 0:
            return []
        now = now or timezone.now()

        reviewed = self.repo.due_reviewed(now, limit)
        remaining = max(0, limit - len(reviewed))
        allowed_new = min(max(new_limit, 0), remaining)
        new_cards = self.repo.due_new(now, allowed_new) if allowed_new > 0 else []

        logger.info("study_queue_built",
            mode="today",
            limit=limit,
            new_limit=new_limit,
            reviewed_count=len(reviewed),
            new_count=len(new_cards),
            now_utc=now.isoformat(),
        )
        return [*reviewed, *new_cards]

    def retry(self, limit=DEFAULT_QUEUE_LIMIT):
        if limit <= 0:
            return []
        cards = self.repo.struggling(limit)
        logger.info("study_queue_built", mode="retry", limit=limit, card_count=len(cards))
        return cards

    def selected(self, ids):
        ordered = []
        seen = set()
        for raw in ids:
            pk = parse_card_id(raw)
            if pk is None or pk in seen:
                continue
            seen.add(pk)
            ordered.append(pk)
        ordered = ordered[:MAX_SELECTED_IDS]

        found = self.repo.get_many(ordered) if ordered else {}
        cards = [found[pk] for pk in ordered if pk in found]
        logger.info("study_queue_built",
            mode="selected",
            requested=len(ordered),
            card_count=len(cards),
        )
        return cards

    def build(self, mode="today", limit=DEFAULT_QUEUE_LIMIT, new_limit=DEFAULT_NEW_LIMIT, ids=None, now=None):
        # An explicit selection overrides the mode
        if ids:
            return self.selected(ids)
        if mode == "retry":
            return self.retry(limit)
        return self.today(limit, new_limit, now=now)


def build_today_queue(limit=DEFAULT_QUEUE_LIMIT, new_limit=DEFAULT_NEW_LIMIT, now=None):
    return StudyQueueBuilder().today(limit, new_limit, now=now)


def build_retry_queue(limit=DEFAULT_QUEUE_LIMIT):
    return StudyQueueBuilder().retry(limit)


def build_selected_queue(ids):
    return StudyQueueBuilder().selected(ids)
