from django.db import DatabaseError
from django.utils import timezone
import structlog
from ..data.repos import DjangoCardRepository
from ..domain.enums import ReviewResult
from ..domain.errors import CardNotFound, PersistenceFailure
from ..domain.logic import next_state
from ..utils.time import to_kst_iso

logger = structlog.get_logger()


class ReviewRecorder:
    def __init__(self, repo=None):
        self.repo = repo or DjangoCardRepository()

    def record(self, card_id, result, now=None):
        # Reject unknown outcomes before touching the store
        result = ReviewResult.parse(result)
        logger.info("review_received", card_id=str(card_id), result=result.value)

        card = self.repo.get(card_id)
        if card is None:
            logger.info("review_card_not_found", card_id=str(card_id))
            raise CardNotFound(card_id)

        now = now or timezone.now()
        state = next_state(card.streak, result, now)

        try:
            self.repo.apply_review(card, result, now, state)
        except DatabaseError as exc:
            logger.error("review_persist_failed",
                card_id=str(card_id),
                result=result.value,
                error=str(exc),
            )
            raise PersistenceFailure(card_id) from exc

        logger.info("review_scheduled",
            card_id=str(card_id),
            result=result.value,
            streak=state.streak,
            next_due_utc=state.next_due_at.isoformat(),
            next_due_kst=to_kst_iso(state.next_due_at),
        )
        return state


def record_review(card_id, result, now=None):
    return ReviewRecorder().record(card_id, result, now=now)
