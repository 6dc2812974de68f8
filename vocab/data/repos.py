import uuid
from typing import Iterable, Optional, Protocol

from django.db import transaction
from django.db.models import Exists, OuterRef

from .models import Card, Review
from ..domain.enums import RESET_RESULTS


class CardRepository(Protocol):
    """Persistence operations the study core depends on."""

    def get(self, card_id) -> Optional[Card]: ...

    def get_many(self, card_ids: Iterable) -> dict: ...

    def due_reviewed(self, now, limit: int) -> list: ...

    def due_new(self, now, limit: int) -> list: ...

    def struggling(self, limit: int) -> list: ...

    def apply_review(self, card, result, reviewed_at, state) -> Review: ...


def parse_card_id(value):
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value).strip())
    except (TypeError, ValueError, AttributeError):
        return None


def _has_reviews():
    return Exists(Review.objects.filter(card=OuterRef("pk")))


class DjangoCardRepository:
    def get(self, card_id):
        pk = parse_card_id(card_id)
        if pk is None:
            return None
        return Card.objects.filter(pk=pk).first()

    def get_many(self, card_ids):
        """Map each parsed id to its card; ids that are malformed or missing are absent."""
        pks = [pk for pk in (parse_card_id(i) for i in card_ids) if pk is not None]
        return {card.pk: card for card in Card.objects.filter(pk__in=pks)}

    def due_reviewed(self, now, limit):
        return list(
            Card.objects.filter(_has_reviews(), next_due_at__lte=now)
            .order_by("next_due_at", "created_at")[:limit]
        )

    def due_new(self, now, limit):
        return list(
            Card.objects.filter(~_has_reviews(), next_due_at__lte=now)
            .order_by("created_at")[:limit]
        )

    def struggling(self, limit):
        return list(
            Card.objects.filter(last_result__in=[r.value for r in RESET_RESULTS])
            .order_by("-updated_at", "next_due_at")[:limit]
        )

    def apply_review(self, card, result, reviewed_at, state):
        """
        Append the review snapshot and move the card to its new state.
        Both rows commit together or not at all.
        """
        with transaction.atomic():
            review = Review.objects.create(
                card=card,
                result=result.value,
                reviewed_at=reviewed_at,
                next_due_at=state.next_due_at,
                streak=state.streak,
            )
            card.last_result = result.value
            card.next_due_at = state.next_due_at
            card.streak = state.streak
            card.save(update_fields=["last_result", "next_due_at", "streak", "updated_at"])
        return review

    # Authoring and history helpers used by the API layer

    def search(self, query, limit):
        qs = Card.objects.all()
        if query:
            qs = qs.filter(word__icontains=query)
        return list(qs.order_by("-created_at")[:limit])

    def create(self, **content):
        return Card.objects.create(**content)

    def update_content(self, card, **content):
        for field, value in content.items():
            setattr(card, field, value)
        card.save(update_fields=[*content.keys(), "updated_at"])
        return card

    def delete(self, card):
        card.delete()

    def reviews_since(self, since, limit):
        return list(
            Review.objects.filter(reviewed_at__gte=since).order_by("-reviewed_at")[:limit]
        )
