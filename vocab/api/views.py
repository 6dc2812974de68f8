from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..config import (
    DEFAULT_CARD_LIST_LIMIT,
    DEFAULT_NEW_LIMIT,
    DEFAULT_QUEUE_LIMIT,
    DEFAULT_RECENT_DAYS,
    MAX_QUEUE_LIMIT,
    MAX_RECENT_DAYS,
    MAX_SELECTED_IDS,
)
from ..data.repos import DjangoCardRepository
from ..domain.errors import CardNotFound, InvalidResult, PersistenceFailure
from ..services.queue import StudyQueueBuilder
from ..services.reviews import record_review
from ..services.stats import recent_summaries
from ..utils.time import to_kst_iso
from .serializers import CardInSerializer, CardSerializer, ReviewInSerializer, clamped_int

base_logger = structlog.get_logger()


def _request_logger():
    # Create a unique request_id
    return base_logger.bind(request_id=str(uuid.uuid4()))


def _error(message, status_code):
    return Response({"error": message}, status=status_code)


class StudyQueueView(views.APIView):
    def get(self, request):
        logger = _request_logger()
        params = request.query_params

        limit = clamped_int(params.get("limit"), DEFAULT_QUEUE_LIMIT, 1, MAX_QUEUE_LIMIT)
        new_limit = clamped_int(params.get("newLimit"), DEFAULT_NEW_LIMIT, 0, MAX_QUEUE_LIMIT)
        mode = params.get("mode") or "today"
        ids = [i.strip() for i in params.get("ids", "").split(",") if i.strip()][:MAX_SELECTED_IDS]

        cards = StudyQueueBuilder().build(mode=mode, limit=limit, new_limit=new_limit, ids=ids)

        logger.info(
            "study_api_response",
            mode="selected" if ids else mode,
            limit=limit,
            new_limit=new_limit,
            card_count=len(cards),
        )
        return Response({"cards": CardSerializer(cards, many=True).data})


class ReviewView(views.APIView):
    def post(self, request):
        logger = _request_logger()

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        card_id = s.validated_data["card_id"]
        result = s.validated_data["result"]

        try:
            state = record_review(card_id, result)
        except InvalidResult as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except CardNotFound:
            return _error("card not found", status.HTTP_404_NOT_FOUND)
        except PersistenceFailure:
            return _error("failed to create review", status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(
            "review_api_response",
            card_id=card_id,
            result=result,
            streak=state.streak,
            next_due_utc=state.next_due_at.isoformat(),
            next_due_kst=to_kst_iso(state.next_due_at),
            status=status.HTTP_201_CREATED,
        )
        return Response(
            {
                "ok": True,
                "next_due_at": state.next_due_at.isoformat(),
                "next_due_kst": to_kst_iso(state.next_due_at),
                "streak": state.streak,
            },
            status=status.HTTP_201_CREATED,
        )


class RecentReviewsView(views.APIView):
    def get(self, request):
        days = clamped_int(request.query_params.get("days"), DEFAULT_RECENT_DAYS, 1, MAX_RECENT_DAYS)
        return Response({"summaries": recent_summaries(days)})


class CardListView(views.APIView):
    def get(self, request):
        query = (request.query_params.get("query") or "").strip()
        limit = clamped_int(request.query_params.get("limit"), DEFAULT_CARD_LIST_LIMIT, 1, MAX_QUEUE_LIMIT)
        cards = DjangoCardRepository().search(query, limit)
        return Response({"cards": CardSerializer(cards, many=True).data})

    def post(self, request):
        logger = _request_logger()
        s = CardInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        card = DjangoCardRepository().create(**s.validated_data)
        logger.info("card_created", card_id=str(card.pk), word=card.word)
        return Response({"card": CardSerializer(card).data}, status=status.HTTP_201_CREATED)


class CardDetailView(views.APIView):
    def _get_card(self, card_id):
        card = DjangoCardRepository().get(card_id)
        if card is None:
            raise CardNotFound(card_id)
        return card

    def handle_exception(self, exc):
        if isinstance(exc, CardNotFound):
            return _error("card not found", status.HTTP_404_NOT_FOUND)
        return super().handle_exception(exc)

    def get(self, request, card_id):
        return Response({"card": CardSerializer(self._get_card(card_id)).data})

    def patch(self, request, card_id):
        card = self._get_card(card_id)
        s = CardInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        # Content only; scheduling state belongs to the review recorder
        card = DjangoCardRepository().update_content(card, **s.validated_data)
        _request_logger().info("card_updated", card_id=str(card.pk))
        return Response({"card": CardSerializer(card).data})

    def delete(self, request, card_id):
        card = self._get_card(card_id)
        DjangoCardRepository().delete(card)
        _request_logger().info("card_deleted", card_id=str(card_id))
        return Response({"ok": True})
