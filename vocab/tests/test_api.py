import pytest
import logging
from django.urls import reverse
from django.utils import timezone
from datetime import datetime, timedelta
import uuid

from vocab.data.models import Card, Review

logger = logging.getLogger(__name__)

# Helpers

def make_card(word="both", **fields):
    return Card.objects.create(word=word, sentence=f"They {word} like cake after lunch.", **fields)


def post_review(client, card_id, result):
    url = reverse("review")
    payload = {"card_id": str(card_id), "result": result}
    resp = client.post(url, data=payload, content_type="application/json")
    logger.info("POST /reviews result=%s → status=%s body=%s", result, resp.status_code, resp.json())
    return resp


def get_study(client, **params):
    resp = client.get(reverse("study"), params)
    logger.info("GET /study %s → status=%s card_count=%s", params, resp.status_code, len(resp.json()["cards"]))
    return resp


# Reviews

@pytest.mark.django_db
def test_correct_review_schedules_one_day_out(client):
    card = make_card()
    before = timezone.now()

    resp = post_review(client, card.pk, "correct")
    data = resp.json()

    assert resp.status_code == 201
    assert data["ok"] is True
    assert data["streak"] == 1
    next_due = datetime.fromisoformat(data["next_due_at"])
    assert before + timedelta(days=1) <= next_due <= timezone.now() + timedelta(days=1)
    assert data["next_due_kst"].endswith("+09:00")


@pytest.mark.django_db
def test_wrong_review_resets_streak(client):
    card = make_card(streak=4, last_result="CORRECT")

    data = post_review(client, card.pk, "wrong").json()

    assert data["streak"] == 0
    card.refresh_from_db()
    assert (card.streak, card.last_result) == (0, "WRONG")


@pytest.mark.django_db
def test_invalid_result_returns_400_without_side_effects(client):
    card = make_card()

    resp = post_review(client, card.pk, "easy")

    assert resp.status_code == 400
    assert "error" in resp.json()
    assert Review.objects.count() == 0


@pytest.mark.django_db
def test_missing_fields_return_400(client):
    resp = client.post(reverse("review"), data={"result": "correct"}, content_type="application/json")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_unknown_card_returns_404(client):
    resp = post_review(client, uuid.uuid4(), "hold")

    assert resp.status_code == 404
    assert resp.json() == {"error": "card not found"}


@pytest.mark.django_db
def test_recent_review_summaries(client):
    card = make_card()
    for result in ("correct", "hold", "wrong", "wrong"):
        post_review(client, card.pk, result)

    resp = client.get(reverse("reviews-recent"), {"days": "abc"})
    summaries = resp.json()["summaries"]

    assert resp.status_code == 200
    assert len(summaries) == 1
    assert summaries[0]["date"] == timezone.now().date().isoformat()
    assert {k: summaries[0][k] for k in ("total", "correct", "hold", "wrong")} == {
        "total": 4, "correct": 1, "hold": 1, "wrong": 2,
    }


# Study queue

@pytest.mark.django_db
def test_today_queue_puts_reviews_before_new_cards(client):
    now = timezone.now()
    reviewed = make_card("reviewed", next_due_at=now - timedelta(hours=1), last_result="CORRECT", streak=1)
    Review.objects.create(card=reviewed, result="CORRECT", next_due_at=reviewed.next_due_at, streak=1)
    for i in range(3):
        make_card(f"new{i}", created_at=now - timedelta(days=10 - i), next_due_at=now - timedelta(days=1))

    cards = get_study(client, limit=3, newLimit=5).json()["cards"]

    assert [c["word"] for c in cards] == ["reviewed", "new0", "new1"]
    assert cards[0]["last_result"] == "correct"
    assert cards[1]["last_result"] is None


@pytest.mark.django_db
def test_retry_mode_lists_struggling_cards(client):
    make_card("fine", last_result="CORRECT")
    make_card("shaky", last_result="HOLD", next_due_at=timezone.now() + timedelta(hours=12))

    cards = get_study(client, mode="retry").json()["cards"]

    assert [c["word"] for c in cards] == ["shaky"]


@pytest.mark.django_db
def test_ids_select_cards_in_order(client):
    a, b = make_card("a"), make_card("b")
    ids = ",".join([str(b.pk), str(uuid.uuid4()), str(a.pk)])

    cards = get_study(client, ids=ids, mode="retry").json()["cards"]

    assert [c["word"] for c in cards] == ["b", "a"]


@pytest.mark.django_db
def test_limit_is_clamped(client):
    for i in range(3):
        make_card(f"n{i}", next_due_at=timezone.now() - timedelta(minutes=1))

    assert len(get_study(client, limit=0, newLimit=10).json()["cards"]) == 1
    assert len(get_study(client, limit="x", newLimit=10).json()["cards"]) == 3


@pytest.mark.django_db
def test_empty_queue_is_ok(client):
    resp = get_study(client)
    assert resp.status_code == 200
    assert resp.json() == {"cards": []}


# Cards

@pytest.mark.django_db
class TestCardEndpoints:
    def test_create_trims_and_nulls_blank_optionals(self, client):
        resp = client.post(
            reverse("cards"),
            data={"word": "  borrow ", "sentence": "Can I borrow your pen today?", "meaning_kr": "  "},
            content_type="application/json",
        )
        card = resp.json()["card"]

        assert resp.status_code == 201
        assert card["word"] == "borrow"
        assert card["meaning_kr"] is None
        assert card["streak"] == 0
        assert card["last_result"] is None
        assert Card.objects.get(pk=card["id"]).next_due_at <= timezone.now()

    def test_create_requires_word_and_sentence(self, client):
        resp = client.post(reverse("cards"), data={"word": "x"}, content_type="application/json")
        assert resp.status_code == 400

    def test_list_filters_by_query_newest_first(self, client):
        now = timezone.now()
        make_card("borrow", created_at=now - timedelta(days=2))
        make_card("tomorrow", created_at=now - timedelta(days=1))
        make_card("both")

        cards = client.get(reverse("cards"), {"query": "rrow"}).json()["cards"]

        assert [c["word"] for c in cards] == ["tomorrow", "borrow"]

    def test_patch_edits_content_not_schedule(self, client):
        card = make_card(streak=3, last_result="CORRECT")
        url = reverse("card-detail", kwargs={"card_id": str(card.pk)})

        resp = client.patch(url, data={"word": "both", "sentence": "We both agree."},
                            content_type="application/json")

        assert resp.status_code == 200
        card.refresh_from_db()
        assert (card.sentence, card.streak, card.last_result) == ("We both agree.", 3, "CORRECT")

    def test_get_and_delete(self, client):
        card = make_card()
        Review.objects.create(card=card, result="WRONG", next_due_at=card.next_due_at, streak=0)
        url = reverse("card-detail", kwargs={"card_id": str(card.pk)})

        assert client.get(url).json()["card"]["id"] == str(card.pk)
        assert client.delete(url).json() == {"ok": True}
        assert client.get(url).status_code == 404
        assert Review.objects.count() == 0

    def test_unknown_card_is_404(self, client):
        url = reverse("card-detail", kwargs={"card_id": "missing"})
        assert client.get(url).status_code == 404
        assert client.delete(url).status_code == 404
