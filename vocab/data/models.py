import uuid

from django.db import models
from django.utils import timezone

from ..domain.enums import RESULT_CHOICES


class Card(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    word = models.CharField(max_length=200)
    sentence = models.TextField()
    meaning_kr = models.CharField(max_length=200, null=True, blank=True)
    pron_word_kr = models.CharField(max_length=200, null=True, blank=True)
    sentence_kr = models.TextField(null=True, blank=True)
    pron_sentence_kr = models.TextField(null=True, blank=True)

    streak = models.PositiveIntegerField(default=0)
    next_due_at = models.DateTimeField(default=timezone.now)  # UTC
    last_result = models.CharField(max_length=7, choices=RESULT_CHOICES, null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "vocab"
        indexes = [
            models.Index(fields=["next_due_at", "created_at"], name="card_due_idx"),
            models.Index(fields=["last_result", "updated_at"], name="card_retry_idx"),
            models.Index(fields=["created_at"], name="card_created_idx"),
        ]

    def __str__(self):
        return self.word


class Review(models.Model):
    """Append-only snapshot of one study event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    card = models.ForeignKey(Card, on_delete=models.CASCADE, related_name="reviews")
    result = models.CharField(max_length=7, choices=RESULT_CHOICES)
    reviewed_at = models.DateTimeField(default=timezone.now)
    next_due_at = models.DateTimeField()
    streak = models.PositiveIntegerField()

    class Meta:
        app_label = "vocab"
        indexes = [
            models.Index(fields=["card", "reviewed_at"], name="review_card_idx"),
            models.Index(fields=["reviewed_at"], name="review_reviewed_at_idx"),
        ]
