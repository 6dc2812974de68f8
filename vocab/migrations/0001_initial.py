import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


RESULT_CHOICES = [("CORRECT", "CORRECT"), ("HOLD", "HOLD"), ("WRONG", "WRONG")]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Card",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("word", models.CharField(max_length=200)),
                ("sentence", models.TextField()),
                ("meaning_kr", models.CharField(blank=True, max_length=200, null=True)),
                ("pron_word_kr", models.CharField(blank=True, max_length=200, null=True)),
                ("sentence_kr", models.TextField(blank=True, null=True)),
                ("pron_sentence_kr", models.TextField(blank=True, null=True)),
                ("streak", models.PositiveIntegerField(default=0)),
                ("next_due_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("last_result", models.CharField(blank=True, choices=RESULT_CHOICES, max_length=7, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["next_due_at", "created_at"], name="card_due_idx"),
                    models.Index(fields=["last_result", "updated_at"], name="card_retry_idx"),
                    models.Index(fields=["created_at"], name="card_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Review",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("result", models.CharField(choices=RESULT_CHOICES, max_length=7)),
                ("reviewed_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("next_due_at", models.DateTimeField()),
                ("streak", models.PositiveIntegerField()),
                (
                    "card",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reviews",
                        to="vocab.card",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["card", "reviewed_at"], name="review_card_idx"),
                    models.Index(fields=["reviewed_at"], name="review_reviewed_at_idx"),
                ],
            },
        ),
    ]
