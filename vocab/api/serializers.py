from rest_framework import serializers

from ..data.models import Card

OPTIONAL_CONTENT_FIELDS = ("meaning_kr", "pron_word_kr", "sentence_kr", "pron_sentence_kr")


def clamped_int(raw, default, low, high):
    """Parse a query parameter, falling back to `default` when it is not a number."""
    try:
        value = int(raw) if raw not in (None, "") else default
    except (TypeError, ValueError):
        value = default
    return min(max(value, low), high)


class ReviewInSerializer(serializers.Serializer):
    card_id = serializers.CharField(max_length=64)
    result = serializers.CharField(max_length=16)  # validated by ReviewResult.parse


class CardInSerializer(serializers.Serializer):
    word = serializers.CharField(max_length=200)
    sentence = serializers.CharField()
    meaning_kr = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    pron_word_kr = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    sentence_kr = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    pron_sentence_kr = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        # Blank optional fields are stored as null
        for field in OPTIONAL_CONTENT_FIELDS:
            attrs[field] = attrs.get(field) or None
        return attrs


class CardSerializer(serializers.ModelSerializer):
    last_result = serializers.SerializerMethodField()

    class Meta:
        model = Card
        fields = [
            "id",
            "word",
            "sentence",
            *OPTIONAL_CONTENT_FIELDS,
            "last_result",
            "next_due_at",
            "streak",
            "created_at",
            "updated_at",
        ]

    def get_last_result(self, card):
        return card.last_result.lower() if card.last_result else None
