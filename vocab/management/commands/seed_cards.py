import json
import os
from django.core.management.base import BaseCommand, CommandError
from vocab.data.models import Card


class Command(BaseCommand):
    help = "Load starter vocabulary cards into an empty deck"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="seed_cards.json", help="JSON file name to load cards from"
        )
        parser.add_argument(
            "--reset", action="store_true", help="Delete all cards and reviews before loading"
        )

    def handle(self, *args, **options):
        if options["reset"]:
            Card.objects.all().delete()
            self.stdout.write(self.style.SUCCESS("All existing cards have been deleted"))
        elif Card.objects.exists():
            self.stdout.write("Cards already present, nothing to seed")
            return

        file_name = options["file"]
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)
        try:
            with open(json_file_path, encoding="utf-8") as json_file:
                rows = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Error loading cards: {e}") from e

        cards = [
            Card(
                word=row["word"],
                sentence=row["sentence"],
                meaning_kr=row.get("meaning_kr"),
                pron_word_kr=row.get("pron_word_kr"),
                sentence_kr=row.get("sentence_kr"),
                pron_sentence_kr=row.get("pron_sentence_kr"),
            )
            for row in rows
        ]
        Card.objects.bulk_create(cards)

        self.stdout.write(
            self.style.SUCCESS(f"{len(cards)} cards loaded successfully from {file_name}")
        )
