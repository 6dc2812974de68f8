class VocabError(Exception):
    """Base class for errors surfaced by the study core."""


class InvalidResult(VocabError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"invalid review result: {value!r} (expected correct|hold|wrong)")


class CardNotFound(VocabError):
    def __init__(self, card_id):
        self.card_id = card_id
        super().__init__(f"card not found: {card_id}")


class PersistenceFailure(VocabError):
    """The review write was rolled back; retrying is safe."""

    def __init__(self, card_id):
        self.card_id = card_id
        super().__init__(f"failed to record review for card {card_id}")
