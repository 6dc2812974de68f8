from .data.models import Card, Review  # noqa: F401
