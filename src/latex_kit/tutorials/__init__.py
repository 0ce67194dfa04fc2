from .tutorial import Tutorial
from .tutorial_store import TutorialStore, parse_tutorial_date

__all__ = [
    "Tutorial",
    "TutorialStore",
    "parse_tutorial_date",
]
