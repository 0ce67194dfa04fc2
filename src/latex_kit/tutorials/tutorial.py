from dataclasses import dataclass, field
from pathlib import Path

from latex_kit.parsers.models import ContentBlock


@dataclass(frozen=True)
class Tutorial:
    """A parsed `.tex` tutorial addressed by its slug (the file stem).

    Every metadata field is filled, with placeholders where the source had none.
    """

    slug: str
    title: str
    description: str
    category: str
    date: str
    read_time: str
    content: list[ContentBlock]
    file_path: Path
    tags: list[str] = field(default_factory=list)

    @property
    def url(self) -> str:
        return f"/tutorials/{self.slug}"
