import logging
from datetime import date, datetime
from pathlib import Path

from latex_kit.observability import names
from latex_kit.observability.base import MetricsHook, NoOpMetricsHook
from latex_kit.parsers.base import DocumentParser
from latex_kit.parsers.latex_parser import LatexParser

from .tutorial import Tutorial

logger = logging.getLogger(__name__)

TUTORIAL_EXTENSION = ".tex"
DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_READ_TIME = "10 min read"
DATE_FORMAT = "%B %d, %Y"

# Tried in order when sorting by date; ISO 8601 is attempted first.
KNOWN_DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%m/%d/%Y", "%B %Y")


def parse_tutorial_date(value: str) -> datetime | None:
    value = value.strip()
    try:
        return datetime.fromisoformat(value).replace(tzinfo=None)
    except ValueError:
        pass
    for fmt in KNOWN_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


class TutorialStore:
    """Reads `.tex` tutorials from a directory and parses them on demand.

    A missing directory is created and reported as empty. A missing tutorial
    is reported as None, not raised.
    """

    def __init__(
        self,
        directory: str | Path,
        parser: DocumentParser | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._directory = Path(directory)
        self._parser = parser or LatexParser(metrics_hook=metrics_hook)
        self.metrics_hook = metrics_hook
        logger.info("Initializing TutorialStore from directory: %s", self._directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, slug: str) -> Path:
        return self._directory / f"{slug}{TUTORIAL_EXTENSION}"

    def list_slugs(self) -> list[str]:
        if not self._directory.is_dir():
            logger.info("Tutorial directory missing, creating: %s", self._directory)
            self._directory.mkdir(parents=True, exist_ok=True)
            return []
        return sorted(p.stem for p in self._directory.glob(f"*{TUTORIAL_EXTENSION}"))

    def get(self, slug: str) -> Tutorial | None:
        file_path = self.path_for(slug)
        if file_path.resolve().parent != self._directory.resolve():
            logger.warning("Tutorial outside store directory: slug=%s", slug)
            self.metrics_hook.increment(names.TUTORIALS_NOT_FOUND_TOTAL)
            return None
        try:
            text = file_path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            logger.warning("Tutorial not found: slug=%s, path=%s", slug, file_path)
            self.metrics_hook.increment(names.TUTORIALS_NOT_FOUND_TOTAL)
            return None
        except OSError:
            logger.error("Error reading tutorial: slug=%s, path=%s", slug, file_path)
            raise

        parsed = self._parser.parse(text)
        self.metrics_hook.increment(names.TUTORIALS_LOADED_TOTAL)
        logger.debug("Loaded tutorial: %s from %s", slug, file_path)

        return Tutorial(
            slug=slug,
            title=parsed.title or slug,
            description=parsed.description or f"A tutorial on {slug}",
            category=parsed.category or DEFAULT_CATEGORY,
            tags=list(parsed.tags),
            date=parsed.date or date.today().strftime(DATE_FORMAT),
            read_time=parsed.read_time or DEFAULT_READ_TIME,
            content=parsed.content,
            file_path=file_path,
        )

    def all(self) -> list[Tutorial]:
        """Every readable tutorial, newest first. Unrecognised dates sort last.

        Entries that cannot be read are logged and skipped; `get` still raises.
        """
        tutorials: list[Tutorial] = []
        for slug in self.list_slugs():
            try:
                tutorial = self.get(slug)
            except OSError:
                logger.warning("Skipping unreadable tutorial: %s", slug)
                continue
            if tutorial is not None:
                tutorials.append(tutorial)

        def sort_key(tutorial: Tutorial) -> tuple[bool, datetime]:
            parsed = parse_tutorial_date(tutorial.date)
            return (parsed is not None, parsed or datetime.min)

        tutorials.sort(key=sort_key, reverse=True)
        logger.info("Loaded %d tutorials", len(tutorials))
        return tutorials
