"""
Durable lesson progress storage.

One JSON document per lesson key, shaped
``{"currentIndex": int, "completed": [int], "notes": [str]}``.
"""
from pathlib import Path
from pydantic import ValidationError
from stemedge.core.config import get_settings
from stemedge.models.schemas import ProgressRecord
import logging
import re

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"[A-Za-z0-9_\-]+")


class ProgressStoreError(Exception):
    """Raised when a progress record cannot be written."""


class ProgressStore:
    """File-backed progress store keyed by lesson key."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, lesson_key: str) -> Path:
        if not _SAFE_KEY.fullmatch(lesson_key):
            raise ValueError(f"Invalid lesson key: {lesson_key!r}")
        return self.directory / f"stemedge_{lesson_key}_progress.json"

    def load(self, lesson_key: str) -> ProgressRecord | None:
        """Return the stored record, or None if there is none (or it is unreadable)."""
        path = self._path(lesson_key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Could not read progress for '{lesson_key}': {e}")
            return None

        try:
            return ProgressRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding corrupt progress record for '{lesson_key}': {e}")
            return None

    def save(self, lesson_key: str, record: ProgressRecord) -> None:
        path = self._path(lesson_key)
        tmp_path = path.with_suffix(".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(record.model_dump_json(by_alias=True), encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise ProgressStoreError(f"Failed to write progress for '{lesson_key}': {e}") from e


def get_progress_store() -> ProgressStore:
    """Store rooted at the configured progress directory."""
    return ProgressStore(get_settings().PROGRESS_STORE_DIR)
