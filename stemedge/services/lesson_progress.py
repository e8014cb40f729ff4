from datetime import datetime, timezone
from typing import Sequence
from stemedge.models.schemas import ProgressRecord, Slide
from stemedge.services.progress_store import ProgressStore, ProgressStoreError
import logging

logger = logging.getLogger(__name__)


class LessonProgressTracker:
    """
    Slide position, completed slides and notes for one lesson.

    Every mutation is written through to the store before returning. A failed
    write is logged and otherwise ignored: the in-memory state stays the
    source of truth for the rest of the session.
    """

    def __init__(self, lesson_key: str, slides: Sequence[Slide], store: ProgressStore):
        if not slides:
            raise ValueError(f"Lesson '{lesson_key}' has no slides")

        self.lesson_key = lesson_key
        self.slides = tuple(slides)
        self.store = store

        self.current_index = 0
        self.completed: set[int] = set()
        self.notes: list[str] = []

        record = store.load(lesson_key)
        if record is None:
            logger.info(f"Starting fresh progress for lesson '{lesson_key}'")
            return

        self.current_index = self._clamp(record.current_index)
        self.completed = {i for i in record.completed if 0 <= i < len(self.slides)}
        self.notes = list(record.notes)
        logger.info(f"Resumed lesson '{lesson_key}' at slide {self.current_index}")

    @property
    def total_slides(self) -> int:
        return len(self.slides)

    @property
    def current_slide(self) -> Slide:
        return self.slides[self.current_index]

    @property
    def progress_percent(self) -> int:
        return round(len(self.completed) / self.total_slides * 100)

    def next(self) -> Slide:
        return self.go_to(self.current_index + 1)

    def prev(self) -> Slide:
        return self.go_to(self.current_index - 1)

    def go_to(self, index: int) -> Slide:
        """Jump to a slide; slides passed over when moving forward count as completed."""
        old_index = self.current_index
        new_index = self._clamp(index)

        if new_index > old_index:
            self.completed.update(range(old_index, new_index))

        self.current_index = new_index
        self._persist()
        return self.current_slide

    def save_note(self, text: str) -> str:
        timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        note = f"{timestamp} {text}"
        self.notes.append(note)
        self._persist()
        return note

    def to_record(self) -> ProgressRecord:
        return ProgressRecord(
            current_index=self.current_index,
            completed=sorted(self.completed),
            notes=list(self.notes),
        )

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self.slides) - 1))

    def _persist(self):
        try:
            self.store.save(self.lesson_key, self.to_record())
        except ProgressStoreError as e:
            logger.error(f"Keeping in-memory progress for '{self.lesson_key}': {e}")
