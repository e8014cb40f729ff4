"""
Open lesson views and the widgets each one owns.

Every open view gets its own tracker and its own simulators; nothing is
shared between views. Closing a view stops its simulation timer.
"""
from stemedge.core.course_config import get_lesson
from stemedge.services.carbon_cycle import CarbonCycle
from stemedge.services.food_web import FoodWebBuilder
from stemedge.services.lesson_progress import LessonProgressTracker
from stemedge.services.population import PopulationSimulator
from stemedge.services.progress_store import ProgressStore, get_progress_store
import logging
import uuid

logger = logging.getLogger(__name__)


class LessonView:
    def __init__(self, view_id: str, tracker: LessonProgressTracker):
        self.view_id = view_id
        self.tracker = tracker
        self._population: PopulationSimulator | None = None
        self._food_web: FoodWebBuilder | None = None
        self._carbon: CarbonCycle | None = None
        self.stream_count = 0

    @property
    def lesson_key(self) -> str:
        return self.tracker.lesson_key

    @property
    def population(self) -> PopulationSimulator:
        if self._population is None:
            self._population = PopulationSimulator()
        return self._population

    @property
    def food_web(self) -> FoodWebBuilder:
        if self._food_web is None:
            self._food_web = FoodWebBuilder()
        return self._food_web

    @property
    def carbon(self) -> CarbonCycle:
        if self._carbon is None:
            self._carbon = CarbonCycle()
        return self._carbon

    def attach_stream(self):
        self.stream_count += 1

    def detach_stream(self) -> int:
        """Drop one population stream; returns how many are still attached."""
        self.stream_count = max(self.stream_count - 1, 0)
        return self.stream_count

    def close(self):
        if self._population is not None:
            self._population.close()
        self._population = None
        self._food_web = None
        self._carbon = None


class LessonViewRegistry:
    def __init__(self, store: ProgressStore | None = None):
        self.store = store or get_progress_store()
        self.views: dict[str, LessonView] = {}

    def open(self, lesson_key: str) -> LessonView:
        """Open a view on a lesson. Raises KeyError for an unknown lesson."""
        slides = get_lesson(lesson_key)
        view_id = uuid.uuid4().hex
        view = LessonView(view_id, LessonProgressTracker(lesson_key, slides, self.store))
        self.views[view_id] = view
        logger.info(f"Opened view {view_id} on lesson '{lesson_key}'")
        return view

    def get(self, view_id: str) -> LessonView:
        try:
            return self.views[view_id]
        except KeyError:
            raise KeyError(f"Unknown view: {view_id}") from None

    def close(self, view_id: str) -> bool:
        view = self.views.pop(view_id, None)
        if view is None:
            return False
        view.close()
        logger.info(f"Closed view {view_id}")
        return True

    def close_all(self):
        for view_id in list(self.views):
            self.close(view_id)


# Singleton instance
_registry = None


def get_view_registry() -> LessonViewRegistry:
    global _registry
    if _registry is None:
        _registry = LessonViewRegistry()
    return _registry
