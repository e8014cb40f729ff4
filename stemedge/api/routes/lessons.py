from fastapi import APIRouter, HTTPException
from stemedge.core.course_config import LESSONS, LESSON_TITLES, get_lesson
from stemedge.models.schemas import (
    GoToRequest, LessonSummary, NoteRequest, OpenViewResponse, ProgressResponse, Slide
)
from stemedge.services.lesson_views import LessonView, get_view_registry
from stemedge.utils.error_messages import format_learner_error
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


def progress_response(view: LessonView) -> ProgressResponse:
    tracker = view.tracker
    return ProgressResponse(
        view_id=view.view_id,
        lesson_key=tracker.lesson_key,
        slide=tracker.current_slide,
        current_index=tracker.current_index,
        total_slides=tracker.total_slides,
        completed=sorted(tracker.completed),
        progress_percent=tracker.progress_percent,
        notes=list(tracker.notes),
    )


def get_view_or_404(view_id: str) -> LessonView:
    try:
        return get_view_registry().get(view_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Lesson view not found")


@router.get("/lessons", response_model=list[LessonSummary])
async def list_lessons():
    """List the available lessons."""
    return [
        LessonSummary(key=key, title=LESSON_TITLES[key], total_slides=len(slides))
        for key, slides in LESSONS.items()
    ]


@router.get("/lessons/{lesson_key}/slides", response_model=list[Slide])
async def get_slides(lesson_key: str):
    """Get all slides for a lesson."""
    try:
        return list(get_lesson(lesson_key))
    except KeyError:
        raise HTTPException(status_code=404, detail="Lesson not found")


@router.post("/lessons/{lesson_key}/views", response_model=ProgressResponse)
async def open_view(lesson_key: str):
    """
    Open a lesson view, resuming any saved progress.

    The returned view_id addresses this view's progress and simulations
    until it is closed.
    """
    try:
        view = get_view_registry().open(lesson_key)
        return progress_response(view)
    except KeyError:
        raise HTTPException(status_code=404, detail="Lesson not found")
    except Exception as e:
        logger.error(f"Failed to open lesson '{lesson_key}': {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=format_learner_error(e))


@router.delete("/views/{view_id}", response_model=OpenViewResponse)
async def close_view(view_id: str):
    """Close a view and stop anything it is running."""
    view = get_view_or_404(view_id)
    get_view_registry().close(view_id)
    return OpenViewResponse(view_id=view_id, lesson_key=view.lesson_key)


@router.get("/views/{view_id}/progress", response_model=ProgressResponse)
async def get_progress(view_id: str):
    return progress_response(get_view_or_404(view_id))


@router.post("/views/{view_id}/navigate/{direction}", response_model=ProgressResponse)
async def navigate(view_id: str, direction: str):
    """
    Move to the next or previous slide.
    Direction should be 'next' or 'previous'.
    """
    if direction not in ["next", "previous"]:
        raise HTTPException(status_code=400, detail="Direction must be 'next' or 'previous'")

    view = get_view_or_404(view_id)
    if direction == "next":
        view.tracker.next()
    else:
        view.tracker.prev()
    return progress_response(view)


@router.post("/views/{view_id}/goto", response_model=ProgressResponse)
async def go_to(view_id: str, request: GoToRequest):
    view = get_view_or_404(view_id)
    view.tracker.go_to(request.index)
    return progress_response(view)


@router.post("/views/{view_id}/notes", response_model=ProgressResponse)
async def save_note(view_id: str, request: NoteRequest):
    view = get_view_or_404(view_id)
    view.tracker.save_note(request.text)
    return progress_response(view)
