from fastapi import APIRouter, HTTPException
from stemedge.models.schemas import Question, QuizSelectRequest, QuizTopic
from stemedge.services.quiz import available_topics, select_questions

router = APIRouter()


@router.get("/quiz/topics", response_model=list[QuizTopic])
async def list_topics():
    return available_topics()


@router.post("/quiz/questions", response_model=list[Question])
async def pick_questions(request: QuizSelectRequest):
    """Pick a shuffled set of practice questions for a topic."""
    if isinstance(request.limit, int) and request.limit < 1:
        raise HTTPException(status_code=400, detail="Question count must be at least 1")

    questions = select_questions(request.topic_id, request.limit, request.difficulty)
    if not questions:
        raise HTTPException(status_code=404, detail="No questions found for this topic")
    return questions
