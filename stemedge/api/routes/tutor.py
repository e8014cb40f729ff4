from fastapi import APIRouter
from stemedge.models.schemas import HintRequest, HintResponse, TutorReply, TutorRequest
from stemedge.services.ai_tutor import get_tutor_service

router = APIRouter()


@router.post("/tutor/chat/{thread_id}", response_model=TutorReply)
async def chat(thread_id: str, request: TutorRequest):
    """
    Ask Sirius a question.

    Args:
        thread_id: Conversation id; follow-up questions on the same thread keep context
        request: The question and, optionally, the topic being studied

    Tutor failures come back in the ``error`` field rather than as an HTTP error,
    so the rest of the page keeps working.
    """
    tutor_service = get_tutor_service()
    return await tutor_service.generate_response(
        prompt=request.prompt,
        topic=request.topic,
        thread_id=thread_id
    )


@router.post("/tutor/hint", response_model=HintResponse)
async def hint(request: HintRequest):
    """Get a hint for a quiz question without the answer."""
    tutor_service = get_tutor_service()
    return HintResponse(hint=await tutor_service.generate_hint(request.question, request.topic))
