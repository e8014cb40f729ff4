from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from stemedge.core.config import get_settings
from stemedge.models.schemas import TutorReply
from stemedge.services.tutor_workflow import TutorWorkflow
import logging
import uuid

logger = logging.getLogger(__name__)

def message_text(message) -> str:
    """Plain text of a chat message whose content may be a list of parts."""
    content = message.content
    if isinstance(content, str):
        return content
    return "".join(
        part if isinstance(part, str) else part.get("text", "")
        for part in content
    )


NOT_CONFIGURED_TEXT = "AI tutor is not configured. Please set up your OpenAI API key."

HINT_PROMPT = """You are Sirius, a helpful STEM tutor. Generate a SINGLE helpful hint
for the question without giving away the full answer. The hint should guide thinking."""


class AITutorService:
    """Client for the AI tutor. Failures come back as messages, never exceptions."""

    def __init__(self, model: BaseChatModel | None = None):
        self.workflow: TutorWorkflow | None = None

        if model is not None:
            self.workflow = TutorWorkflow(model=model)
        elif get_settings().OPENAI_API_KEY:
            self.workflow = TutorWorkflow()
        else:
            logger.warning("OPENAI_API_KEY not set. AI tutor will be disabled.")

    @property
    def configured(self) -> bool:
        return self.workflow is not None

    async def generate_response(
        self,
        prompt: str,
        topic: str | None = None,
        thread_id: str | None = None
    ) -> TutorReply:
        """
        Ask the tutor a question.

        Args:
            prompt: The student's question
            topic: What the student is studying, used to focus the answer
            thread_id: Conversation id; replies on the same thread share history

        Returns:
            TutorReply with either ``text`` or ``error`` set
        """
        if not self.configured:
            return TutorReply(text=NOT_CONFIGURED_TEXT, error="Missing API key")

        if not prompt or not prompt.strip():
            return TutorReply(error="Question cannot be empty")

        thread_id = thread_id or uuid.uuid4().hex
        config = {"configurable": {"thread_id": thread_id}}

        try:
            logger.info(f"Tutor request for thread_id: {thread_id}, prompt: {prompt[:50]}")
            result = await self.workflow.graph.ainvoke(
                {"messages": [HumanMessage(content=prompt)], "topic": topic},
                config=config
            )
            return TutorReply(text=message_text(result["messages"][-1]))
        except Exception as e:
            logger.error(f"AI tutor error for thread_id {thread_id}: {str(e)}", exc_info=True)
            return TutorReply(error=str(e) or "Failed to generate response")

    async def generate_hint(self, question: str, topic: str) -> str | None:
        """A single nudge for a quiz question, or None if the tutor can't help."""
        if not self.configured:
            return None

        try:
            response = await self.workflow.model.ainvoke([
                SystemMessage(content=HINT_PROMPT),
                HumanMessage(content=f"Topic: {topic}\nQuestion: {question}\n\nProvide a brief, encouraging hint:")
            ])
            return message_text(response)
        except Exception as e:
            logger.warning(f"Hint generation failed: {e}")
            return None


# Singleton instance
_tutor_service = None


def get_tutor_service() -> AITutorService:
    """Get or create the AI tutor service instance."""
    global _tutor_service
    if _tutor_service is None:
        logger.info("Initializing AI Tutor Service")
        _tutor_service = AITutorService()
    return _tutor_service
