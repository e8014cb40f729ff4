"""
LangGraph workflow for the Sirius tutor - a single conversational node.
"""
from langgraph.graph import StateGraph, START, END
from langgraph.checkpoint.memory import MemorySaver
from langchain.chat_models import init_chat_model
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import SystemMessage
from stemedge.models.tutor_state import TutorState
from stemedge.core.config import get_settings
import logging

logger = logging.getLogger(__name__)

TUTOR_PERSONA = """You are Sirius, an enthusiastic STEM tutor for students aged 12-18.
Your tone is encouraging, patient, and clear. You explain concepts step-by-step without
being condescending. You encourage curiosity and critical thinking. You adapt your
explanations to the student's level. You NEVER provide answers directly without
guiding the student to discover it themselves. You use analogies from everyday life
to explain complex scientific concepts."""


def build_chat_model() -> BaseChatModel:
    settings = get_settings()
    return init_chat_model(
        f"openai:{settings.OPENAI_MODEL}",
        temperature=settings.TUTOR_TEMPERATURE,
        api_key=settings.OPENAI_API_KEY
    )


class TutorWorkflow:
    """Tutor graph with per-thread memory."""

    def __init__(self, model: BaseChatModel | None = None):
        self.model = model if model is not None else build_chat_model()
        self.memory = MemorySaver()
        self.graph = self._build_graph()

    def _build_graph(self):
        graph_builder = StateGraph(TutorState)

        graph_builder.add_node("tutor", self.tutor_node)
        graph_builder.add_edge(START, "tutor")
        graph_builder.add_edge("tutor", END)

        return graph_builder.compile(checkpointer=self.memory)

    async def tutor_node(self, state: TutorState) -> dict:
        """Answer the latest student message in the context of the conversation."""
        system_prompt = self._build_system_prompt(state.get("topic"))
        messages = [SystemMessage(content=system_prompt)] + state.get("messages", [])

        response = await self.model.ainvoke(messages)
        return {"messages": [response]}

    def _build_system_prompt(self, topic: str | None) -> str:
        if not topic:
            return TUTOR_PERSONA
        return (
            f"{TUTOR_PERSONA}\n\nThe student is currently studying {topic}. "
            "Remember to be encouraging and age-appropriate."
        )
