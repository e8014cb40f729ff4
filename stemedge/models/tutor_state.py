from typing import Annotated
from typing_extensions import TypedDict
from langgraph.graph.message import add_messages
from langchain_core.messages import AnyMessage


class TutorState(TypedDict):
    """
    State for the tutor conversation.

    One state per thread; the checkpointer keeps the message history so a
    student can ask follow-up questions.
    """
    # Conversation messages
    messages: Annotated[list[AnyMessage], add_messages]

    # What the student is studying right now, if the UI knows
    topic: str | None
