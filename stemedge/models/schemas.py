from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional


SimType = Literal["web_builder", "ecosystem_sim", "carbon_cycle", "concept"]
TrophicType = Literal["producer", "herbivore", "carnivore", "decomposer"]


class Slide(BaseModel):
    """One page of lesson content."""
    model_config = ConfigDict(frozen=True)

    index: int
    title: str
    body: str
    focus: str | None = None
    interactive: bool = False
    sim_type: SimType | None = None


class ProgressRecord(BaseModel):
    """Durable progress record, stored as camelCase JSON."""
    model_config = ConfigDict(populate_by_name=True)

    current_index: int = Field(0, alias="currentIndex")
    completed: list[int] = []
    notes: list[str] = []


class PopulationSample(BaseModel):
    """A single point of the predator-prey history."""
    model_config = ConfigDict(frozen=True)

    tick: int = Field(ge=0)
    prey: float = Field(ge=0)
    predator: float = Field(ge=0)


class Organism(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    trophic_type: TrophicType
    x: int
    y: int


class TrophicEdge(BaseModel):
    """Energy flows from prey (from_id) to predator (to_id)."""
    model_config = ConfigDict(frozen=True)

    from_id: str
    to_id: str


class Reservoir(BaseModel):
    id: str
    name: str
    quantity: float
    x: int
    y: int


class Question(BaseModel):
    id: str
    text: str
    type: Literal["multiple_choice", "true_false", "short_answer"] = "multiple_choice"
    options: list[str] = Field(default_factory=list)
    correct_answer: str
    explanation: str
    difficulty: int = Field(ge=1, le=5)
    misconception: str | None = None


class UserProfile(BaseModel):
    """Profile row from the auth backend."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    role: Literal["student", "teacher", "admin"] = "student"
    is_approved: bool = Field(False, alias="isApproved")


# ---- API request/response models ----

class LessonSummary(BaseModel):
    key: str
    title: str
    total_slides: int


class OpenViewResponse(BaseModel):
    view_id: str
    lesson_key: str


class ProgressResponse(BaseModel):
    """Response model for lesson navigation."""
    view_id: str
    lesson_key: str
    slide: Slide
    current_index: int
    total_slides: int
    completed: list[int]
    progress_percent: int
    notes: list[str]


class GoToRequest(BaseModel):
    index: int


class NoteRequest(BaseModel):
    text: str = Field(min_length=1)


class PopulationStateResponse(BaseModel):
    running: bool
    history: list[PopulationSample]


class OrganismClickRequest(BaseModel):
    organism_id: str


class FoodWebStateResponse(BaseModel):
    organisms: list[Organism]
    edges: list[TrophicEdge]
    selected_id: str | None
    message: str | None


class FoodWebClickResponse(FoodWebStateResponse):
    outcome: Literal["selected", "cancelled", "created", "duplicate", "rejected"]


class TransferRequest(BaseModel):
    action: str


class CarbonStateResponse(BaseModel):
    reservoirs: list[Reservoir]
    total: float
    active_action: str | None


class TransferResponse(CarbonStateResponse):
    accepted: bool


class QuizTopic(BaseModel):
    id: str
    name: str
    difficulties: list[str]
    question_count: int


class QuizSelectRequest(BaseModel):
    topic_id: str
    limit: int | Literal["All"] = 10
    difficulty: Optional[str] = None


class TutorRequest(BaseModel):
    """Request model for the tutor endpoint."""
    prompt: str
    topic: Optional[str] = None


class TutorReply(BaseModel):
    text: str | None = None
    error: str | None = None


class HintRequest(BaseModel):
    question: str
    topic: str


class HintResponse(BaseModel):
    hint: str | None


class LoginRequest(BaseModel):
    email: str
    password: str


class AuthResult(BaseModel):
    user: UserProfile | None = None
    access_token: str | None = None
    error: str | None = None


class GreetingResponse(BaseModel):
    greeting: str
