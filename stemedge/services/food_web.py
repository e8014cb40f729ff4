"""
Food-web builder: click a prey, then click what eats it.
"""
from dataclasses import dataclass
from typing import Literal
from stemedge.models.schemas import Organism, TrophicEdge, TrophicType
import logging

logger = logging.getLogger(__name__)

ORGANISMS: tuple[Organism, ...] = (
    Organism(id="grass", name="Grass", trophic_type="producer", x=50, y=350),
    Organism(id="rabbit", name="Rabbit", trophic_type="herbivore", x=200, y=250),
    Organism(id="fox", name="Fox", trophic_type="carnivore", x=350, y=150),
    Organism(id="hawk", name="Hawk", trophic_type="carnivore", x=150, y=50),
    Organism(id="fungi", name="Fungi", trophic_type="decomposer", x=300, y=350),
)

# prey type -> predator types that may eat it (decomposers eat everything)
ALLOWED_PREDATORS: dict[TrophicType, frozenset[TrophicType]] = {
    "producer": frozenset({"herbivore"}),
    "herbivore": frozenset({"carnivore"}),
    "carnivore": frozenset({"carnivore"}),
    "decomposer": frozenset(),
}

Outcome = Literal["selected", "cancelled", "created", "duplicate", "rejected"]


class UnknownOrganismError(KeyError):
    """Raised for a click on an organism id that is not in the catalog."""


@dataclass
class ClickResult:
    outcome: Outcome
    message: str | None


def is_valid_link(prey: Organism, predator: Organism) -> bool:
    if predator.trophic_type == "decomposer":
        return True
    return predator.trophic_type in ALLOWED_PREDATORS[prey.trophic_type]


class FoodWebBuilder:
    def __init__(self, organisms: tuple[Organism, ...] = ORGANISMS):
        self.organisms = {o.id: o for o in organisms}
        self.edges: list[TrophicEdge] = []
        self.selected_id: str | None = None
        self.message: str | None = None

    def click(self, organism_id: str) -> ClickResult:
        clicked = self._lookup(organism_id)

        if self.selected_id is None:
            self.selected_id = clicked.id
            return self._result("selected", f"Select who eats the {clicked.name}...")

        prey = self.organisms[self.selected_id]
        self.selected_id = None

        if prey.id == clicked.id:
            return self._result("cancelled", None)

        edge = TrophicEdge(from_id=prey.id, to_id=clicked.id)
        if edge in self.edges:
            return self._result("duplicate", "Connection already exists.")

        if not is_valid_link(prey, clicked):
            logger.debug(f"Rejected link {prey.id} -> {clicked.id}")
            return self._result(
                "rejected",
                f"Incorrect link. A {clicked.name} generally doesn't eat {prey.name}.",
            )

        self.edges.append(edge)
        logger.info(f"Food web link added: {prey.id} -> {clicked.id}")
        return self._result("created", "Correct! Energy flows up.")

    def reset(self):
        self.edges.clear()
        self.selected_id = None
        self.message = None

    def _lookup(self, organism_id: str) -> Organism:
        try:
            return self.organisms[organism_id]
        except KeyError:
            raise UnknownOrganismError(f"Unknown organism: {organism_id}") from None

    def _result(self, outcome: Outcome, message: str | None) -> ClickResult:
        self.message = message
        return ClickResult(outcome=outcome, message=message)
