"""
Lesson catalog: the slide decks for each lesson key.
"""
from stemedge.models.schemas import Slide


def _deck(*rows: dict) -> tuple[Slide, ...]:
    return tuple(Slide(index=i, **row) for i, row in enumerate(rows))


# Cell Biology - from the whole cell down to the organelles
CELL_BIOLOGY_SLIDES = _deck(
    {"title": "What is a Cell?", "body": "Cells are the basic building blocks of all living things. Just like bricks make a wall, cells make up tissues, organs, and you!"},
    {"title": "Plant vs. Animal", "body": "Not all cells are the same. Plant cells have extra structures like a hard wall and green chloroplasts. Animal cells are more flexible.", "interactive": True},
    {"title": "The Command Center", "body": "The Nucleus is the boss. It holds the DNA instructions for building and operating the cell.", "focus": "nucleus"},
    {"title": "Powering Up", "body": "Mitochondria take food and turn it into energy (ATP). Active cells like muscles have thousands of them.", "focus": "mitochondria"},
    {"title": "Protein Factories", "body": "Ribosomes build proteins, which do most of the work in the cell. They can float free or stick to the ER.", "focus": "ribosomes"},
    {"title": "The Gatekeeper", "body": "The Cell Membrane controls what enters (like food) and what leaves (like waste).", "focus": "cell_membrane"},
    {"title": "Plant Exclusives", "body": "Plants need to stand tall and make food. The Cell Wall provides armor, and Chloroplasts make solar power.", "focus": "chloroplast"},
    {"title": "Storage Space", "body": "The Large Vacuole in plants stores water. When it's full, the plant stands upright. When empty, the plant wilts.", "focus": "vacuole"},
    {"title": "The Jelly Inside", "body": "Cytoplasm fills the space. It's not just water, it's a busy chemical soup where life happens.", "focus": "cytoplasm"},
    {"title": "Knowledge Check", "body": "Explore the diagram freely. Can you identify the differences between the plant and animal structures?", "interactive": True},
)

# Ecology - interactive slides carry the widget they drive
ECOLOGY_SLIDES = _deck(
    {"title": "What is Ecology?", "body": "Ecology is the study of how living things interact with each other and their home. It's the science of connections.", "sim_type": "concept", "focus": "ecosystem"},
    {"title": "Ecosystems", "body": "An ecosystem includes living (biotic) parts like plants and animals, and non-living (abiotic) parts like sun, water, and soil.", "sim_type": "concept", "focus": "ecosystem"},
    {"title": "Food Chains", "body": "Who eats whom? It always starts with a Producer (plant) using sunlight. Then Consumers eat the producers.", "sim_type": "web_builder", "interactive": True},
    {"title": "Food Webs", "body": "Real life is messy. Animals eat more than one thing. Interconnected food chains form a Food Web.", "sim_type": "web_builder", "interactive": True},
    {"title": "Energy Pyramids", "body": "Only 10% of energy moves up to the next level. The rest is used for movement or lost as heat. That's why there are fewer tigers than rabbits.", "sim_type": "concept", "focus": "energy_flow"},
    {"title": "The Carbon Cycle", "body": "Carbon acts as the building block of life. It moves from air to plants (photosynthesis) and back to air (breathing/burning).", "sim_type": "carbon_cycle", "interactive": True},
    {"title": "The Water Cycle", "body": "Water evaporates, forms clouds, rains down, and flows back to the sea. It's the ultimate recycling system.", "sim_type": "concept"},
    {"title": "Nitrogen Cycle", "body": "Bacteria in the soil turn air nitrogen into fertilizer for plants. Without them, plants couldn't make proteins.", "sim_type": "concept", "focus": "nutrient_cycling"},
    {"title": "Population Growth", "body": "Populations grow fast at first, but slow down when food or space runs out. This limit is called Carrying Capacity.", "sim_type": "ecosystem_sim", "interactive": True},
    {"title": "Predator & Prey", "body": "Foxes eat rabbits. If rabbits die out, foxes starve. If foxes die, rabbits take over. It's a delicate balance.", "sim_type": "ecosystem_sim", "interactive": True, "focus": "population_dynamics"},
    {"title": "Human Impact", "body": "We change ecosystems by burning fossil fuels (climate change) and cutting down forests (habitat loss).", "sim_type": "carbon_cycle", "interactive": True},
    {"title": "Conservation", "body": "Protecting biodiversity ensures ecosystems keep working. We need them for clean air, water, and food.", "sim_type": "concept"},
)

LESSON_TITLES = {
    "cell_biology": "Cell Biology",
    "ecology": "Ecology & Ecosystems",
}

LESSONS = {
    "cell_biology": CELL_BIOLOGY_SLIDES,
    "ecology": ECOLOGY_SLIDES,
}


def get_lesson(lesson_key: str) -> tuple[Slide, ...]:
    """Get the slide deck for a lesson. Raises KeyError for unknown keys."""
    try:
        return LESSONS[lesson_key]
    except KeyError:
        raise KeyError(f"Unknown lesson: {lesson_key}") from None
