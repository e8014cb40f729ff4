"""
Practice quiz topics and their question bank.
"""
from stemedge.models.schemas import Question

# Topics offered in the quiz launcher, with the difficulties each one exposes
QUIZ_TOPICS = [
    {"id": "cell_biology", "name": "Cell Biology", "difficulties": ["Beginner", "Intermediate", "Advanced"]},
    {"id": "plant_nutrition", "name": "Plant Nutrition", "difficulties": ["Beginner", "Intermediate"]},
    {"id": "enzymes", "name": "Enzymes", "difficulties": ["Intermediate", "Advanced"]},
    {"id": "inheritance", "name": "Genetics", "difficulties": ["Advanced"]},
    {"id": "ecology", "name": "Ecology", "difficulties": ["Beginner", "Intermediate"]},
]

QUESTION_BANK: dict[str, list[Question]] = {
    "cell_biology": [
        Question(
            id="cell_001",
            text="Which structure controls the passage of substances into and out of a typical animal cell?",
            options=["Cell wall", "Cell membrane", "Nuclear membrane", "Cytoplasm"],
            correct_answer="Cell membrane",
            explanation="The cell membrane is partially permeable and controls what enters and leaves the cell. Cell wall is found in plant cells only.",
            difficulty=2,
            misconception="Students often confuse cell membrane with cell wall.",
        ),
        Question(
            id="cell_002",
            text="What is the primary function of ribosomes?",
            options=["Photosynthesis", "Protein synthesis", "Respiration", "Digestion"],
            correct_answer="Protein synthesis",
            explanation="Ribosomes are the site of protein synthesis in the cell.",
            difficulty=2,
            misconception="Confusing ribosomes with mitochondria (respiration).",
        ),
        Question(
            id="cell_003",
            text="Which feature is found in plant cells but NOT in animal cells?",
            options=["Mitochondria", "Nucleus", "Large central vacuole", "Cell membrane"],
            correct_answer="Large central vacuole",
            explanation="Plant cells typically have a large central vacuole, cell wall, and chloroplasts, which animal cells lack.",
            difficulty=2,
            misconception="Thinking animal cells have cell walls.",
        ),
        Question(
            id="cell_004",
            text="Calculate the magnification if an image size is 10mm and the actual size is 0.1mm.",
            options=["×10", "×100", "×1000", "×0.01"],
            correct_answer="×100",
            explanation="Magnification = Image Size / Actual Size. 10mm / 0.1mm = 100.",
            difficulty=3,
            misconception="Dividing actual by image size.",
        ),
        Question(
            id="cell_005",
            text="Which cell is adapted for transmitting nerve impulses?",
            options=["Red blood cell", "Ciliated cell", "Neuron", "Root hair cell"],
            correct_answer="Neuron",
            explanation="Neurons are elongated and branched to transmit electrical impulses rapidly.",
            difficulty=2,
        ),
        Question(
            id="cell_006",
            text="Red blood cells in mammals have no nucleus.",
            type="true_false",
            options=["True", "False"],
            correct_answer="True",
            explanation="Mammalian red blood cells expel their nucleus to make more room for haemoglobin.",
            difficulty=4,
        ),
    ],
    "plant_nutrition": [
        Question(
            id="plant_001",
            text="What is the correct chemical equation for photosynthesis?",
            options=[
                "6CO2 + 6H2O → C6H12O6 + 6O2",
                "C6H12O6 + 6O2 → 6CO2 + 6H2O",
                "CO2 + H2O → CH2O + O2",
                "6O2 + 6H2O → C6H12O6 + 6CO2",
            ],
            correct_answer="6CO2 + 6H2O → C6H12O6 + 6O2",
            explanation="Carbon dioxide and water produce glucose and oxygen using light energy.",
            difficulty=3,
            misconception="Confusing with respiration (the reverse).",
        ),
        Question(
            id="plant_002",
            text="Magnesium is required in plants for the formation of:",
            options=["Cell walls", "Chlorophyll", "Amino acids", "Starch"],
            correct_answer="Chlorophyll",
            explanation="Magnesium ions are the central component of the chlorophyll molecule.",
            difficulty=3,
        ),
    ],
    "enzymes": [
        Question(
            id="enzyme_001",
            text="A student investigates the effect of temperature on an enzyme-controlled reaction. At 60°C, no product forms. What is the most likely explanation?",
            options=[
                "The enzyme has been used up",
                "The substrate has denatured",
                "The enzyme has denatured",
                "The reaction has reached equilibrium",
            ],
            correct_answer="The enzyme has denatured",
            explanation="Enzymes are proteins that denature at high temperatures. The active site changes shape.",
            difficulty=3,
            misconception="Enzymes are 'used up' or substrate denatures.",
        ),
        Question(
            id="enzyme_002",
            text="Enzymes function as biological:",
            options=["Substrates", "Products", "Catalysts", "Hormones"],
            correct_answer="Catalysts",
            explanation="Enzymes speed up metabolic reactions without being changed themselves.",
            difficulty=1,
        ),
    ],
    "inheritance": [
        Question(
            id="inheritance_001",
            text="In pea plants, tall stem (T) is dominant over short stem (t). A cross between two heterozygous tall plants (Tt × Tt) produces 400 offspring. Approximately how many would be expected to be short?",
            options=["0", "100", "200", "300"],
            correct_answer="100",
            explanation="The phenotypic ratio is 3 Tall : 1 Short. 1/4 of 400 is 100.",
            difficulty=4,
        ),
        Question(
            id="inheritance_002",
            text="Which term describes an organism with two identical alleles for a particular gene?",
            options=["Heterozygous", "Homozygous", "Dominant", "Recessive"],
            correct_answer="Homozygous",
            explanation="Homozygous means having identical alleles (e.g., TT or tt).",
            difficulty=2,
        ),
    ],
    "ecology": [
        Question(
            id="ecology_001",
            text="In a food chain, what is the role of the organism at the first trophic level?",
            options=["Primary consumer", "Secondary consumer", "Producer", "Decomposer"],
            correct_answer="Producer",
            explanation="Producers (plants/algae) start the food chain by synthesizing energy.",
            difficulty=1,
            misconception="Starting with consumers.",
        ),
        Question(
            id="ecology_002",
            text="Why is energy lost between trophic levels?",
            options=["Photosynthesis", "Respiration and heat loss", "Reproduction", "Growth"],
            correct_answer="Respiration and heat loss",
            explanation="Only about 10% of energy is passed on; the rest is lost mainly as heat from respiration and undigested waste.",
            difficulty=3,
        ),
    ],
}
