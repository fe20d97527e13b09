"""
Static lexicon of coaching-model definitions.

The definitions and the pillar bonus table are content, loaded once at
import and never mutated. Changing a trigger here changes which model
users get, so edits should be reviewed like code.
"""

from collections.abc import Mapping
from types import MappingProxyType

from .models import CoachingModel, ModelDefinition


class UnknownModelReference(LookupError):
    """Raised when something that is not a CoachingModel reaches the lexicon."""
    pass


# ---------------------------------------------------------------------------
# Model Definitions
# ---------------------------------------------------------------------------

_DEFINITIONS: tuple[ModelDefinition, ...] = (
    ModelDefinition(
        id=CoachingModel.NEUROPLASTIC,
        display_name="Neuroplastisk Metod",
        description="Fokuserar på hjärnans förmåga att förändras genom repetition och nya vanor",
        triggers=frozenset({
            "vana", "habit", "sluta", "quit", "beroende", "addiction", "routine", "rutin",
            "snusa", "röka", "dricka", "träna", "motion", "sova", "äta", "diet",
        }),
        approach="Gradvis förändring genom små, konsistenta steg som bygger nya neurala banor",
        focus_areas=("Vanor", "Beteendeförändring", "Repetition", "Konsistens"),
        methodologies=("21-dagars regel", "Micro-habits", "Habit stacking", "Environmental design"),
        expected_outcomes=(
            "Bestående beteendeförändring",
            "Automatiska nya mönster",
            "Ökad självkontroll",
        ),
    ),
    ModelDefinition(
        id=CoachingModel.WHEEL_OF_LIFE,
        display_name="Livets Hjul",
        description="Holistisk approach för att skapa balans mellan olika livsområden",
        triggers=frozenset({
            "balans", "balance", "liv", "life", "områden", "helhetsvy", "holistic",
            "work-life", "välmående", "wellbeing", "harmoni", "jämvikt",
        }),
        approach="Kartlägger och balanserar alla viktiga livsområden för optimal livstillfredsställelse",
        focus_areas=("Karriär", "Hälsa", "Relationer", "Personlig utveckling", "Ekonomi", "Rekreation"),
        methodologies=("Livsområdesanalys", "Prioritetsmatris", "Balansplanering", "Helhetsperspektiv"),
        expected_outcomes=("Ökad livstillfredsställelse", "Bättre prioritering", "Harmoniskt liv"),
    ),
    ModelDefinition(
        id=CoachingModel.COGNITIVE_BEHAVIORAL,
        display_name="Kognitiv Beteendeterapi (KBT)",
        description="Fokuserar på sambandet mellan tankar, känslor och beteenden",
        triggers=frozenset({
            "tankar", "thoughts", "känslor", "emotions", "oro", "anxiety", "stress",
            "negativ", "negative", "självkritik", "perfectionism", "kbt",
        }),
        approach="Identifierar och förändrar dysfunktionella tankemönster och beteenden",
        focus_areas=("Tankemönster", "Känsloreglering", "Problemlösning", "Coping-strategier"),
        methodologies=("Tankeregistrering", "Omstrukturering", "Exponering", "Mindfulness"),
        expected_outcomes=("Förbättrad känsloreglering", "Mindre oro och stress", "Ökad självkännedom"),
    ),
    ModelDefinition(
        id=CoachingModel.SOLUTION_FOCUSED,
        display_name="Lösningsfokuserad Coaching",
        description="Fokuserar på lösningar och resurser snarare än problem",
        triggers=frozenset({
            "lösning", "solution", "framtid", "future", "mål", "goal", "vision",
            "möjligheter", "opportunities", "potential", "framgång",
        }),
        approach="Bygger på klientens styrkor och tidigare framgångar för att skapa önskad förändring",
        focus_areas=("Målsättning", "Resursmobilisering", "Framtidsfokus", "Styrkebaserat"),
        methodologies=("Miracle question", "Scaling questions", "Exception finding", "Goal setting"),
        expected_outcomes=("Tydliga mål", "Ökat självförtroende", "Snabbare resultat"),
    ),
    ModelDefinition(
        id=CoachingModel.STRENGTHS_BASED,
        display_name="Styrkebaserad Coaching",
        description="Bygger på och utvecklar naturliga talanger och styrkor",
        triggers=frozenset({
            "styrkor", "strengths", "talang", "talent", "begåvning", "potential",
            "naturlig", "bra på", "excellent", "kompetens", "skicklighet",
        }),
        approach="Identifierar och maximerar användning av personliga styrkor och talanger",
        focus_areas=("Talangidentifiering", "Styrkeutveckling", "Prestationsoptimering", "Självkännedom"),
        methodologies=("Styrkeanalys", "StrengthsFinder", "Talangutveckling", "Performance coaching"),
        expected_outcomes=("Maximerad potential", "Ökad prestation", "Större arbetsglädje"),
    ),
    ModelDefinition(
        id=CoachingModel.MINDFULNESS,
        display_name="Mindfulness-baserad Coaching",
        description="Fokuserar på närvarande medvetenhet och acceptans",
        triggers=frozenset({
            "mindfulness", "meditation", "närvarande", "present", "medvetenhet",
            "awareness", "acceptans", "acceptance", "stillhet", "lugn", "stress",
        }),
        approach="Utvecklar närvarande medvetenhet och acceptans för att hantera utmaningar",
        focus_areas=("Medvetenhet", "Acceptans", "Stresshantering", "Emotionell intelligens"),
        methodologies=(
            "Mindfulness-meditation",
            "Body scanning",
            "Breathing exercises",
            "Present moment awareness",
        ),
        expected_outcomes=("Minskad stress", "Ökad emotionell stabilitet", "Bättre fokus"),
    ),
    ModelDefinition(
        id=CoachingModel.ADAPTIVE_AI,
        display_name="Adaptiv AI-coaching",
        description="AI väljer bästa approach baserat på kontext och behov",
        triggers=frozenset({
            "osäker", "uncertain", "komplex", "complex", "olika", "multiple",
            "blandad", "mixed", "allmän", "general", "bred", "wide",
        }),
        approach="Kombinerar flera coachingmetoder baserat på specifik situation och behov",
        focus_areas=("Kontextanpassning", "Metodintegration", "Personalisering", "Flexibilitet"),
        methodologies=("AI-analys", "Multi-modal coaching", "Adaptive techniques", "Personalized approach"),
        expected_outcomes=("Optimal anpassning", "Flexibel coaching", "Personlig utveckling"),
    ),
)

MODEL_DEFINITIONS: Mapping[CoachingModel, ModelDefinition] = MappingProxyType(
    {definition.id: definition for definition in _DEFINITIONS}
)


# ---------------------------------------------------------------------------
# Pillar Bonuses
# ---------------------------------------------------------------------------

# Added on top of trigger scores when the caller knows which pillar
# the user is working in.
PILLAR_BONUSES: Mapping[str, Mapping[CoachingModel, float]] = MappingProxyType({
    "self_care": MappingProxyType({
        CoachingModel.NEUROPLASTIC: 0.5,
        CoachingModel.MINDFULNESS: 0.5,
    }),
    "skills": MappingProxyType({
        CoachingModel.STRENGTHS_BASED: 0.5,
        CoachingModel.SOLUTION_FOCUSED: 0.3,
    }),
    "talent": MappingProxyType({
        CoachingModel.STRENGTHS_BASED: 0.8,
    }),
    "brand": MappingProxyType({
        CoachingModel.SOLUTION_FOCUSED: 0.5,
        CoachingModel.STRENGTHS_BASED: 0.3,
    }),
    "economy": MappingProxyType({
        CoachingModel.SOLUTION_FOCUSED: 0.5,
        CoachingModel.COGNITIVE_BEHAVIORAL: 0.3,
    }),
    "open_track": MappingProxyType({
        CoachingModel.WHEEL_OF_LIFE: 0.5,
        CoachingModel.ADAPTIVE_AI: 0.3,
    }),
})

_NO_BONUS: Mapping[CoachingModel, float] = MappingProxyType({})


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def definition_of(model: CoachingModel) -> ModelDefinition:
    """Return the definition for a coaching model."""
    try:
        return MODEL_DEFINITIONS[model]
    except (KeyError, TypeError):
        raise UnknownModelReference(f"Unknown coaching model: {model!r}") from None


def all_models() -> list[CoachingModel]:
    """All coaching models in declaration (tie-break) order."""
    return list(CoachingModel)


def pillar_bonuses(pillar_type: str | None) -> Mapping[CoachingModel, float]:
    """Bonus table for a pillar; empty for unknown or missing pillars."""
    if not pillar_type:
        return _NO_BONUS
    return PILLAR_BONUSES.get(pillar_type, _NO_BONUS)
