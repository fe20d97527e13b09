"""
Domain models for coaching-model selection and prompt composition.

These models represent the core business concepts. They have no dependencies
on external frameworks, databases, or APIs. Everything here is a value:
created per call, never persisted by the engine.
"""

from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum
from typing import Any, Optional


class CoachingModel(Enum):
    """
    The coaching methodologies the engine can choose between.

    Declaration order is the tie-break priority when two models score
    equally: the first-declared model wins.
    """
    NEUROPLASTIC = "neuroplastic"
    WHEEL_OF_LIFE = "wheel_of_life"
    COGNITIVE_BEHAVIORAL = "cognitive_behavioral"
    SOLUTION_FOCUSED = "solution_focused"
    STRENGTHS_BASED = "strengths_based"
    MINDFULNESS = "mindfulness"
    ADAPTIVE_AI = "adaptive_ai"  # Fallback when nothing matches confidently


class EmpathyLevel(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Intensity(Enum):
    """How hard the coach pushes in conversation."""
    GENTLE = "gentle"
    MODERATE = "moderate"
    CHALLENGING = "challenging"


class ContextAwareness(Enum):
    MINIMAL = "minimal"
    STANDARD = "standard"
    DEEP = "deep"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Priority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PlanningIntensity(Enum):
    """
    The pace a user picks when asking for a generated plan.

    Not the same thing as conversational Intensity: this one decides
    how many tasks land in the calendar, not how the coach speaks.
    """
    CHILL = "chill"
    MODERATE = "moderate"
    INTENSE = "intense"


@dataclass(frozen=True)
class ModelDefinition:
    """
    Static description of one coaching methodology.

    Frozen because definitions are loaded once and shared by every call.
    The display fields may be shown directly in the UI.
    """
    id: CoachingModel
    display_name: str
    description: str
    triggers: frozenset[str]
    approach: str
    focus_areas: tuple[str, ...]
    methodologies: tuple[str, ...]
    expected_outcomes: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.triggers:
            raise ValueError(f"{self.id.value} must define at least one trigger")
        for trigger in self.triggers:
            if not trigger or trigger != trigger.lower():
                raise ValueError(f"Trigger {trigger!r} must be non-empty lowercase")
        if not self.focus_areas:
            raise ValueError(f"{self.id.value} must define focus areas")
        if not self.methodologies:
            raise ValueError(f"{self.id.value} must define methodologies")
        if not self.expected_outcomes:
            raise ValueError(f"{self.id.value} must define expected outcomes")


@dataclass
class CoachingContext:
    """
    Caller-supplied context for one classification or prompt build.

    Assembled by data-access code outside the engine (assessment records,
    pillar metadata, interaction history). Every field is optional.
    """
    pillar_type: Optional[str] = None
    user_history: list[str] = field(default_factory=list)
    assessment_data: Optional[dict[str, Any]] = None
    current_challenges: list[str] = field(default_factory=list)
    user_goals: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Present fields only, keyed the way the frontend sends them."""
        payload: dict[str, Any] = {}
        if self.pillar_type:
            payload["pillarType"] = self.pillar_type
        if self.user_history:
            payload["userHistory"] = list(self.user_history)
        if self.assessment_data is not None:
            payload["assessmentData"] = self.assessment_data
        if self.current_challenges:
            payload["currentChallenges"] = list(self.current_challenges)
        if self.user_goals:
            payload["userGoals"] = list(self.user_goals)
        return payload


@dataclass(frozen=True)
class ModelSelection:
    """
    The classifier's verdict for one piece of input.

    Created fresh per call. The engine never stores selections.
    """
    primary: CoachingModel
    confidence: float
    reasoning: str
    secondary: Optional[CoachingModel] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("Confidence must be between 0 and 1")
        if self.secondary is not None and self.secondary == self.primary:
            raise ValueError("Secondary model must differ from primary")


@dataclass(frozen=True)
class Directive:
    """Compiled instruction block for one coaching model."""
    model: CoachingModel
    text: str
    focus_areas: tuple[str, ...]
    methodologies: tuple[str, ...]
    expected_outcomes: tuple[str, ...]


@dataclass
class PromptConfig:
    """
    Knobs for the conversational instruction.

    When coaching_model is None the composer classifies one from context.
    """
    coaching_model: Optional[CoachingModel] = None
    empathy_level: EmpathyLevel = EmpathyLevel.HIGH
    intensity: Intensity = Intensity.MODERATE
    personal_touch: bool = True
    context_awareness: ContextAwareness = ContextAwareness.STANDARD


@dataclass(frozen=True)
class Actionable:
    """
    One generated task recommendation.

    The engine only describes this contract to the generator; parsing and
    validating the generator's answer belongs to the caller.
    """
    title: str
    description: str
    why_important: str
    personal_note: str
    estimated_minutes: int
    difficulty: Difficulty
    priority: Priority
    event_date: date
    pillar: str
    category: str

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("Actionable title cannot be empty")
        if self.estimated_minutes < 1:
            raise ValueError("estimated_minutes must be positive")

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]


@dataclass(frozen=True)
class ActionablePromptPair:
    """System and user text for one actionable-generation request."""
    system_text: str
    user_text: str
    selection: ModelSelection
    target_count: int


@dataclass(frozen=True)
class IntensityParameters:
    """Plan sizing derived from a PlanningIntensity."""
    tasks_per_week: int
    min_duration: int
    max_duration: int
    complexity: str
    stress_level: str

    @property
    def duration_display(self) -> str:
        return f"{self.min_duration}-{self.max_duration} min"
