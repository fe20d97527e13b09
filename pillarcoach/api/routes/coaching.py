"""
Coaching-model API endpoints.

Exposes the pure coaching core over HTTP:
1. Browse the model lexicon (GET /models, GET /models/{model_id})
2. Classify text into a coaching model (POST /select)
3. Build prompt text for the generation step (POST /prompts/...)

Nothing here calls a generative model. Callers take the returned text
to whichever generation service they use.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from ...core.coaching.classifier import classify, score_models
from ...core.coaching.directives import compile_directive
from ...core.coaching.lexicon import all_models, definition_of
from ...core.coaching.models import (
    CoachingContext,
    CoachingModel,
    ContextAwareness,
    EmpathyLevel,
    Intensity,
    ModelDefinition,
    PlanningIntensity,
    PromptConfig,
)
from ...core.coaching.persona import PERSONA_VERSION
from ...core.coaching.planning import planning_preferences
from ...core.coaching.prompts import (
    SerializationError,
    build_actionable_instruction_pair,
    build_conversational_instruction,
    build_conversational_request,
)
from ..dependencies import AuthenticatedUser, PromptConfigDep, SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class ContextPayload(BaseModel):
    """Caller context. Every field is optional."""
    pillar_type: Optional[str] = Field(None, description="Pillar the user is working in, e.g. self_care")
    user_history: list[str] = Field(default_factory=list, description="Recent interaction summaries")
    assessment_data: Optional[dict[str, Any]] = Field(None, description="Assessment answers or analysis")
    current_challenges: list[str] = Field(default_factory=list, description="Challenges the user named")
    user_goals: list[str] = Field(default_factory=list, description="Goals the user named")

    def to_domain(self) -> CoachingContext:
        return CoachingContext(
            pillar_type=self.pillar_type,
            user_history=list(self.user_history),
            assessment_data=self.assessment_data,
            current_challenges=list(self.current_challenges),
            user_goals=list(self.user_goals),
        )


class ModelDefinitionResponse(BaseModel):
    """A coaching model as shown in the UI."""
    id: CoachingModel
    display_name: str
    description: str
    approach: str
    triggers: list[str]
    focus_areas: list[str]
    methodologies: list[str]
    expected_outcomes: list[str]

    @classmethod
    def from_definition(cls, definition: ModelDefinition) -> "ModelDefinitionResponse":
        return cls(
            id=definition.id,
            display_name=definition.display_name,
            description=definition.description,
            approach=definition.approach,
            triggers=sorted(definition.triggers),
            focus_areas=list(definition.focus_areas),
            methodologies=list(definition.methodologies),
            expected_outcomes=list(definition.expected_outcomes),
        )


class ModelDetailResponse(ModelDefinitionResponse):
    """A coaching model plus its compiled directive."""
    directive: str = Field(description="Instruction block compiled from this model")


class SelectionRequest(BaseModel):
    """Free text to classify."""
    text: str = Field(default="", description="User-authored text")
    context: Optional[ContextPayload] = None


class ModelScore(BaseModel):
    model: CoachingModel
    score: float


class SelectionResponse(BaseModel):
    """The classifier's verdict."""
    primary: CoachingModel
    secondary: Optional[CoachingModel] = None
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str
    scores: list[ModelScore] = Field(description="All models, best first")


class ConversationalPromptRequest(BaseModel):
    """Inputs for a conversational instruction. Unset knobs use server defaults."""
    context: Optional[ContextPayload] = None
    request: Optional[str] = Field(None, description="The user's question, if a request text is wanted too")
    coaching_model: Optional[CoachingModel] = Field(None, description="Force a model instead of classifying")
    empathy_level: Optional[EmpathyLevel] = None
    intensity: Optional[Intensity] = None
    personal_touch: Optional[bool] = None
    context_awareness: Optional[ContextAwareness] = None


class ConversationalPromptResponse(BaseModel):
    instruction: str
    request_text: Optional[str] = None
    persona_version: str


class ActionablePromptRequest(BaseModel):
    """Inputs for an actionable-generation prompt pair."""
    assessment_data: Any = Field(default_factory=dict)
    preferences: dict[str, Any] = Field(default_factory=dict)
    context: Optional[ContextPayload] = None
    planning_intensity: Optional[PlanningIntensity] = Field(
        None,
        description="When set with duration_weeks, derives plan sizing into preferences",
    )
    duration_weeks: Optional[int] = Field(None, ge=1)


class ActionablePromptResponse(BaseModel):
    system_text: str
    user_text: str
    target_count: int
    primary_model: CoachingModel
    secondary_model: Optional[CoachingModel] = None
    confidence: float
    persona_version: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get(
    "/models",
    response_model=list[ModelDefinitionResponse],
    summary="List coaching models",
)
async def list_models(api_key: AuthenticatedUser = None) -> list[ModelDefinitionResponse]:
    """All coaching models in tie-break order."""
    return [ModelDefinitionResponse.from_definition(definition_of(model)) for model in all_models()]


@router.get(
    "/models/{model_id}",
    response_model=ModelDetailResponse,
    summary="Get one coaching model",
)
async def get_model(model_id: str, api_key: AuthenticatedUser = None) -> ModelDetailResponse:
    """One coaching model with its compiled directive."""
    try:
        model = CoachingModel(model_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown coaching model: {model_id}",
        )

    base = ModelDefinitionResponse.from_definition(definition_of(model))
    return ModelDetailResponse(**base.model_dump(), directive=compile_directive(model).text)


@router.post(
    "/select",
    response_model=SelectionResponse,
    summary="Classify text into a coaching model",
)
async def select_model(
    request: SelectionRequest,
    settings: SettingsDep,
    api_key: AuthenticatedUser = None,
) -> SelectionResponse:
    """
    Pick a primary (and maybe secondary) coaching model for the text.

    Always succeeds for valid input; unmatched text gets the adaptive model.
    """
    _check_length(request.text, settings.max_input_chars)
    context = request.context.to_domain() if request.context else None

    selection = classify(request.text, context)
    ranked = score_models(request.text, context)

    logger.info(
        "Classified coaching input",
        extra={
            "primary": selection.primary.value,
            "confidence": selection.confidence,
            "pillar_type": context.pillar_type if context else None,
        }
    )

    return SelectionResponse(
        primary=selection.primary,
        secondary=selection.secondary,
        confidence=selection.confidence,
        reasoning=selection.reasoning,
        scores=[ModelScore(model=model, score=score) for model, score in ranked],
    )


@router.post(
    "/prompts/conversational",
    response_model=ConversationalPromptResponse,
    summary="Build a conversational instruction",
)
async def conversational_prompt(
    request: ConversationalPromptRequest,
    defaults: PromptConfigDep,
    settings: SettingsDep,
    api_key: AuthenticatedUser = None,
) -> ConversationalPromptResponse:
    """Build the system instruction (and optionally the request text) for a chat turn."""
    if request.request is not None:
        _check_length(request.request, settings.max_input_chars)

    config = PromptConfig(
        coaching_model=request.coaching_model,
        empathy_level=request.empathy_level or defaults.empathy_level,
        intensity=request.intensity or defaults.intensity,
        personal_touch=defaults.personal_touch if request.personal_touch is None else request.personal_touch,
        context_awareness=request.context_awareness or defaults.context_awareness,
    )
    context = request.context.to_domain() if request.context else None

    try:
        instruction = build_conversational_instruction(context, config)
        request_text = (
            build_conversational_request(request.request, context)
            if request.request is not None
            else None
        )
    except SerializationError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )

    return ConversationalPromptResponse(
        instruction=instruction,
        request_text=request_text,
        persona_version=PERSONA_VERSION,
    )


@router.post(
    "/prompts/actionables",
    response_model=ActionablePromptResponse,
    summary="Build an actionable-generation prompt pair",
)
async def actionable_prompt(
    request: ActionablePromptRequest,
    api_key: AuthenticatedUser = None,
) -> ActionablePromptResponse:
    """
    Build the system/user text pair for generating actionable tasks.

    If planning_intensity and duration_weeks are given, the derived plan
    sizing overrides the matching preference keys.
    """
    preferences = dict(request.preferences)
    if request.planning_intensity is not None and request.duration_weeks is not None:
        preferences.update(planning_preferences(request.planning_intensity, request.duration_weeks))

    context = request.context.to_domain() if request.context else None

    try:
        pair = build_actionable_instruction_pair(request.assessment_data, preferences, context)
    except SerializationError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )

    logger.info(
        "Built actionable prompt pair",
        extra={
            "primary": pair.selection.primary.value,
            "target_count": pair.target_count,
        }
    )

    return ActionablePromptResponse(
        system_text=pair.system_text,
        user_text=pair.user_text,
        target_count=pair.target_count,
        primary_model=pair.selection.primary,
        secondary_model=pair.selection.secondary,
        confidence=pair.selection.confidence,
        persona_version=PERSONA_VERSION,
    )


def _check_length(text: str, max_chars: int) -> None:
    if len(text) > max_chars:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Text exceeds {max_chars} characters",
        )
