"""
Prompt composition for the coach persona.

This module turns a model selection plus caller context into the text
handed to the external generation step. It never calls that step and
never reads its answer.

The prompts are here, not in config, because they're core business logic.
Changing them changes what the product does. The persona wording itself
lives in persona.py so it can change without touching the assembly.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from . import persona
from .classifier import classify
from .directives import bullet_list, compile_directive
from .lexicon import definition_of
from .models import (
    Actionable,
    ActionablePromptPair,
    CoachingContext,
    ModelSelection,
    PromptConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_TASKS = 5
MIN_TOTAL_TASKS = 3
MAX_TOTAL_TASKS = 8

# Fed to the classifier when the context carries no text at all.
DEFAULT_SELECTION_INPUT = "allmän coaching"

EXPLICIT_MODEL_REASONING = "Coachingmodellen valdes uttryckligen i konfigurationen."

HISTORY_WINDOW = 3


class SerializationError(ValueError):
    """Raised when caller data cannot be rendered into prompt text."""
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_conversational_instruction(
    context: Optional[CoachingContext] = None,
    config: Optional[PromptConfig] = None,
) -> str:
    """
    Build the system instruction for a coaching conversation.

    Sections, in order: persona, chosen model, contextual awareness,
    communication style, personalization, quality standards.
    """
    context = context or CoachingContext()
    config = config or PromptConfig()

    selection = _select_for_conversation(context, config)

    sections = [
        f"🎭 DU ÄR {persona.PERSONA_NAME.upper()} - EXPERT AI-COACH MED DJUP MÄNSKLIG FÖRSTÅELSE",
        _core_identity_section(),
        _coaching_model_section(selection),
    ]

    awareness = _contextual_awareness_section(context)
    if awareness:
        sections.append(awareness)

    sections.extend([
        _communication_section(config),
        _personalization_section(),
        _quality_standards_section(),
        persona.CLOSING_NOTE,
    ])

    return "\n\n".join(sections)


def build_conversational_request(
    request: str,
    context: Optional[CoachingContext] = None,
) -> str:
    """Build the user-side text that accompanies a coaching question."""
    context = context or CoachingContext()

    sections = [f"COACHING-FÖRFRÅGAN:\n{request.strip()}"]

    personal_context = _personal_context_section(context)
    if personal_context:
        sections.append(personal_context)

    sections.append(f"PERSONLIG TOUCH:\n{persona.PERSONAL_TOUCH_NOTE}")

    tasks = "\n".join(
        f"{number}. {task}"
        for number, task in enumerate(persona.COACHING_TASKS, start=1)
    )
    sections.append(f"STEFANS UPPGIFT:\nGe personlig, empatisk och praktisk coaching som:\n{tasks}")
    sections.append(f"Svara som {persona.PERSONA_NAME} - med värme, visdom och personlig touch.")

    return "\n\n".join(sections)


def build_actionable_instruction_pair(
    assessment_data: Any,
    preferences: dict[str, Any],
    context: Optional[CoachingContext] = None,
) -> ActionablePromptPair:
    """
    Build the system/user text pair for generating actionable tasks.

    The user text carries the serialized inputs, the clamped target count
    and the exact JSON contract the generator must answer with.
    """
    context = context or CoachingContext()

    selection = classify(
        selection_input_from_context(context),
        context,
    )
    target_count = target_task_count(preferences)

    system_text = "\n\n".join([
        f"🎯 DU ÄR {persona.PERSONA_NAME.upper()} - SKAPAR PERSONLIGA ACTIONABLES",
        _core_identity_section(),
        _coaching_model_section(selection),
        f"ACTIONABLE-FILOSOFI:\n{bullet_list(persona.ACTIONABLE_PHILOSOPHY)}",
        "STEFANS ACTIONABLE-PRINCIPER:\n" + "\n".join(
            f'{number}. "{principle}"'
            for number, principle in enumerate(persona.ACTIONABLE_PRINCIPLES, start=1)
        ),
        f"KVALITETSKRAV:\n{bullet_list(persona.ACTIONABLE_QUALITY)}",
    ])

    mission = "\n".join(
        f"{number}. {item}"
        for number, item in enumerate(persona.ACTIONABLE_MISSION, start=1)
    )
    reminders = "\n".join(f"- {item}" for item in persona.ACTIONABLE_REMINDERS)

    user_text = "\n\n".join([
        "SKAPANDE AV PERSONLIGA ACTIONABLES",
        f"PERSONS KONTEXT:\n{_serialize(context.to_dict(), 'context')}",
        f"ASSESSMENT-DATA:\n{_serialize(assessment_data, 'assessment data')}",
        f"PREFERENSER:\n{_serialize(preferences, 'preferences')}",
        f"STEFANS UPPDRAG:\nSkapa {target_count} personliga, kraftfulla actionables som:\n{mission}",
        f"VIKTIGT:\n{reminders}",
        f"Returnera exakt {target_count} actionables som JSON-array enligt format:\n{actionable_contract()}",
    ])

    logger.debug(
        "Built actionable prompt pair",
        extra={
            "primary_model": selection.primary.value,
            "target_count": target_count,
            "persona_version": persona.PERSONA_VERSION,
        },
    )

    return ActionablePromptPair(
        system_text=system_text,
        user_text=user_text,
        selection=selection,
        target_count=target_count,
    )


def target_task_count(preferences: Optional[dict[str, Any]]) -> int:
    """
    How many actionables to ask for: total_tasks clamped to [3, 8].

    Missing, zero or non-numeric falls back to 5. Accepts the camelCase
    key the frontend sends as well as the snake_case one.
    """
    if not isinstance(preferences, Mapping):
        preferences = {}
    requested = preferences.get("total_tasks", preferences.get("totalTasks"))

    try:
        count = int(requested) if requested and not isinstance(requested, bool) else 0
    except (TypeError, ValueError, OverflowError):
        logger.warning(
            "Ignoring invalid total_tasks preference",
            extra={"total_tasks": repr(requested)},
        )
        count = 0

    if not count:
        count = DEFAULT_TOTAL_TASKS
    return max(MIN_TOTAL_TASKS, min(MAX_TOTAL_TASKS, count))


def selection_input_from_context(context: CoachingContext) -> str:
    """
    Flatten the text-bearing parts of a context into classifier input.

    Challenges, then goals, then the serialized assessment data.
    """
    parts: list[str] = []
    if context.current_challenges:
        parts.append(" ".join(context.current_challenges))
    if context.user_goals:
        parts.append(" ".join(context.user_goals))
    if context.assessment_data:
        parts.append(_serialize(context.assessment_data, "assessment data", indent=None))

    return " ".join(parts) or DEFAULT_SELECTION_INPUT


def actionable_contract() -> str:
    """The JSON shape each generated actionable must follow."""
    lines = [
        f'  "{name}": {persona.ACTIONABLE_FIELD_HINTS[name]}'
        for name in Actionable.field_names()
    ]
    return "[{\n" + ",\n".join(lines) + "\n}]"


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _select_for_conversation(context: CoachingContext, config: PromptConfig) -> ModelSelection:
    if config.coaching_model is not None:
        return ModelSelection(
            primary=config.coaching_model,
            confidence=1.0,
            reasoning=EXPLICIT_MODEL_REASONING,
        )
    return classify(selection_input_from_context(context), context)


def _core_identity_section() -> str:
    personality = "\n".join(f"• {label}: {text}" for label, text in persona.PERSONALITY)
    return (
        f"STEFANS KÄRNIDENTITET:\n{personality}\n\n"
        f"GRUNDLÄGGANDE PRINCIPER:\n{bullet_list(persona.CORE_PRINCIPLES)}\n\n"
        f"EXPERTOMRÅDEN:\n{bullet_list(persona.KNOWLEDGE_AREAS)}\n\n"
        f"ERFARENHETSMINNEN:\n{bullet_list(persona.MEMORY_FRAGMENTS)}"
    )


def _coaching_model_section(selection: ModelSelection) -> str:
    directive = compile_directive(selection.primary)
    return (
        f"🎯 VALD COACHINGMODELL: {definition_of(selection.primary).display_name}\n"
        f"MOTIVERING: {selection.reasoning}\n\n"
        f"{directive.text}\n\n"
        f"STEFANS ANPASSNING AV MODELLEN:\n{persona.MODEL_ADAPTATION_NOTE}"
    )


def _contextual_awareness_section(context: CoachingContext) -> str:
    lines = []
    if context.pillar_type:
        lines.append(f"• Pillar-fokus: {context.pillar_type}")
    if context.current_challenges:
        lines.append(f"• Aktuella utmaningar: {', '.join(context.current_challenges)}")
    if context.user_goals:
        lines.append(f"• Användarens mål: {', '.join(context.user_goals)}")

    if not lines:
        return ""
    return "🧠 KONTEXTUELL MEDVETENHET:\n" + "\n".join(lines)


def _communication_section(config: PromptConfig) -> str:
    empathy = config.empathy_level
    intensity = config.intensity
    personal_touch = "Aktiverad" if config.personal_touch else "Begränsad"
    awareness = persona.CONTEXT_AWARENESS_LABELS[config.context_awareness]
    return (
        "KOMMUNIKATIONSRIKTLINJER:\n"
        f"• Empatinivå: {empathy.value} - {persona.EMPATHY_DESCRIPTIONS[empathy]}\n"
        f"• Intensitet: {intensity.value} - {persona.INTENSITY_DESCRIPTIONS[intensity]}\n"
        f"• Personlig touch: {personal_touch}\n"
        f"• Kontextmedvetenhet: {awareness}"
    )


def _personalization_section() -> str:
    return (
        "PERSONALISERING:\n"
        "Stefan anpassar sitt svar baserat på:\n"
        f"{bullet_list(persona.PERSONALIZATION_POINTS)}"
    )


def _quality_standards_section() -> str:
    standards = "\n".join(f"✓ {standard}" for standard in persona.QUALITY_STANDARDS)
    return f"STEFANS KVALITETSSTANDARD:\n{standards}"


def _personal_context_section(context: CoachingContext) -> str:
    lines = []
    if context.assessment_data:
        lines.append(f"Assessment-resultat: {_serialize(context.assessment_data, 'assessment data')}")
    if context.user_history:
        lines.append(f"Historik: {', '.join(context.user_history[-HISTORY_WINDOW:])}")

    if not lines:
        return ""
    return "PERSONLIG KONTEXT:\n" + "\n\n".join(lines)


def _serialize(value: Any, label: str, indent: Optional[int] = 2) -> str:
    """JSON-render caller data, or fail loudly with SerializationError."""
    try:
        return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.warning(
            "Could not serialize prompt input",
            extra={"label": label, "error": str(e)},
        )
        raise SerializationError(f"Cannot serialize {label}: {e}") from e
