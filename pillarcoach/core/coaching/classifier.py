"""
Coaching-model classifier.

Maps free text plus optional context to a coaching methodology. The
scoring is deliberately simple: one point per trigger keyword found as a
substring, plus fixed bonuses for the pillar the user is working in. No
stemming, no partial credit, no learning. Same input, same answer.
"""

import logging
from typing import Optional

from .lexicon import all_models, definition_of, pillar_bonuses
from .models import CoachingContext, CoachingModel, ModelSelection

logger = logging.getLogger(__name__)

# Top score must reach this before we trust a specific model.
SELECTION_THRESHOLD = 0.5

# Second-ranked model must exceed this to be offered as secondary.
SECONDARY_THRESHOLD = 0.3

# Number of independent signals at which confidence saturates.
CONFIDENCE_SATURATION = 3.0

FALLBACK_MODEL = CoachingModel.ADAPTIVE_AI
FALLBACK_CONFIDENCE = 0.7
FALLBACK_REASONING = (
    "Ingen tydlig matchning med specifik modell. "
    "Använder adaptiv AI-approach för personaliserad coaching."
)


def score_models(
    text: Optional[str],
    context: Optional[CoachingContext] = None,
) -> list[tuple[CoachingModel, float]]:
    """
    Score every model and return them ranked, best first.

    Ties keep CoachingModel declaration order because sorted() is stable
    and we start from all_models().
    """
    normalized = (text or "").lower().strip()
    bonuses = pillar_bonuses(context.pillar_type if context else None)

    scores: list[tuple[CoachingModel, float]] = []
    for model in all_models():
        triggers = definition_of(model).triggers
        score = float(sum(1 for trigger in triggers if trigger in normalized))
        score += bonuses.get(model, 0.0)
        scores.append((model, score))

    return sorted(scores, key=lambda item: item[1], reverse=True)


def classify(
    text: Optional[str],
    context: Optional[CoachingContext] = None,
) -> ModelSelection:
    """
    Choose a primary (and maybe secondary) coaching model for the input.

    Never fails: empty or unmatched input lands on the adaptive fallback.
    """
    ranked = score_models(text, context)
    primary, top_score = ranked[0]
    runner_up, runner_up_score = ranked[1]

    if top_score < SELECTION_THRESHOLD:
        logger.debug(
            "No confident coaching model match, using fallback",
            extra={"top_model": primary.value, "top_score": top_score},
        )
        return ModelSelection(
            primary=FALLBACK_MODEL,
            confidence=FALLBACK_CONFIDENCE,
            reasoning=FALLBACK_REASONING,
        )

    secondary = runner_up if runner_up_score > SECONDARY_THRESHOLD else None
    confidence = min(top_score / CONFIDENCE_SATURATION, 1.0)

    pillar_type = context.pillar_type if context else None
    pillar_decisive = primary in pillar_bonuses(pillar_type)

    selection = ModelSelection(
        primary=primary,
        secondary=secondary,
        confidence=confidence,
        reasoning=_build_reasoning(primary, secondary, pillar_type if pillar_decisive else None),
    )

    logger.debug(
        "Selected coaching model",
        extra={
            "primary": primary.value,
            "secondary": secondary.value if secondary else None,
            "confidence": confidence,
            "top_score": top_score,
        },
    )
    return selection


def _build_reasoning(
    primary: CoachingModel,
    secondary: Optional[CoachingModel],
    pillar_type: Optional[str],
) -> str:
    primary_definition = definition_of(primary)
    reasoning = (
        f"Valde {primary_definition.display_name} baserat på nyckelord i din input "
        f"som matchar {primary_definition.approach.lower()}."
    )

    if secondary is not None:
        reasoning += (
            f" Kommer också att använda element från {definition_of(secondary).display_name} "
            "för en mer heltäckande approach."
        )

    if pillar_type:
        reasoning += f' Kontexten "{pillar_type}" förstärker detta val.'

    return reasoning
