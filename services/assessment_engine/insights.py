# services/assessment_engine/insights.py
# Derives a focus chakra, a coach persona and coaching context from a profile.

from typing import Any, Dict, List

from services.assessment_engine.definitions import CHAKRA_DETAILS
from services.assessment_engine.models import CHAKRA_KEYS, NEUTRAL_INTENSITY, ChakraProfile

COACH_BY_CHAKRA = {
    "root": "inner_child",
    "sacral": "inner_child",
    "solarPlexus": "shadow_self",
    "heart": "shadow_self",
    "throat": "higher_self",
    "thirdEye": "higher_self",
    "crown": "higher_self",
}
INTEGRATION_COACH = "integration"

COACH_NAMES = {
    "inner_child": "Inner Child Coach",
    "shadow_self": "Shadow Self Coach",
    "higher_self": "Higher Self Coach",
    "integration": "Integration Coach",
}

COACHING_FOCUS_QUESTIONS = {
    "inner_child": [
        "What early memories do you have related to feeling safe and secure?",
        "How does your current sense of safety affect your daily life?",
        "What childhood patterns might be affecting your relationship with your body and physical needs?",
        "In what ways do you nurture your creative expression and sensuality?",
        "What would help you feel more grounded and present in your everyday experience?",
    ],
    "shadow_self": [
        "What aspects of yourself do you find difficult to accept or acknowledge?",
        "How comfortable are you with expressing and setting boundaries?",
        "In what situations do you find yourself feeling powerless or overly controlling?",
        "What emotions do you find most difficult to express or experience?",
        "How do you respond to criticism or rejection from others?",
    ],
    "higher_self": [
        "What does authentic self-expression mean to you?",
        "How do you distinguish between your intuition and your fears?",
        "What is your relationship with the concept of purpose or meaning?",
        "How do you connect with your deeper wisdom or spiritual nature?",
        "What practices help you access your inner guidance system?",
    ],
    "integration": [
        "How might you integrate the insights from your chakra assessment into daily practice?",
        "What small, sustainable changes could support your overall energy balance?",
        "How would addressing your chakra imbalances change your day-to-day experience?",
        "What support systems might help you maintain new practices for chakra healing?",
        "What would a more balanced version of yourself look and feel like?",
    ],
}

# Thresholds for the per-chakra status line in the coaching context
UNDERACTIVE_BELOW = 4.0
OVERACTIVE_ABOVE = 6.0


def _direction(value: float) -> str:
    if value < NEUTRAL_INTENSITY:
        return "underactive"
    if value > NEUTRAL_INTENSITY:
        return "overactive"
    return "balanced"


def chakra_status(value: float) -> str:
    if value < UNDERACTIVE_BELOW:
        return "underactive"
    if value > OVERACTIVE_ABOVE:
        return "overactive"
    return "balanced"


def determine_focus_chakra(profile: ChakraProfile) -> Dict[str, Any]:
    """
    Finds the chakra furthest from the neutral midpoint.
    Ties go to the chakra that comes first in root-to-crown order.
    """
    values = profile.as_dict()
    key = max(CHAKRA_KEYS, key=lambda k: abs(values[k.value] - NEUTRAL_INTENSITY)).value
    value = values[key]
    direction = _direction(value)
    info = CHAKRA_DETAILS[key]

    if direction == "balanced":
        description = (
            f"Your {info['name']} chakra is well-balanced. "
            f"You're exhibiting traits such as {', '.join(info['balancedTraits'])}."
        )
    else:
        description = (
            f"Your {info['name']} chakra appears to be {direction}. "
            f"This may manifest as {', '.join(t.lower() for t in info['imbalancedTraits'])}."
        )

    return {
        "key": key,
        "name": info["name"],
        "sanskritName": info["sanskritName"],
        "direction": direction,
        "value": value,
        "description": description,
        "healingPractices": info["healingPractices"][:3],
    }


def recommend_coach(profile: ChakraProfile) -> Dict[str, Any]:
    focus = determine_focus_chakra(profile)
    if focus["direction"] == "balanced":
        coach = INTEGRATION_COACH
    else:
        coach = COACH_BY_CHAKRA.get(focus["key"], INTEGRATION_COACH)

    return {
        "focusChakra": focus,
        "recommendedCoach": coach,
        "coachingFocus": COACHING_FOCUS_QUESTIONS[coach],
        "generalRecommendation": (
            f"Based on your chakra assessment, working with the {COACH_NAMES[coach]} would be most "
            f"beneficial for addressing your {focus['name']} chakra imbalance."
        ),
    }


def coaching_context(profile: ChakraProfile) -> str:
    """Summary of the profile added to a coach's system prompt."""
    recommendation = recommend_coach(profile)
    focus = recommendation["focusChakra"]

    summary: List[str] = []
    for key, value in profile.as_dict().items():
        summary.append(f"{CHAKRA_DETAILS[key]['name']}: {value}/10 ({chakra_status(value)})")

    practices = "\n".join(focus["healingPractices"]) or "No specific recommendations available"
    themes = CHAKRA_DETAILS[focus["key"]]["themes"]

    return (
        "CHAKRA ASSESSMENT CONTEXT:\n"
        "Overall Profile:\n"
        + "\n".join(summary)
        + f"\n\nPrimary Focus: {focus['name']} Chakra ({focus['value']}/10, {focus['direction']})\n"
        + f"{focus['description']}\n\n"
        + "Recommended healing practices:\n"
        + f"{practices}\n\n"
        + "Coaching considerations:\n"
        + f"- This user would benefit from focusing on their {focus['name']} chakra.\n"
        + f"- The imbalance indicates possible issues with {themes}.\n"
    )
