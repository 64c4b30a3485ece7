"""Prompt text for meal suggestions."""

from meal_suggester.domain.suggestions import MacroRequest

SYSTEM_PROMPT = """
You are a helpful nutrition and recipe assistant. Your task is to suggest meal ideas that fit the user's remaining daily macros (calories, protein, carbs, fat).
You should:
- Suggest 3 meal ideas (can be breakfast, lunch, dinner, or snacks) that together would approximately meet the remaining needs.
- Include a variety of cuisines, **especially Nigerian dishes** (e.g., jollof rice, egusi soup, moi moi, yam porridge, etc.) when appropriate.
- Keep recipes simple, with common, accessible ingredients that are easy to find in any grocery store or local market.
- For each meal, provide:
    - Meal name
    - Brief description (2-3 sentences)
    - Estimated macros (calories, protein, carbs, fat)
    - Why it's a good choice for the user's goals
- If the user provides a follow-up query (e.g., "suggest something with chicken" or "more Nigerian dishes"), incorporate that request into your response.
- Be friendly, encouraging, and informative.
"""

NOTHING_EATEN_TEXT = "nothing yet"
MISSING_VALUE_TEXT = "not specified"


def build_user_prompt(request: MacroRequest) -> str:
    """Render the user prompt for a macro request."""
    eaten = ", ".join(request.eaten_today or []) or NOTHING_EATEN_TEXT
    prompt = (
        "\n"
        "Remaining daily needs:\n"
        f"- Calories: {_value(request.remaining_cals)} kcal\n"
        f"- Protein: {_value(request.remaining_protein)}g\n"
        f"- Carbs: {_value(request.remaining_carbs)}g\n"
        f"- Fat: {_value(request.remaining_fat)}g\n"
        f"User's goal: {_value(request.user_goal)}\n"
        f"Already eaten today: {eaten}\n"
    )
    if request.followup:
        prompt += f"\nFollow-up request: {request.followup}"
    prompt += (
        "\nPlease suggest 3 meal ideas that fit these macros. "
        "Include Nigerian dishes where appropriate."
    )
    return prompt


def _value(value: object) -> str:
    if value is None:
        return MISSING_VALUE_TEXT
    return str(value)
