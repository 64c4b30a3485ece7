"""Request and result models for meal suggestions."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class MacroRequest(BaseModel):
    """Remaining daily macros and context supplied by the caller."""

    model_config = ConfigDict(populate_by_name=True)

    remaining_cals: int | float | None = Field(default=None, alias="remainingCals")
    remaining_protein: int | float | None = Field(
        default=None, alias="remainingProtein"
    )
    remaining_carbs: int | float | None = Field(default=None, alias="remainingCarbs")
    remaining_fat: int | float | None = Field(default=None, alias="remainingFat")
    user_goal: str | None = Field(default=None, alias="userGoal")
    eaten_today: list[str] | None = Field(default=None, alias="eatenToday")
    followup: str | None = None


@dataclass(frozen=True)
class SuggestionResult:
    """Generated suggestions and the provider that produced them."""

    suggestions: str
    provider: str
