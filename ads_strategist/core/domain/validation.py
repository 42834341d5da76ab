from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as SchemaValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ads_strategist.core.domain.catalog import (
    AGE_RANGE, MAX_BUDGET_AMOUNT, BudgetPeriod, CampaignGoal, Gender
)
from ads_strategist.core.domain.entities import CampaignInput, TargetAudience
from ads_strategist.core.domain.errors import ValidationError

def _whole_number(value: Any) -> int:
    """Accept JSON integers, integral floats and strings of ASCII digits"""
    # bool is an int subclass; a checkbox value is never a valid amount
    if isinstance(value, bool):
        raise ValueError("must be a whole number")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise ValueError("must be a whole number")
        # checked on length first; int() refuses very long digit strings
        if len(text) > len(str(MAX_BUDGET_AMOUNT)):
            raise ValueError("is too large")
        value = int(text)

    if not isinstance(value, int):
        raise ValueError("must be a whole number")
    if value > MAX_BUDGET_AMOUNT:
        raise ValueError("is too large")
    return value

class FormModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

class TargetAudienceModel(FormModel):
    """Audience block of the campaign form"""
    age_min: int = Field(..., ge=AGE_RANGE[0], le=AGE_RANGE[1])
    age_max: int = Field(..., ge=AGE_RANGE[0], le=AGE_RANGE[1])
    location: str = Field(..., min_length=1)
    gender: Gender = "all"
    interests: List[str] = Field(default_factory=list)

    @field_validator("age_min", "age_max", mode="before")
    @classmethod
    def parse_age(cls, value: Any) -> int:
        return _whole_number(value)

    @field_validator("gender", mode="before")
    @classmethod
    def default_gender(cls, value: Any) -> Any:
        return "all" if value is None or value == "" else value

    @field_validator("interests", mode="before")
    @classmethod
    def default_interests(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("interests")
    @classmethod
    def unique_interests(cls, value: List[str]) -> List[str]:
        interests: List[str] = []
        for item in value:
            if item and item not in interests:
                interests.append(item)
        return interests

    @model_validator(mode="after")
    def check_age_order(self) -> "TargetAudienceModel":
        if self.age_min >= self.age_max:
            raise PydanticCustomError("age_order", "must be lower than ageMax", {"field": "ageMin"})
        return self

class CampaignInputModel(FormModel):
    """Campaign form submission"""
    product_description: str = Field(..., min_length=1)
    business_type: str = Field(..., min_length=1)
    budget_amount: int = Field(..., gt=0, le=MAX_BUDGET_AMOUNT)
    budget_period: BudgetPeriod = "daily"
    campaign_goal: CampaignGoal
    target_audience: TargetAudienceModel

    @field_validator("budget_amount", mode="before")
    @classmethod
    def parse_budget(cls, value: Any) -> int:
        return _whole_number(value)

    @field_validator("budget_period", mode="before")
    @classmethod
    def default_period(cls, value: Any) -> Any:
        return "daily" if value is None or value == "" else value

def parse_campaign_input(payload: Dict[str, Any]) -> CampaignInput:
    """Validate a raw form submission and build a CampaignInput.

    Raises ValidationError naming the first offending field, as a dotted
    camelCase path such as targetAudience.ageMin.
    """
    if not isinstance(payload, dict):
        raise ValidationError("body", "expected a JSON object")

    try:
        model = CampaignInputModel.model_validate(payload)
    except SchemaValidationError as e:
        error = e.errors()[0]
        # list indexes are dropped: interests.1 reports as interests
        loc = [part for part in error["loc"] if isinstance(part, str)]
        extra_field = (error.get("ctx") or {}).get("field")
        if extra_field:
            loc.append(extra_field)
        raise ValidationError(".".join(loc) or "body", error["msg"])

    audience = model.target_audience
    return CampaignInput(
        product_description=model.product_description,
        business_type=model.business_type,
        budget_amount=model.budget_amount,
        budget_period=model.budget_period,
        campaign_goal=model.campaign_goal,
        target_audience=TargetAudience(
            age_min=audience.age_min,
            age_max=audience.age_max,
            location=audience.location,
            gender=audience.gender,
            interests=list(audience.interests)
        )
    )
