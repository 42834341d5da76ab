"""
Pydantic schema for model-generated strategies

The same models serve two purposes: their JSON schema constrains the
generative model's output (converted to the Gemini response-schema dialect),
and they validate whatever the model actually returns.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

FUNNEL_ORDER = ("TOFU", "MOFU", "BOFU")

class StrategyBaseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class FunnelStageModel(StrategyBaseModel):
    stage: str
    phase: str
    description: str
    actions: List[str]

class CampaignObjectiveModel(StrategyBaseModel):
    stage: str
    objective: str
    description: str
    expected_outcome: str

class AdFormatModel(StrategyBaseModel):
    type: str
    description: str
    priority: str

class PlatformModel(StrategyBaseModel):
    name: str
    reason: str
    priority: str

class AdFormatsModel(StrategyBaseModel):
    formats: List[AdFormatModel]
    platforms: List[PlatformModel]

class CopyBlockModel(StrategyBaseModel):
    headline: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    cta: str = Field(..., min_length=1)

class AdCopyModel(StrategyBaseModel):
    stage: str
    english: CopyBlockModel
    urdu: CopyBlockModel

class BudgetLineModel(StrategyBaseModel):
    stage: str
    amount: str
    percentage: str
    description: str

class BudgetPlanModel(StrategyBaseModel):
    total: str
    weekly: str
    monthly: str
    breakdown: List[BudgetLineModel] = Field(..., min_length=3, max_length=3)

class ScheduleDayModel(StrategyBaseModel):
    day: int = Field(..., ge=1, le=7)
    focus: str
    stage: str
    actions: List[str]
    targeting: str
    retargeting: Optional[str] = None

class CampaignStrategyModel(StrategyBaseModel):
    """Shape of a complete strategy as returned over HTTP"""
    funnel_strategy: List[FunnelStageModel] = Field(..., min_length=3, max_length=3)
    campaign_objectives: List[CampaignObjectiveModel] = Field(..., min_length=3, max_length=3)
    ad_formats: AdFormatsModel
    ad_copy: List[AdCopyModel] = Field(..., min_length=3, max_length=3)
    budget_plan: BudgetPlanModel
    campaign_schedule: List[ScheduleDayModel] = Field(..., min_length=7, max_length=7)

    @model_validator(mode="after")
    def check_ordering(self) -> "CampaignStrategyModel":
        days = [entry.day for entry in self.campaign_schedule]
        if days != list(range(1, 8)):
            raise ValueError(f"campaignSchedule days must run 1 to 7 in order, got {days}")

        staged = {
            "funnelStrategy": self.funnel_strategy,
            "campaignObjectives": self.campaign_objectives,
            "adCopy": self.ad_copy,
            "budgetPlan.breakdown": self.budget_plan.breakdown,
        }
        for name, entries in staged.items():
            # stages may carry a label, as in "TOFU (Awareness)"
            if not all(entry.stage.strip().upper().startswith(key) for entry, key in zip(entries, FUNNEL_ORDER)):
                raise ValueError(f"{name} stages must be TOFU, MOFU, BOFU in order")
        return self

# Keys the Gemini response schema accepts, mapped from JSON Schema names
_GEMINI_KEYS = {
    "description": "description",
    "enum": "enum",
    "format": "format",
    "minItems": "minItems",
    "maxItems": "maxItems",
    "required": "required",
}

def to_gemini_schema(model: type = CampaignStrategyModel) -> Dict[str, Any]:
    """Convert a pydantic model's JSON schema to a Gemini responseSchema.

    Gemini accepts an OpenAPI subset: no $ref, upper-case type names, and
    nullable instead of anyOf-with-null.
    """
    schema = model.model_json_schema(by_alias=True)
    return _convert(schema, schema.get("$defs", {}))

def _convert(node: Dict[str, Any], defs: Dict[str, Any]) -> Dict[str, Any]:
    if "$ref" in node:
        return _convert(defs[node["$ref"].split("/")[-1]], defs)

    if "anyOf" in node:
        options = [option for option in node["anyOf"] if option.get("type") != "null"]
        converted = _convert(options[0], defs)
        if len(options) < len(node["anyOf"]):
            converted["nullable"] = True
        return converted

    result: Dict[str, Any] = {"type": node["type"].upper()}
    for key, target in _GEMINI_KEYS.items():
        if key in node:
            result[target] = node[key]

    if "properties" in node:
        result["properties"] = {
            name: _convert(prop, defs) for name, prop in node["properties"].items()
        }
        result["propertyOrdering"] = list(node["properties"])

    if "items" in node:
        result["items"] = _convert(node["items"], defs)

    return result
