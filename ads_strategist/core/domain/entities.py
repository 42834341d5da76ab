from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

@dataclass(frozen=True)
class TargetAudience:
    """Target audience domain entity"""
    age_min: int
    age_max: int
    location: str
    gender: str = "all"
    interests: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class CampaignInput:
    """Normalized campaign submission"""
    product_description: str
    business_type: str
    budget_amount: int
    budget_period: str
    campaign_goal: str
    target_audience: TargetAudience

@dataclass(frozen=True)
class BusinessTemplate:
    """Industry-specific copy hints"""
    product_focus: str
    main_benefit: str
    urgency_phrase: str

@dataclass
class FunnelStage:
    stage: str
    phase: str
    description: str
    actions: List[str]

    def to_dict(self) -> dict:
        return {
            "stage": self.stage,
            "phase": self.phase,
            "description": self.description,
            "actions": list(self.actions)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FunnelStage":
        return cls(
            stage=data["stage"],
            phase=data["phase"],
            description=data["description"],
            actions=list(data["actions"])
        )

@dataclass
class CampaignObjective:
    stage: str
    objective: str
    description: str
    expected_outcome: str

    def to_dict(self) -> dict:
        return {
            "stage": self.stage,
            "objective": self.objective,
            "description": self.description,
            "expectedOutcome": self.expected_outcome
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CampaignObjective":
        return cls(
            stage=data["stage"],
            objective=data["objective"],
            description=data["description"],
            expected_outcome=data["expectedOutcome"]
        )

@dataclass
class AdFormat:
    type: str
    description: str
    priority: str

    def to_dict(self) -> dict:
        return {"type": self.type, "description": self.description, "priority": self.priority}

@dataclass
class Platform:
    name: str
    reason: str
    priority: str

    def to_dict(self) -> dict:
        return {"name": self.name, "reason": self.reason, "priority": self.priority}

@dataclass
class AdFormats:
    """Recommended ad types and placements"""
    formats: List[AdFormat]
    platforms: List[Platform]

    def to_dict(self) -> dict:
        return {
            "formats": [f.to_dict() for f in self.formats],
            "platforms": [p.to_dict() for p in self.platforms]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdFormats":
        return cls(
            formats=[AdFormat(**f) for f in data["formats"]],
            platforms=[Platform(**p) for p in data["platforms"]]
        )

@dataclass
class CopyBlock:
    headline: str
    description: str
    cta: str

    def to_dict(self) -> dict:
        return {"headline": self.headline, "description": self.description, "cta": self.cta}

@dataclass
class AdCopy:
    """Bilingual ad copy for one funnel stage"""
    stage: str
    english: CopyBlock
    urdu: CopyBlock

    def to_dict(self) -> dict:
        return {
            "stage": self.stage,
            "english": self.english.to_dict(),
            "urdu": self.urdu.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdCopy":
        return cls(
            stage=data["stage"],
            english=CopyBlock(**data["english"]),
            urdu=CopyBlock(**data["urdu"])
        )

@dataclass
class BudgetLine:
    stage: str
    amount: str
    percentage: str
    description: str

    def to_dict(self) -> dict:
        return {
            "stage": self.stage,
            "amount": self.amount,
            "percentage": self.percentage,
            "description": self.description
        }

@dataclass
class BudgetPlan:
    """Budget totals and per-stage allocation, all rendered as strings"""
    total: str
    weekly: str
    monthly: str
    breakdown: List[BudgetLine]

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "weekly": self.weekly,
            "monthly": self.monthly,
            "breakdown": [line.to_dict() for line in self.breakdown]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BudgetPlan":
        return cls(
            total=data["total"],
            weekly=data["weekly"],
            monthly=data["monthly"],
            breakdown=[BudgetLine(**line) for line in data["breakdown"]]
        )

@dataclass
class ScheduleDay:
    day: int
    focus: str
    stage: str
    actions: List[str]
    targeting: str
    retargeting: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "day": self.day,
            "focus": self.focus,
            "stage": self.stage,
            "actions": list(self.actions),
            "targeting": self.targeting
        }

        if self.retargeting is not None:
            result["retargeting"] = self.retargeting

        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleDay":
        return cls(
            day=data["day"],
            focus=data["focus"],
            stage=data["stage"],
            actions=list(data["actions"]),
            targeting=data["targeting"],
            retargeting=data.get("retargeting")
        )

@dataclass
class CampaignStrategy:
    """Complete Meta Ads strategy domain entity"""
    funnel_strategy: List[FunnelStage]
    campaign_objectives: List[CampaignObjective]
    ad_formats: AdFormats
    ad_copy: List[AdCopy]
    budget_plan: BudgetPlan
    campaign_schedule: List[ScheduleDay]

    def to_dict(self) -> dict:
        """Convert to dictionary for API response"""
        return {
            "funnelStrategy": [s.to_dict() for s in self.funnel_strategy],
            "campaignObjectives": [o.to_dict() for o in self.campaign_objectives],
            "adFormats": self.ad_formats.to_dict(),
            "adCopy": [c.to_dict() for c in self.ad_copy],
            "budgetPlan": self.budget_plan.to_dict(),
            "campaignSchedule": [d.to_dict() for d in self.campaign_schedule]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CampaignStrategy":
        """Build from an already schema-checked camelCase dictionary"""
        return cls(
            funnel_strategy=[FunnelStage.from_dict(s) for s in data["funnelStrategy"]],
            campaign_objectives=[CampaignObjective.from_dict(o) for o in data["campaignObjectives"]],
            ad_formats=AdFormats.from_dict(data["adFormats"]),
            ad_copy=[AdCopy.from_dict(c) for c in data["adCopy"]],
            budget_plan=BudgetPlan.from_dict(data["budgetPlan"]),
            campaign_schedule=[ScheduleDay.from_dict(d) for d in data["campaignSchedule"]]
        )

@dataclass
class GeneratedStrategy:
    """Strategy together with the path that produced it"""
    strategy: CampaignStrategy
    source: str
