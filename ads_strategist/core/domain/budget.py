from ads_strategist.core.domain.catalog import BUDGET_PERCENTAGES, BUDGET_STAGES, PERIOD_MULTIPLIERS
from ads_strategist.core.domain.entities import BudgetLine, BudgetPlan
from ads_strategist.core.domain.errors import ValidationError

def total_budget(amount: int, period: str) -> int:
    """Total spend for one budget period"""
    try:
        multiplier = PERIOD_MULTIPLIERS[period]
    except KeyError:
        raise ValidationError("budgetPeriod", f"unknown period '{period}'")
    return amount * multiplier

def allocate(total: int, percent: int) -> int:
    """percent% of total, rounding .5 upwards like Math.round.

    Integer arithmetic only, so large totals stay exact.
    """
    return (total * percent * 2 + 100) // 200

def build_budget_plan(amount: int, period: str) -> BudgetPlan:
    """Split the period total across funnel stages.

    Each stage is rounded on its own, so the amounts can sum to one more
    than the total (5 splits as 3 + 2 + 1). weekly and monthly are
    projections of the entered amount as a daily rate.
    """
    total = total_budget(amount, period)

    breakdown = [
        BudgetLine(
            stage=label,
            amount=str(allocate(total, BUDGET_PERCENTAGES[key])),
            percentage=str(BUDGET_PERCENTAGES[key]),
            description=description
        )
        for key, label, description in BUDGET_STAGES
    ]

    return BudgetPlan(
        total=str(total),
        weekly=str(amount * PERIOD_MULTIPLIERS["weekly"]),
        monthly=str(amount * PERIOD_MULTIPLIERS["monthly"]),
        breakdown=breakdown
    )
