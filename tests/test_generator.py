"""
Tests for the deterministic template generator.

Covers:
- Budget arithmetic (period multipliers, allocation, half-up rounding)
- Business template lookup and the synthesized default
- Bilingual ad copy interpolation
- Structural guarantees of the generated strategy
- Determinism
"""

from __future__ import annotations

import json

import pytest

from ads_strategist.core.domain import catalog
from ads_strategist.core.domain.budget import allocate, build_budget_plan, total_budget
from ads_strategist.core.domain.copywriting import (
    build_ad_copy,
    describe_targeting,
    select_business_template,
)
from ads_strategist.core.domain.errors import ValidationError
from ads_strategist.core.domain.generator import generate
from ads_strategist.core.domain.validation import parse_campaign_input


# ═══════════════════════════════════════════════════════════════════════
# 1. Budget arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestBudget:

    @pytest.mark.parametrize("period,expected", [
        ("daily", 1000),
        ("weekly", 7000),
        ("monthly", 30000),
    ])
    def test_total_budget_multipliers(self, period, expected):
        assert total_budget(1000, period) == expected

    def test_unknown_period_raises(self):
        with pytest.raises(ValidationError):
            total_budget(1000, "hourly")

    def test_skincare_scenario(self):
        plan = build_budget_plan(1000, "daily")

        assert plan.total == "1000"
        assert plan.weekly == "7000"
        assert plan.monthly == "30000"
        assert [line.amount for line in plan.breakdown] == ["500", "300", "200"]
        assert [line.percentage for line in plan.breakdown] == ["50", "30", "20"]

    def test_breakdown_stage_order(self):
        plan = build_budget_plan(500, "weekly")
        assert [line.stage for line in plan.breakdown] == [
            "TOFU (Awareness)", "MOFU (Consideration)", "BOFU (Conversion)"
        ]

    @pytest.mark.parametrize("amount,period,expected", [
        (1, "daily", [1, 0, 0]),
        (333, "weekly", [1166, 699, 466]),
        (77, "monthly", [1155, 693, 462]),
        (12345, "daily", [6173, 3704, 2469]),
    ])
    def test_amounts_follow_allocation(self, amount, period, expected):
        plan = build_budget_plan(amount, period)
        total = total_budget(amount, period)

        assert [int(line.amount) for line in plan.breakdown] == expected
        assert plan.total == str(total)

    def test_weekly_and_monthly_project_entered_amount(self):
        plan = build_budget_plan(200, "monthly")
        assert plan.total == "6000"
        assert plan.weekly == "1400"
        assert plan.monthly == "6000"

    @pytest.mark.parametrize("total,percent,expected", [
        (1, 50, 1),
        (3, 50, 2),
        (5, 30, 2),
        (5, 20, 1),
        (7, 20, 1),
        (1000, 30, 300),
    ])
    def test_allocate_rounds_half_up(self, total, percent, expected):
        assert allocate(total, percent) == expected

    def test_stages_are_rounded_independently(self):
        plan = build_budget_plan(5, "daily")
        assert [line.amount for line in plan.breakdown] == ["3", "2", "1"]
        assert plan.total == "5"

    def test_large_totals_stay_exact(self):
        # above 2**53 a float product would lose the last digit
        plan = build_budget_plan(9007199254740993, "daily")
        assert [line.amount for line in plan.breakdown] == [
            "4503599627370497", "2702159776422298", "1801439850948199"
        ]
        assert plan.monthly == "270215977642229790"

    def test_percentages_match_allocation(self):
        assert {key: percent / 100 for key, percent in catalog.BUDGET_PERCENTAGES.items()} == catalog.BUDGET_ALLOCATION

    def test_allocations_sum_to_one(self):
        assert sum(catalog.BUDGET_ALLOCATION.values()) == pytest.approx(1.0)


# ═══════════════════════════════════════════════════════════════════════
# 2. Templates and copy
# ═══════════════════════════════════════════════════════════════════════


class TestCopywriting:

    def test_known_business_template(self):
        template = select_business_template("Food & Restaurants", "biryani")
        assert template.urgency_phrase == "Today's special offer"

    def test_default_template_from_product(self):
        template = select_business_template("Pet Grooming", "dog shampoo")
        assert template.product_focus == "dog shampoo"
        assert template.main_benefit == "Experience the best dog shampoo"
        assert template.urgency_phrase == "Special limited offer"

    def test_copy_interpolation(self, campaign_input):
        template = select_business_template(campaign_input.business_type, campaign_input.product_description)
        copy = build_ad_copy(campaign_input, template)

        assert [c.stage for c in copy] == ["TOFU", "MOFU", "BOFU"]
        assert copy[0].english.headline == "Discover Amazing Beauty & Wellness Solutions!"
        assert "organic skincare" in copy[0].english.description
        assert copy[1].urdu.headline == "ہماری Beauty & Wellness کیوں منتخب کریں؟"
        assert copy[2].english.headline == "Limited time beauty offer: Special Offer on organic skincare"
        assert "20% off" in copy[2].english.description
        assert "20%" in copy[2].urdu.description

    def test_custom_discount(self, campaign_input):
        template = select_business_template(campaign_input.business_type, campaign_input.product_description)
        copy = build_ad_copy(campaign_input, template, discount="35%")
        assert "35% off" in copy[2].english.description

    def test_targeting_sentence(self, campaign_input):
        assert describe_targeting(campaign_input.target_audience) == "female audience, age 18-35 in Lahore"


# ═══════════════════════════════════════════════════════════════════════
# 3. Generated strategy
# ═══════════════════════════════════════════════════════════════════════


class TestGenerate:

    def test_structure(self, campaign_input):
        strategy = generate(campaign_input).to_dict()

        assert list(strategy) == [
            "funnelStrategy", "campaignObjectives", "adFormats",
            "adCopy", "budgetPlan", "campaignSchedule",
        ]
        assert [s["phase"] for s in strategy["funnelStrategy"]] == ["Awareness", "Consideration", "Conversion"]
        assert [o["stage"] for o in strategy["campaignObjectives"]] == ["TOFU", "MOFU", "BOFU"]
        assert [c["stage"] for c in strategy["adCopy"]] == ["TOFU", "MOFU", "BOFU"]
        assert [d["day"] for d in strategy["campaignSchedule"]] == [1, 2, 3, 4, 5, 6, 7]
        assert len(strategy["adFormats"]["formats"]) == 4
        assert len(strategy["adFormats"]["platforms"]) == 4

    def test_every_copy_block_is_filled(self, campaign_input):
        for entry in generate(campaign_input).to_dict()["adCopy"]:
            for language in ("english", "urdu"):
                block = entry[language]
                assert block["headline"] and block["description"] and block["cta"]

    def test_day_one_targeting_from_audience(self, campaign_input):
        schedule = generate(campaign_input).to_dict()["campaignSchedule"]
        assert schedule[0]["targeting"] == "female audience, age 18-35 in Lahore"
        assert schedule[1]["targeting"] == "Lookalike audiences based on existing customers"

    def test_catalog_is_not_mutated(self, campaign_input):
        generate(campaign_input)
        assert catalog.CAMPAIGN_SCHEDULE[0]["targeting"] == ""

    def test_budget_plan_in_output(self, campaign_input):
        plan = generate(campaign_input).to_dict()["budgetPlan"]
        assert plan["total"] == "1000"
        assert [line["amount"] for line in plan["breakdown"]] == ["500", "300", "200"]

    def test_deterministic(self, payload):
        first = json.dumps(generate(parse_campaign_input(payload)).to_dict(), ensure_ascii=False)
        second = json.dumps(generate(parse_campaign_input(payload)).to_dict(), ensure_ascii=False)
        assert first == second

    def test_unknown_business_type_falls_back(self, payload):
        payload["businessType"] = "Other"
        strategy = generate(parse_campaign_input(payload)).to_dict()
        assert strategy["adCopy"][2]["english"]["headline"] == (
            "Special limited offer: Special Offer on organic skincare"
        )
