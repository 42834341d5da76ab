"""
Tests for the pydantic strategy schema and its Gemini conversion.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError as SchemaValidationError

from ads_strategist.adapters.external.strategy_schema import CampaignStrategyModel, to_gemini_schema
from ads_strategist.core.domain.entities import CampaignStrategy
from ads_strategist.core.domain.generator import generate


class TestCampaignStrategyModel:

    def test_generated_strategy_validates(self, campaign_input):
        data = generate(campaign_input).to_dict()
        model = CampaignStrategyModel.model_validate(data)
        assert model.model_dump(by_alias=True, exclude_none=True) == data

    def test_round_trip_through_domain(self, campaign_input):
        data = generate(campaign_input).to_dict()
        assert CampaignStrategy.from_dict(data).to_dict() == data

    def test_rejects_wrong_stage_count(self, campaign_input):
        data = generate(campaign_input).to_dict()
        data["adCopy"] = data["adCopy"][:2]
        with pytest.raises(SchemaValidationError):
            CampaignStrategyModel.model_validate(data)

    def test_rejects_missing_section(self, campaign_input):
        data = generate(campaign_input).to_dict()
        del data["budgetPlan"]
        with pytest.raises(SchemaValidationError):
            CampaignStrategyModel.model_validate(data)

    def test_rejects_empty_headline(self, campaign_input):
        data = generate(campaign_input).to_dict()
        data["adCopy"][0]["urdu"]["headline"] = ""
        with pytest.raises(SchemaValidationError):
            CampaignStrategyModel.model_validate(data)

    def test_rejects_repeated_schedule_days(self, campaign_input):
        data = generate(campaign_input).to_dict()
        for entry in data["campaignSchedule"]:
            entry["day"] = 1
        with pytest.raises(SchemaValidationError, match="1 to 7"):
            CampaignStrategyModel.model_validate(data)

    def test_rejects_shuffled_schedule(self, campaign_input):
        data = generate(campaign_input).to_dict()
        data["campaignSchedule"].reverse()
        with pytest.raises(SchemaValidationError):
            CampaignStrategyModel.model_validate(data)

    @pytest.mark.parametrize("section", ["funnelStrategy", "campaignObjectives", "adCopy"])
    def test_rejects_reversed_funnel_stages(self, campaign_input, section):
        data = generate(campaign_input).to_dict()
        data[section].reverse()
        with pytest.raises(SchemaValidationError, match="TOFU, MOFU, BOFU"):
            CampaignStrategyModel.model_validate(data)

    def test_rejects_reversed_budget_breakdown(self, campaign_input):
        data = generate(campaign_input).to_dict()
        data["budgetPlan"]["breakdown"].reverse()
        with pytest.raises(SchemaValidationError):
            CampaignStrategyModel.model_validate(data)

    def test_accepts_labelled_stages(self, campaign_input):
        data = generate(campaign_input).to_dict()
        data["adCopy"][0]["stage"] = "tofu (awareness)"
        CampaignStrategyModel.model_validate(data)

    def test_retargeting_is_optional(self, campaign_input):
        data = generate(campaign_input).to_dict()
        del data["campaignSchedule"][6]["retargeting"]
        model = CampaignStrategyModel.model_validate(data)
        assert model.campaign_schedule[6].retargeting is None


class TestGeminiSchema:

    @pytest.fixture
    def schema(self):
        return to_gemini_schema(CampaignStrategyModel)

    def test_top_level_shape(self, schema):
        assert schema["type"] == "OBJECT"
        assert schema["propertyOrdering"] == [
            "funnelStrategy", "campaignObjectives", "adFormats",
            "adCopy", "budgetPlan", "campaignSchedule",
        ]
        assert set(schema["required"]) == set(schema["propertyOrdering"])

    def test_refs_are_inlined(self, schema):
        assert "$ref" not in repr(schema)
        assert "$defs" not in schema
        stage = schema["properties"]["funnelStrategy"]["items"]
        assert stage["type"] == "OBJECT"
        assert stage["properties"]["actions"] == {"type": "ARRAY", "items": {"type": "STRING"}}

    def test_item_counts(self, schema):
        schedule = schema["properties"]["campaignSchedule"]
        assert schedule["minItems"] == 7
        assert schedule["maxItems"] == 7

    def test_camel_case_keys(self, schema):
        objective = schema["properties"]["campaignObjectives"]["items"]
        assert "expectedOutcome" in objective["properties"]

    def test_optional_field_is_nullable(self, schema):
        day = schema["properties"]["campaignSchedule"]["items"]
        assert day["properties"]["retargeting"]["nullable"] is True
        assert "retargeting" not in day["required"]
        assert day["properties"]["day"]["type"] == "INTEGER"
