"""Shared fixtures for the strategy service tests."""

from __future__ import annotations

import copy

import pytest

from ads_strategist.core.domain.validation import parse_campaign_input


SKINCARE_PAYLOAD = {
    "productDescription": "organic skincare",
    "businessType": "Beauty & Wellness",
    "budgetAmount": "1000",
    "budgetPeriod": "daily",
    "campaignGoal": "Sales/Conversions",
    "targetAudience": {
        "ageMin": 18,
        "ageMax": 35,
        "location": "Lahore",
        "gender": "female",
        "interests": ["Beauty"],
    },
}


@pytest.fixture
def payload():
    """A fresh copy of a valid form submission."""
    return copy.deepcopy(SKINCARE_PAYLOAD)


@pytest.fixture
def campaign_input(payload):
    return parse_campaign_input(payload)
