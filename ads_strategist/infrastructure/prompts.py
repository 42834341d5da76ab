"""
LLM Prompt Templates Configuration

This module contains the prompt templates used for strategy generation.
Templates use Python string formatting for dynamic content injection.
"""

import os
from typing import Dict

class PromptTemplates:
    """Collection of LLM prompt templates"""

    # Main strategy prompt template
    STRATEGY_TEMPLATE = """You're an expert Meta Ads strategist specializing in small businesses in Pakistan and South Asia.

Input Details:
- Product/Service: {product_description}
- Industry: {business_type}
- Budget: PKR {budget_amount}/{budget_period}
- Goal: {campaign_goal}
- Target Audience: {gender} audience, age {age_min}-{age_max}, located in {location}, interested in {interests}

Create a comprehensive Meta Ads strategy with:

1. FUNNEL STRATEGY: 3-stage breakdown (TOFU-MOFU-BOFU) with specific actions for each stage
2. CAMPAIGN OBJECTIVES: Recommend Meta objectives per funnel stage (Reach → Engagement → Leads → Sales)
3. AD FORMATS & PLATFORMS: Suggest ad types (Image, Video, Carousel, Reels, Stories, Click-to-WhatsApp) and platform priorities
4. AD COPY: Create compelling ad copy for each funnel stage in both English and Urdu
5. BUDGET PLANNER: Break down the budget across funnel stages with percentages
6. 7-DAY SCHEDULE: Day-by-day campaign plan with targeting and retargeting strategies

Focus on:
- Low-budget tactics suitable for Pakistani market
- WhatsApp-first funnels where appropriate
- Local cultural context and language preferences
- Practical, actionable recommendations
- ROI-focused approach

Make it comprehensive yet easy to understand for non-marketers."""

    # Short prompt version for smaller models
    CONCISE_TEMPLATE = """Meta Ads strategy (JSON) for a small business in Pakistan.
Product: {product_description}; industry: {business_type}; budget: PKR {budget_amount}/{budget_period}; goal: {campaign_goal}.
Audience: {gender}, age {age_min}-{age_max}, {location}; interests: {interests}.
Include TOFU/MOFU/BOFU funnel, objectives, ad formats and platforms, English and Urdu ad copy, budget breakdown, 7-day schedule."""

class PromptConfig:
    """Configuration for prompt selection and customization"""

    # Default prompt template to use
    DEFAULT_TEMPLATE: str = os.getenv("LLM_PROMPT_TEMPLATE", "standard")

    # Template mapping
    TEMPLATES: Dict[str, str] = {
        "standard": PromptTemplates.STRATEGY_TEMPLATE,
        "concise": PromptTemplates.CONCISE_TEMPLATE
    }

    # Custom template from environment (for advanced users)
    CUSTOM_TEMPLATE: str = os.getenv("LLM_CUSTOM_PROMPT", "")

    @classmethod
    def get_template(cls, template_name: str = None) -> str:
        """Get prompt template by name"""
        if cls.CUSTOM_TEMPLATE:
            return cls.CUSTOM_TEMPLATE

        template_name = template_name or cls.DEFAULT_TEMPLATE
        return cls.TEMPLATES.get(template_name, cls.TEMPLATES["standard"])

    @classmethod
    def format_prompt(cls, template_name: str = None, **kwargs) -> str:
        """Format prompt template with provided variables"""
        template = cls.get_template(template_name)
        return template.format(**kwargs)

# Global prompt config instance
prompt_config = PromptConfig()
