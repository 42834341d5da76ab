"""
Static strategy catalog

Fixed content emitted by the template generator, plus the enumerations the
intake form offers. Edit the copy here; nothing in this module is derived
from user input.
"""

from typing import Dict, Literal, Tuple, get_args

from ads_strategist.core.domain.entities import BusinessTemplate

BudgetPeriod = Literal["daily", "weekly", "monthly"]
Gender = Literal["all", "male", "female"]
CampaignGoal = Literal[
    "Brand Awareness",
    "Lead Generation",
    "Sales/Conversions",
    "Website Traffic",
    "App Installs",
    "Engagement",
    "Video Views",
]

# Whole percents so the breakdown stays in integer arithmetic
BUDGET_PERCENTAGES: Dict[str, int] = {
    "TOFU": 50,  # awareness
    "MOFU": 30,  # consideration
    "BOFU": 20,  # conversion
}

BUDGET_ALLOCATION: Dict[str, float] = {
    key: percent / 100 for key, percent in BUDGET_PERCENTAGES.items()
}

PERIOD_MULTIPLIERS: Dict[str, int] = {
    "daily": 1,
    "weekly": 7,
    "monthly": 30,
}

# Largest accepted budgetAmount (per period)
MAX_BUDGET_AMOUNT = 10 ** 12

DEFAULT_DISCOUNT = "20%"
DEFAULT_URGENCY_PHRASE = "Special limited offer"

AGE_RANGE: Tuple[int, int] = (13, 65)

GENDERS: Tuple[str, ...] = get_args(Gender)

BUSINESS_TYPES: Tuple[str, ...] = (
    "E-commerce/Online Store",
    "Beauty & Wellness",
    "Fashion & Apparel",
    "Food & Restaurants",
    "Health & Fitness",
    "Education & Training",
    "Real Estate",
    "Technology & Software",
    "Professional Services",
    "Home & Garden",
    "Travel & Tourism",
    "Other",
)

CAMPAIGN_GOALS: Tuple[str, ...] = get_args(CampaignGoal)

BUSINESS_TEMPLATES: Dict[str, BusinessTemplate] = {
    "Beauty & Wellness": BusinessTemplate(
        product_focus="skincare and beauty products",
        main_benefit="Transform your skin with natural ingredients",
        urgency_phrase="Limited time beauty offer",
    ),
    "E-commerce/Online Store": BusinessTemplate(
        product_focus="online shopping experience",
        main_benefit="Shop premium products with fast delivery",
        urgency_phrase="Exclusive online deal",
    ),
    "Food & Restaurants": BusinessTemplate(
        product_focus="delicious food and dining",
        main_benefit="Taste authentic flavors made fresh daily",
        urgency_phrase="Today's special offer",
    ),
    "Fashion & Apparel": BusinessTemplate(
        product_focus="trendy fashion and style",
        main_benefit="Look amazing with our latest collection",
        urgency_phrase="Fashion sale ending soon",
    ),
}

FUNNEL_STAGES = (
    {
        "stage": "TOFU (Top of Funnel)",
        "phase": "Awareness",
        "description": "Build brand awareness and reach new potential customers who don't know about your product yet.",
        "actions": [
            "Create engaging video content showcasing your product benefits",
            "Use broad targeting to reach new audiences",
            "Focus on brand storytelling and value proposition",
            "Implement reach and brand awareness campaigns",
        ],
    },
    {
        "stage": "MOFU (Middle of Funnel)",
        "phase": "Consideration",
        "description": "Engage with people who have shown interest and nurture them towards making a purchase decision.",
        "actions": [
            "Retarget website visitors with detailed product information",
            "Share customer testimonials and social proof",
            "Offer free trials, samples, or consultations",
            "Create comparison content and educational materials",
        ],
    },
    {
        "stage": "BOFU (Bottom of Funnel)",
        "phase": "Conversion",
        "description": "Convert interested prospects into paying customers with compelling offers and clear calls-to-action.",
        "actions": [
            "Retarget cart abandoners with special offers",
            "Use dynamic product ads for e-commerce",
            "Create urgency with limited-time offers",
            "Implement conversion-focused campaigns with clear CTAs",
        ],
    },
)

CAMPAIGN_OBJECTIVES = (
    {
        "stage": "TOFU",
        "objective": "Reach",
        "description": "Maximize the number of people who see your ads to build brand awareness",
        "expectedOutcome": "Increased brand recognition and expanded audience reach",
    },
    {
        "stage": "MOFU",
        "objective": "Engagement",
        "description": "Encourage interactions with your content to build relationships",
        "expectedOutcome": "Higher engagement rates and qualified leads",
    },
    {
        "stage": "BOFU",
        "objective": "Conversions",
        "description": "Drive specific actions like purchases, sign-ups, or inquiries",
        "expectedOutcome": "Direct sales and measurable ROI",
    },
)

AD_FORMATS = {
    "formats": [
        {
            "type": "Video Ads",
            "description": "Engaging video content that tells your brand story effectively",
            "priority": "High",
        },
        {
            "type": "Carousel Ads",
            "description": "Showcase multiple products or features in a single ad",
            "priority": "High",
        },
        {
            "type": "Single Image Ads",
            "description": "Simple, cost-effective ads with strong visual impact",
            "priority": "Medium",
        },
        {
            "type": "Click-to-WhatsApp Ads",
            "description": "Direct customers to WhatsApp for instant communication",
            "priority": "High",
        },
    ],
    "platforms": [
        {
            "name": "Facebook Feed",
            "reason": "Largest user base in Pakistan with diverse demographics",
            "priority": "High",
        },
        {
            "name": "Instagram Stories",
            "reason": "High engagement rates among younger demographics",
            "priority": "High",
        },
        {
            "name": "WhatsApp",
            "reason": "Most popular messaging platform in Pakistan",
            "priority": "High",
        },
        {
            "name": "Facebook Marketplace",
            "reason": "Great for local businesses and e-commerce",
            "priority": "Medium",
        },
    ],
}

# (stage label, description) per allocation key, in funnel order
BUDGET_STAGES = (
    ("TOFU", "TOFU (Awareness)", "Build brand awareness and reach new audiences"),
    ("MOFU", "MOFU (Consideration)", "Engage interested prospects and build trust"),
    ("BOFU", "BOFU (Conversion)", "Convert qualified leads into customers"),
)

# Day 1 targeting is filled in from the audience at generation time
CAMPAIGN_SCHEDULE = (
    {
        "day": 1,
        "focus": "Campaign Launch & Awareness",
        "stage": "TOFU",
        "actions": [
            "Launch brand awareness campaigns",
            "Set up Facebook and Instagram ads",
            "Monitor initial performance metrics",
        ],
        "targeting": "",
        "retargeting": "Set up website visitor tracking pixel",
    },
    {
        "day": 2,
        "focus": "Content Engagement",
        "stage": "TOFU",
        "actions": ["Share engaging video content", "Post customer testimonials", "Engage with comments and messages"],
        "targeting": "Lookalike audiences based on existing customers",
        "retargeting": "Create custom audience from video viewers",
    },
    {
        "day": 3,
        "focus": "Lead Generation",
        "stage": "MOFU",
        "actions": [
            "Launch lead generation campaigns",
            "Offer free consultations or samples",
            "Set up WhatsApp Business integration",
        ],
        "targeting": "Website visitors and engaged users",
        "retargeting": "Target people who engaged with previous ads",
    },
    {
        "day": 4,
        "focus": "Social Proof & Trust Building",
        "stage": "MOFU",
        "actions": ["Share case studies and success stories", "Highlight customer reviews", "Create educational content"],
        "targeting": "Custom audiences from lead forms",
        "retargeting": "Re-engage people who downloaded content",
    },
    {
        "day": 5,
        "focus": "Conversion Push",
        "stage": "BOFU",
        "actions": ["Launch conversion campaigns", "Create urgency with limited offers", "Set up dynamic product ads"],
        "targeting": "Warm audiences and cart abandoners",
        "retargeting": "Target people who visited product pages",
    },
    {
        "day": 6,
        "focus": "Optimization & Scaling",
        "stage": "All Stages",
        "actions": ["Analyze performance data", "Optimize underperforming ads", "Scale successful campaigns"],
        "targeting": "Best performing audience segments",
        "retargeting": "Expand successful retargeting campaigns",
    },
    {
        "day": 7,
        "focus": "Review & Planning",
        "stage": "All Stages",
        "actions": ["Comprehensive performance review", "Plan next week's strategy", "Adjust budgets based on results"],
        "targeting": "Refined audience based on week's data",
        "retargeting": "Set up advanced retargeting sequences",
    },
)
