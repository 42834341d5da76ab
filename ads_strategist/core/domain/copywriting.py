from typing import List

from ads_strategist.core.domain.catalog import BUSINESS_TEMPLATES, DEFAULT_DISCOUNT, DEFAULT_URGENCY_PHRASE
from ads_strategist.core.domain.entities import (
    AdCopy, BusinessTemplate, CampaignInput, CopyBlock, TargetAudience
)

def select_business_template(business_type: str, product_description: str) -> BusinessTemplate:
    """Industry template, or one synthesized from the product for unknown industries"""
    template = BUSINESS_TEMPLATES.get(business_type)
    if template is not None:
        return template

    return BusinessTemplate(
        product_focus=product_description,
        main_benefit=f"Experience the best {product_description}",
        urgency_phrase=DEFAULT_URGENCY_PHRASE
    )

def build_ad_copy(campaign_input: CampaignInput, template: BusinessTemplate,
                  discount: str = DEFAULT_DISCOUNT) -> List[AdCopy]:
    """English and Urdu copy for TOFU, MOFU and BOFU, in that order"""
    business = campaign_input.business_type
    product = campaign_input.product_description

    return [
        AdCopy(
            stage="TOFU",
            english=CopyBlock(
                headline=f"Discover Amazing {business} Solutions!",
                description=(
                    f"Transform your experience with our premium {product}. "
                    "Join thousands of satisfied customers who trust our quality."
                ),
                cta="Learn More"
            ),
            urdu=CopyBlock(
                headline=f"بہترین {business} حل دریافت کریں!",
                description=(
                    f"ہماری پریمیم {product} کے ساتھ اپنا تجربہ بہتر بنائیں۔ "
                    "ہزاروں مطمئن گاہکوں کے ساتھ شامل ہوں۔"
                ),
                cta="مزید جانیں"
            )
        ),
        AdCopy(
            stage="MOFU",
            english=CopyBlock(
                headline=f"Why Choose Our {business}?",
                description=(
                    "See what makes us different. Real results, proven quality, and exceptional "
                    "customer service. Get your free consultation today!"
                ),
                cta="Get Free Consultation"
            ),
            urdu=CopyBlock(
                headline=f"ہماری {business} کیوں منتخب کریں؟",
                description=(
                    "دیکھیں کہ ہم کیا مختلف ہیں۔ حقیقی نتائج، ثابت شدہ معیار، اور بہترین کسٹمر سروس۔ "
                    "آج ہی مفت مشاورت حاصل کریں!"
                ),
                cta="مفت مشاورت حاصل کریں"
            )
        ),
        AdCopy(
            stage="BOFU",
            english=CopyBlock(
                headline=f"{template.urgency_phrase}: Special Offer on {product}",
                description=(
                    f"Don't miss out! Get {discount} off your first order. Premium quality, "
                    "fast delivery, and 100% satisfaction guaranteed."
                ),
                cta="Order Now"
            ),
            urdu=CopyBlock(
                headline=f"محدود وقت: {product} پر خصوصی پیشکش",
                description=(
                    f"چھوٹ نہ جانے دیں! اپنے پہلے آرڈر پر {discount} رعایت حاصل کریں۔ "
                    "پریمیم کوالٹی، تیز ڈیلیوری، اور 100% اطمینان کی ضمانت۔"
                ),
                cta="ابھی آرڈر کریں"
            )
        ),
    ]

def describe_targeting(audience: TargetAudience) -> str:
    return f"{audience.gender} audience, age {audience.age_min}-{audience.age_max} in {audience.location}"
