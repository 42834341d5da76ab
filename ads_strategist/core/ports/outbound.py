from abc import ABC, abstractmethod
from ads_strategist.core.domain.entities import CampaignInput, CampaignStrategy

class StrategyModelPort(ABC):
    """Port for generative-model strategy creation"""

    @abstractmethod
    async def generate_strategy(self, campaign_input: CampaignInput) -> CampaignStrategy:
        """Generate a strategy; raise UpstreamError on any failure"""
        pass
