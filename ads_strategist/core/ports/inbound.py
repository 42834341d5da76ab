from abc import ABC, abstractmethod
from typing import Any, Dict
from ads_strategist.core.domain.entities import GeneratedStrategy

class StrategyUseCasePort(ABC):
    """Port for the strategy generation use case"""

    @abstractmethod
    async def generate_strategy(self, payload: Dict[str, Any]) -> GeneratedStrategy:
        """Validate a raw submission and produce a strategy"""
        pass
