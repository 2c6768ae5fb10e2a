"""StrategyService: report which delivery and payment strategies are available."""

from __future__ import annotations

from orderflow.services.base import BaseService
from orderflow.services.result import ServiceResult
from orderflow.strategies.registry import list_strategies


class StrategyService(BaseService):
    def list_strategies(self) -> ServiceResult:
        """List registered strategies, including any contributed by plugins."""
        return ServiceResult(ok=True, op="list_strategies", data=list_strategies())
