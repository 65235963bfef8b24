"""Survival strategies for generational drivers."""

from boxfront.registry import SurvivalRegistry
from boxfront.survival.rank_crowding import rank_crowding_survival, truncate

# Register built-in survival strategies
SurvivalRegistry.register("rank_crowding", rank_crowding_survival)

__all__ = ["rank_crowding_survival", "truncate"]
