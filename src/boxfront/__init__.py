"""boxfront: dominance-and-diversity engine for multi-objective search.

A numpy implementation of the parts of a multi-objective evolutionary
algorithm that decide which solutions are better and which to keep:
dominance comparators, fast non-dominated sorting, crowding distance,
rank-and-crowding truncation, and the epsilon-box archive.

Example (survivor selection):
    >>> from boxfront import Population, truncate
    >>> pool = Population.from_objectives([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0], [5.0, 5.0]])
    >>> survivors = truncate(pool, 4)
    >>> len(survivors.pareto_front)
    4

Example (epsilon-box archive):
    >>> from boxfront import EpsilonBoxArchive, Solution
    >>> archive = EpsilonBoxArchive(1.0)
    >>> archive.add_all(Solution(objectives=o) for o in [(0, 10), (1, 9), (2, 8), (5, 5), (10, 0)])
    5
    >>> archive.add(Solution(objectives=[0.5, 10.5])).added
    False
"""

from boxfront.archive import ArchiveUpdate, EpsilonBoxArchive, NondominatedArchive
from boxfront.comparators import (
    AggregateConstraintComparator,
    ChainedComparator,
    ConstrainedDominance,
    EpsilonBoxDominance,
    LexicographicDominance,
    ParetoDominance,
    default_comparator,
)
from boxfront.config import EngineConfig
from boxfront.crowding import assign_crowding_distance, crowding_for_fronts
from boxfront.epsilons import Epsilons
from boxfront.exceptions import BoxfrontError, DimensionMismatchError
from boxfront.log import configure_logging
from boxfront.population import Population
from boxfront.primitives import (
    crowding_distance,
    dominance,
    dominates,
    dominates_matrix,
    non_dominated_sort,
)
from boxfront.protocols import DominanceComparator, SurvivorSelector
from boxfront.registry import (
    ComparatorRegistry,
    SurvivalRegistry,
    list_comparators,
    list_survivals,
)
from boxfront.results import Survivors
from boxfront.solution import Solution
from boxfront.sorting import Front, nondominated_sort, rank_array
from boxfront.survival import rank_crowding_survival, truncate

__all__ = [
    # Data model
    "Solution",
    "Epsilons",
    "Population",
    "Front",
    # Comparators
    "DominanceComparator",
    "ParetoDominance",
    "AggregateConstraintComparator",
    "ConstrainedDominance",
    "EpsilonBoxDominance",
    "LexicographicDominance",
    "ChainedComparator",
    "default_comparator",
    # Sorting and crowding
    "nondominated_sort",
    "rank_array",
    "assign_crowding_distance",
    "crowding_for_fronts",
    # Survivor selection
    "truncate",
    "rank_crowding_survival",
    "Survivors",
    "SurvivorSelector",
    # Archives
    "NondominatedArchive",
    "EpsilonBoxArchive",
    "ArchiveUpdate",
    # Array primitives
    "dominance",
    "dominates",
    "dominates_matrix",
    "non_dominated_sort",
    "crowding_distance",
    # Registry system
    "ComparatorRegistry",
    "SurvivalRegistry",
    "list_comparators",
    "list_survivals",
    # Configuration, errors, logging
    "EngineConfig",
    "BoxfrontError",
    "DimensionMismatchError",
    "configure_logging",
]
