"""Engine configuration consumed from the driving algorithm.

The engine needs only two settings: which dominance relation to rank with,
and, when epsilon dominance or the archive is used, the epsilon tolerances.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from boxfront.archive import EpsilonBoxArchive
from boxfront.comparators import default_comparator
from boxfront.epsilons import Epsilons
from boxfront.protocols import DominanceComparator
from boxfront.registry import ComparatorRegistry


@dataclass(frozen=True)
class EngineConfig:
    """Settings for building comparators and archives.

    Attributes:
        comparator: Name registered in ComparatorRegistry, or None to pick
            Pareto dominance (constrained Pareto when n_constraints > 0).
        epsilons: Tolerances for the "epsilon" comparator and the archive.
        n_constraints: Number of constraints the problem declares.

    Example:
        >>> cfg = EngineConfig(epsilons=[0.01, 0.05])
        >>> archive = cfg.build_archive()
        >>> cfg.build_comparator()
        ParetoDominance()
    """

    comparator: str | None = None
    epsilons: float | Sequence[float] | Epsilons | None = None
    n_constraints: int = 0

    def __post_init__(self) -> None:
        """Normalize epsilons and validate the settings.

        Raises:
            ValueError: If n_constraints is negative, the comparator name is
                empty, or the tolerances are invalid.
        """
        if self.n_constraints < 0:
            raise ValueError(f"n_constraints must be non-negative, got {self.n_constraints}")
        if self.comparator is not None and not self.comparator:
            raise ValueError("comparator name must not be empty")
        if self.epsilons is not None and not isinstance(self.epsilons, Epsilons):
            object.__setattr__(self, "epsilons", Epsilons(self.epsilons))

    def build_comparator(self) -> DominanceComparator:
        """Build the configured dominance comparator.

        Raises:
            KeyError: If the comparator name is not registered.
            ValueError: If "epsilon" is requested without epsilons.
        """
        if self.comparator is None:
            return default_comparator(self.n_constraints)
        if self.comparator == "epsilon":
            if self.epsilons is None:
                raise ValueError("the 'epsilon' comparator requires epsilons")
            return ComparatorRegistry.get("epsilon", epsilons=self.epsilons)
        return ComparatorRegistry.get(self.comparator)

    def build_archive(self) -> EpsilonBoxArchive:
        """Build an empty epsilon-box archive.

        Raises:
            ValueError: If no epsilons are configured.
        """
        if self.epsilons is None:
            raise ValueError("an epsilon-box archive requires epsilons")
        return EpsilonBoxArchive(self.epsilons)
