"""Registry system for dominance comparators and survival strategies.

Drivers usually pick a dominance relation and a survival strategy from
configuration files. Rather than hardcoding the choice, factories are
registered by name and retrieved with their configuration:

1. **ComparatorRegistry**: factories returning DominanceComparator instances
2. **SurvivalRegistry**: factories returning SurvivorSelector callables

Basic usage:
    ```python
    from boxfront.registry import ComparatorRegistry, list_comparators

    comparator = ComparatorRegistry.get("epsilon", epsilons=[0.01, 0.05])
    available = list_comparators()  # ["constrained", "epsilon", ...]
    ```

Registering a custom factory:
    ```python
    ComparatorRegistry.register("first_objective", lambda: FirstObjective())
    ```
"""

from collections.abc import Callable

from boxfront.comparators import (
    ConstrainedDominance,
    EpsilonBoxDominance,
    LexicographicDominance,
    ParetoDominance,
)
from boxfront.protocols import DominanceComparator, SurvivorSelector


class _Registry:
    """Class-level name -> factory mapping shared by the concrete registries.

    Each subclass owns its own ``_registry`` dictionary and a ``_kind``
    label used in error messages.
    """

    _registry: dict[str, Callable[..., object]]
    _kind = "strategy"

    @classmethod
    def register(cls, name: str, factory: Callable[..., object]) -> None:
        """Register a factory under name. Overwrites an existing entry.

        Args:
            name: Unique name for the factory.
            factory: Callable accepting configuration keyword arguments.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs):
        """Build a configured instance by name.

        Args:
            name: Name of the registered factory.
            **kwargs: Configuration passed to the factory.

        Raises:
            KeyError: If name is not registered. The message lists the
                available names.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"{cls._kind} '{name}' not found. Available: {available}")
        return cls._registry[name](**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted registered names."""
        return sorted(cls._registry.keys())


class ComparatorRegistry(_Registry):
    """Registry of dominance comparator factories.

    Built-in names:
        - ``pareto``: ParetoDominance
        - ``constrained``: ConstrainedDominance
        - ``epsilon``: EpsilonBoxDominance, requires ``epsilons=...``
        - ``lexicographic``: LexicographicDominance

    Example:
        ```python
        comparator = ComparatorRegistry.get("constrained")
        fronts = nondominated_sort(pool, comparator)
        ```
    """

    _registry: dict[str, Callable[..., DominanceComparator]] = {}
    _kind = "Comparator"


class SurvivalRegistry(_Registry):
    """Registry of survivor selection strategy factories.

    Built-in names (registered by ``boxfront.survival``):
        - ``rank_crowding``: rank_crowding_survival

    Example:
        ```python
        selector = SurvivalRegistry.get("rank_crowding", comparator="constrained")
        survivor_indices, state = selector(combined_pop, n_survivors=100)
        ```
    """

    _registry: dict[str, Callable[..., SurvivorSelector]] = {}
    _kind = "Survival strategy"


def list_comparators() -> list[str]:
    """List all registered comparator names."""
    return ComparatorRegistry.list()


def list_survivals() -> list[str]:
    """List all registered survivor selection strategies."""
    return SurvivalRegistry.list()


ComparatorRegistry.register("pareto", ParetoDominance)
ComparatorRegistry.register("constrained", ConstrainedDominance)
ComparatorRegistry.register("epsilon", EpsilonBoxDominance)
ComparatorRegistry.register("lexicographic", LexicographicDominance)
