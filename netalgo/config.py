"""Configuration classes for netalgo components."""

from dataclasses import dataclass
from typing import Optional

from netalgo.types.base import AugmentSearch


@dataclass
class AlgorithmConfig:
    """Defaults consulted by algorithm entry points when no explicit value is given."""

    # Cap on augmenting iterations per max-flow call; None means run to completion
    max_augmentations: Optional[int] = None

    # Augmenting-path traversal used by calc_max_flow when none is requested
    default_augment_search: AugmentSearch = AugmentSearch.BFS

    # Number of augmentations between DEBUG progress records
    progress_log_interval: int = 1000

    def resolve_max_augmentations(self, value: Optional[int]) -> Optional[int]:
        """Return the explicit limit if given, else the configured default."""
        limit = self.max_augmentations if value is None else value
        if limit is not None and limit < 0:
            raise ValueError(f"max_augmentations must be non-negative, got {limit}")
        return limit


# Global configuration instance
ALGO_CONFIG = AlgorithmConfig()
