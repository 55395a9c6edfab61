"""
Authorship Domain - Composition Root

AuthorshipDomain builds the four aggregate roots exactly once and owns
them for its whole lifetime.

Ownership rules:
- One instance of each aggregate root per domain object
- References are read-only after construction (frozen dataclass)
- Nothing else in the package depends on the domain root
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import structlog

from daffodil.authorship.aggregates import (
    AggregateRoot,
    Features,
    Interactions,
    Operations,
    Presentations,
)

# stdlib-backed: silent for debug until setup_logging() configures handlers
logger = structlog.wrap_logger(logging.getLogger(__name__))


@dataclass(frozen=True)
class AuthorshipDomain:
    """
    Root factory for the Authorship domain.

    Example:
        domain = AuthorshipDomain()
        domain.operations       # Operations()
        domain.operations = ... # FrozenInstanceError
    """

    operations: Operations = field(default_factory=Operations, init=False)
    presentations: Presentations = field(default_factory=Presentations, init=False)
    features: Features = field(default_factory=Features, init=False)
    interactions: Interactions = field(default_factory=Interactions, init=False)

    def __post_init__(self) -> None:
        logger.debug(
            "authorship_domain_initialized",
            aggregates=[type(root).__name__ for root in self.aggregates()],
        )

    def aggregates(self) -> tuple[AggregateRoot, ...]:
        """Aggregate roots in declaration order (no new instances)."""
        return (self.operations, self.presentations, self.features, self.interactions)
