"""
Authorship Domain - Aggregate Roots

The Authorship domain is split into four conceptual areas:
- Operations
- Presentations
- Features
- Interactions

Each area has its own aggregate root. They carry no state yet; they are
typed extension points owned by AuthorshipDomain.
"""

from daffodil.authorship.aggregates import (
    AggregateRoot,
    Features,
    Interactions,
    Operations,
    Presentations,
)

__all__ = [
    "AggregateRoot",
    "Features",
    "Interactions",
    "Operations",
    "Presentations",
]
