"""
Aggregates - Authorship Consistency Boundaries

An aggregate root is the entry point to a cluster of domain objects.

The four roots below are empty placeholders:
1. No fields
2. No operations
3. Equality is identity (two Operations() are two different roots)

None of them is a subclass of another.
"""

from __future__ import annotations


class AggregateRoot:
    """Marker base for every Authorship aggregate root."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Operations(AggregateRoot):
    """Operations aggregate root."""


class Presentations(AggregateRoot):
    """Presentations aggregate root."""


class Features(AggregateRoot):
    """Features aggregate root."""


class Interactions(AggregateRoot):
    """Interactions aggregate root."""
