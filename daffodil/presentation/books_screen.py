"""Models bound to the books screen."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Book:
    """Individual book component."""

    title: str | None = None


@dataclass(frozen=True, eq=False)
class Books:
    """
    Component that groups multiple books on the books screen.

    The items list is fixed for the component's lifetime, its contents are not:
        books.items.append(Book(title="Dune"))  # fine
        books.items = []                        # FrozenInstanceError
    """

    items: list[Book] = field(default_factory=list, init=False)


@dataclass(frozen=True, eq=False)
class BooksScreen:
    """Represents everything bound to the books screen."""

    books: Books = field(default_factory=Books, init=False)
