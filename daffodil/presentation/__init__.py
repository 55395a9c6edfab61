"""
Presentation Layer - Screen Models

Each screen model owns exactly one collection component, created
eagerly when the screen is created. The UI layer binds to these
objects directly.
"""

from daffodil.presentation.books_screen import Book, Books, BooksScreen
from daffodil.presentation.splash_screen import Profile, Profiles, SplashScreen

__all__ = [
    "Book",
    "Books",
    "BooksScreen",
    "Profile",
    "Profiles",
    "SplashScreen",
]
