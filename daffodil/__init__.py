"""
Daffodil - Authorship Domain and Presentation Models

This package contains:
- Authorship domain root (composition of the four aggregate roots)
- Presentation models (screen models bound by the UI layer)
- Configuration (environment / YAML driven settings)
- Monitoring (structured logging)

Everything here is plain object graphs built at construction time.
No persistence, no networking, no UI framework dependencies.
"""

__version__ = "0.1.0"

from daffodil.authorship_domain import AuthorshipDomain
from daffodil.presentation import BooksScreen, SplashScreen

__all__ = ["AuthorshipDomain", "BooksScreen", "SplashScreen", "__version__"]
