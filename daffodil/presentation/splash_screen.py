"""Models bound to the splash screen."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Profile:
    """Individual profile component."""

    # Optional display name
    name: str | None = None


@dataclass(frozen=True, eq=False)
class Profiles:
    """Component that groups multiple profiles on the splash screen."""

    items: list[Profile] = field(default_factory=list, init=False)


@dataclass(frozen=True, eq=False)
class SplashScreen:
    """Represents everything bound to the splash screen."""

    profiles: Profiles = field(default_factory=Profiles, init=False)
