"""
Role classification for lifecycle log lines.

This module maps a component name (usually derived from a file name) to a
glyph describing its architectural role. Matching is keyword containment,
evaluated in declaration order.
"""

from enum import Enum
from typing import Optional


FALLBACK_ICON = "==="


class RoleIcon(Enum):
    """Ordered table of role keywords and their glyphs.

    Declaration order is the precedence order: longer keywords that contain
    shorter ones (``tabBarController`` / ``tabBar``, ``userSession`` /
    ``session``, ``viewController`` / ``view``) are declared first.
    ``manager`` precedes the session keywords so managers of sessions read
    as managers.
    """

    DI_CONTAINER = ("diContainer", "🫙")
    TAB_BAR_CONTROLLER = ("tabBarController", "📑")
    VIEW_CONTROLLER = ("viewController", "🎥")
    OVERLAY_CONTROLLER = ("overlayController", "🎥")
    NAVIGATION_CONTROLLER = ("navigationController", "🧭")
    TAB_BAR = ("tabBar", "📑")
    ROOT_VIEW = ("rootView", "📺")
    VIEW_MODEL = ("viewModel", "🧠")
    REPOSITORY = ("repository", "🗄")
    MANAGER = ("manager", "🤖")
    USER_SESSION = ("userSession", "🧔🏻‍♂️")
    SESSION = ("session", "💼")
    CONFIGURATION = ("configuration", "🧾")
    CUSTOMIZATION = ("customization", "👕")
    KEYCHAIN = ("keychain", "🔐")
    USE_CASE = ("useCase", "🎞")
    TEXT_FIELD = ("textField", "✍️")
    FACTORY = ("factory", "🏭")
    CODER = ("coder", "👨‍💻")
    VIEW = ("view", "🏙️")
    HELPER = ("helper", "🙏")
    BUTTON = ("button", "⏺️")

    def __init__(self, keyword: str, glyph: str):
        self.keyword = keyword
        self.glyph = glyph

    def matches(self, name: str) -> bool:
        """Check whether the keyword occurs in ``name``, ignoring case."""
        return self.keyword.lower() in name.lower()


def classify(name: str) -> Optional[RoleIcon]:
    """Return the first role whose keyword occurs in ``name``, or None."""
    if not name:
        return None
    for role in RoleIcon:
        if role.matches(name):
            return role
    return None


def icon_for(name: str) -> str:
    """Return the glyph for ``name``, falling back to ``FALLBACK_ICON``."""
    role = classify(name)
    return role.glyph if role is not None else FALLBACK_ICON
