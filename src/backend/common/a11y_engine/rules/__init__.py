from ..registry import registry
from .anchors import HASH_HREF_NEEDS_BUTTON
from .click_handlers import BUTTON_ROLE_ENTER, BUTTON_ROLE_SPACE, NO_ROLE, NO_TABINDEX
from .focus import HIDDEN_FOCUSABLE, TABINDEX_GREATER_THAN_ZERO
from .images import NO_ALT, REDUNDANT_ALT
from .labels import NO_LABEL

# Keyboard-only checks that do not apply to touch devices.
MOBILE_EXCLUSIONS = (
    NO_TABINDEX.rule_key,
    BUTTON_ROLE_SPACE.rule_key,
    BUTTON_ROLE_ENTER.rule_key,
)

registry.add_mobile_exclusions(*MOBILE_EXCLUSIONS)

__all__ = [
    "MOBILE_EXCLUSIONS",
    "NO_ALT",
    "REDUNDANT_ALT",
    "HASH_HREF_NEEDS_BUTTON",
    "NO_ROLE",
    "NO_TABINDEX",
    "BUTTON_ROLE_SPACE",
    "BUTTON_ROLE_ENTER",
    "HIDDEN_FOCUSABLE",
    "TABINDEX_GREATER_THAN_ZERO",
    "NO_LABEL",
]
