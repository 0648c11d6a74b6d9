"""Reference declarative UI host used to run the accessibility engine (no I/O)."""

from .elements import Element, flatten_children, render_html, text_content
from .host import Component, UIHost

__all__ = [
    "Component",
    "Element",
    "UIHost",
    "flatten_children",
    "render_html",
    "text_content",
]
