"""
Presentation adapters

Turn the engine's ScoredCourse list into what each caller shows:
an HTML card deck on the desktop dashboard, a template payload for the mobile app.
"""

from .desktop import block_content, render_block
from .mobile import mobile_block_view

__all__ = [
    "block_content",
    "render_block",
    "mobile_block_view",
]
