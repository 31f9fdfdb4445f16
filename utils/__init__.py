"""
Utility functions for configuration and rendering.
"""

from utils.config import CONFIG_FILE, DEFAULT_CONFIG, load_config
from utils.formatting import ERROR_MESSAGE, render_markdown, render_view, view_payload

__all__ = [
    # Config
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "load_config",
    # Rendering
    "ERROR_MESSAGE",
    "render_markdown",
    "render_view",
    "view_payload",
]
