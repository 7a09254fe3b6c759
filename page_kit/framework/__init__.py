"""
================================================================================
UI Page Framework
================================================================================

Playwright-based page object foundation.

Components:
    - page_base: Base page object with highlighted actions and waits
    - highlight: Transient element highlighting before actions
    - frame_scope: Element lookup inside embedded frames
    - browser_manager: Browser lifecycle management
    - config_loader: YAML + environment configuration

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .highlight import Highlighter, with_highlight
from .frame_scope import FrameScope
from .page_base import BasePage, PageBase
from .browser_manager import BrowserManager

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "Highlighter",
    "with_highlight",
    "FrameScope",
    "BasePage",
    "PageBase",
    "BrowserManager",
]
