"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations built on page_kit.framework.BasePage.

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage

__all__ = [
    "LoginPage",
]
