"""
================================================================================
Page Objects
================================================================================

Declarative page objects for the demo application.

Each page class declares:
    - its url and title
    - its elements (required ones gate verification)
    - page-specific workflows

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .dashboard_page import DashboardPage
from .channel_page import ChannelForm, ChannelFormPage

__all__ = [
    "LoginPage",
    "DashboardPage",
    "ChannelForm",
    "ChannelFormPage",
]
