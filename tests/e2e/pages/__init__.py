"""
Page Object Model (POM) classes for the admin UI.

Each page object keeps the locators and interactions of one admin screen
so the flows in ``test_*.py`` read as user actions.
"""

from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.edit_view_page import EditViewPage
from tests.e2e.pages.list_view_page import ListViewPage
from tests.e2e.pages.login_page import LoginPage
from tests.e2e.pages.roles_page import RolesPage

__all__ = ["BasePage", "EditViewPage", "ListViewPage", "LoginPage", "RolesPage"]
