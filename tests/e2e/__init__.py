"""
Browser test package for the Content Manager admin.

Playwright-driven flows against a running admin app, organised with the
Page Object Model.  Locators use accessible roles and labels.
"""
