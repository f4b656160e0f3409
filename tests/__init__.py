"""
Test suite for the Content Manager admin.

This package contains:
- unit/: Tests for the suite's own helpers (config, live app, fixture reset)
- smoke/: Fast HTTP checks that the admin app is up
- e2e/: Browser flows driven with Playwright
"""
