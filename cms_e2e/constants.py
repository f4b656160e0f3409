"""Seeded accounts and fixture archives shipped with the test data."""

ADMIN_EMAIL_ADDRESS = "test@testing.com"
ADMIN_PASSWORD = "Testing123!"
# Display name rendered in the user menu for the seeded super admin.
ADMIN_DISPLAY_NAME = "test testing"

EDITOR_EMAIL_ADDRESS = "editor@testing.com"
EDITOR_PASSWORD = "Testing123!"

WITH_ADMIN_ARCHIVE = "with-admin.tar"
