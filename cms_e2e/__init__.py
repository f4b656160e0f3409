"""
Support library for the Content Manager end-to-end suite.

Holds everything the browser tests need that is not a page object:
environment configuration, seeded credentials, live admin-app discovery
and the fixture reset used before every test.
"""
