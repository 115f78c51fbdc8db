"""
Test suites package.

Keeps `testsuites` importable so tests can share the fake session
(`testsuites.unit.fakes`), the demo site and the example page objects.

All content is demo-safe and does not include production secrets.
"""
