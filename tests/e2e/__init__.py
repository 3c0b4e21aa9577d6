"""End-to-end checks against a live RevueCrafters deployment.

These tests exercise the real API and are excluded from the default test run.
Run them with:

    pytest -m e2e

Credentials come from .env.test (or REVUE_EMAIL / REVUE_PASSWORD), falling
back to the shared demo account. REVUE_BASE_URL selects the deployment.
"""
