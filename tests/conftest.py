"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, e2e).
"""

import logging

# urllib3 logs every connection at DEBUG, which drowns out the request log
# lines from src.revue_client when tests run with --log-level=DEBUG.
logging.getLogger("urllib3").setLevel(logging.WARNING)
