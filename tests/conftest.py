"""Root conftest — shared test configuration."""

import os

# Human-readable logs in test output; settings read these on first use
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
