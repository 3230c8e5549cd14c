"""Root conftest — shared test configuration."""

import os

# Deterministic settings regardless of the developer's .env
os.environ.setdefault("FSM_LOG_LEVEL", "WARNING")
os.environ.setdefault("FSM_LOG_FORMAT", "text")
os.environ.setdefault("FSM_MAX_UPPER_BOUND", "100000")
