"""
Shared test configuration.

Settings are read from the environment when ``liftlog.core.config`` is
first imported, so the required values are provided here before any
test module imports the application.
"""

import os

os.environ.setdefault("DATABASE_PASSWORD", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("LOG_JSON", "false")
