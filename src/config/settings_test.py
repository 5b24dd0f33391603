"""Settings for the pytest-django run.

Supplies the values ``config.settings`` refuses to default.
"""

import os

os.environ.setdefault("SECRET_KEY", "insecure-test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

from config.settings import *  # noqa: E402,F401,F403
