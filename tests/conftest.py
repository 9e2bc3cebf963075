import os
from pathlib import Path

# Configuration is loaded when bookshelf.app.runtime.context is first imported,
# so the test environment must be in place before any fixture module loads.
os.environ.setdefault(
    "APP_CONFIG_FILE", str(Path(__file__).resolve().parent.parent / "config.yaml")
)
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-session-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("LOG_FILE", None)

from tests.fixtures import *  # noqa: E402,F401,F403
