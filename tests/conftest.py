"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at a private in-memory database before anything imports settings.
"""

import os
import sys
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["ENVIRONMENT"] = "testing"
os.environ["DB_INIT_ATTEMPTS"] = "1"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
