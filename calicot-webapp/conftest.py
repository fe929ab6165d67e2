"""
Root conftest - shared pytest configuration.
Ensures the calicot package is importable when running pytest from calicot-webapp/
and keeps the module-level app free of HTTPS redirects under TestClient.
"""
import os
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

os.environ.setdefault("APP_ENV", "production")
os.environ.setdefault("FORCE_HTTPS", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test_secret_key_for_testing_only")
