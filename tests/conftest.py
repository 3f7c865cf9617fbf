"""Root conftest — shared test configuration."""

import os

# Tests never reach a real database or deployment host
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FINAL_HOST", "cc.example.com")
os.environ.setdefault("LOG_FORMAT", "text")
