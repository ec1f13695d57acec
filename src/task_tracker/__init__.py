"""Multi-user task tracking API built on FastAPI and MongoDB."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
