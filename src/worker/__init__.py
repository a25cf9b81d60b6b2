# src/worker/__init__.py
"""
Фоновые воркеры процесса.
"""

from src.worker.base import BaseWorker
from src.worker.session_sweeper import SessionSweeper

__all__ = ["BaseWorker", "SessionSweeper"]
