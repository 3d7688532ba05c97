"""Models module - Pydantic data models"""

from .diff import DiffRecord, DiffRequest, DiffResult, DiffType

__all__ = [
    "DiffType",
    "DiffRecord",
    "DiffResult",
    "DiffRequest",
]
