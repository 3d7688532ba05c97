"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.diff import DiffRecord, DiffRequest, DiffResult
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator, DiffTooLargeError

# Handlers are plain functions so FastAPI runs the O(m*n) diff in its threadpool
router = APIRouter()


def get_diff_generator() -> DiffGenerator:
    """Build a generator from the latest saved limits"""
    config = ConfigManager.get_instance().get_config()
    return DiffGenerator.from_config(config)


@router.post("", response_model=DiffResult)
def diff_texts(request: DiffRequest) -> DiffResult:
    """Compare two texts and return the edit script with statistics"""
    diff_generator = get_diff_generator()

    try:
        return diff_generator.generate_diff(request.old_text, request.new_text)
    except DiffTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))


@router.post("/records", response_model=list[DiffRecord])
def diff_records(request: DiffRequest) -> list[DiffRecord]:
    """Compare two texts and return only the edit script"""
    diff_generator = get_diff_generator()

    try:
        return diff_generator.generate_diff(request.old_text, request.new_text).records
    except DiffTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
