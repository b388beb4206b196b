"""
Pydantic models for API responses.
"""
from typing import Any, Dict, List

from pydantic import BaseModel


class PoolResponse(BaseModel):
    success: bool
    pool: Dict[str, Any]


class PoolListResponse(BaseModel):
    success: bool
    pools: List[Dict[str, Any]]
    count: int


class PropertyResponse(BaseModel):
    """Value of a single pool property."""
    success: bool
    pool: str
    property: str
    value: str


class FileSystemListResponse(BaseModel):
    success: bool
    pool: str
    file_systems: List[Dict[str, Any]]
    count: int


class SnapshotListResponse(BaseModel):
    success: bool
    file_system: str
    snapshots: List[Dict[str, Any]]
    count: int


class HoldListResponse(BaseModel):
    success: bool
    snapshot: str
    holds: List[Dict[str, Any]]
    count: int


class RecursiveSnapshotGroupListResponse(BaseModel):
    """Snapshot groups taken atomically across a whole pool, newest first."""
    success: bool
    pool: str
    groups: List[Dict[str, Any]]
    count: int


class RecursiveHoldGroupListResponse(BaseModel):
    success: bool
    pool: str
    group: str
    hold_groups: List[Dict[str, Any]]
    count: int
