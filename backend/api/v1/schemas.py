"""
Pydantic schemas for signaling endpoints.
"""

from pydantic import BaseModel


class RoomSummary(BaseModel):
    code: str
    name: str
    hasPassword: bool


class RoomsList(BaseModel):
    rooms: list[RoomSummary]
    count: int


class HealthStatus(BaseModel):
    status: str
    rooms: int
    connections: int
