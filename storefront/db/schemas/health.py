from typing import Literal, Optional
from pydantic import BaseModel


class DatabaseHealth(BaseModel):
    connected: bool
    latency: Optional[int] = None


class HealthStatus(BaseModel):
    status: Literal["ok", "degraded", "error"]
    database: DatabaseHealth
    timestamp: str
