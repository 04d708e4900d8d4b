"""Pingdom API data models"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class CheckStatus(str, Enum):
    """Check states reported by Pingdom, in export order"""
    UNKNOWN = "unknown"
    PAUSED = "paused"
    UP = "up"
    UNCONFIRMED_DOWN = "unconfirmed_down"
    DOWN = "down"


class Check(BaseModel):
    """Snapshot of a single Pingdom check as returned by GET /checks"""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int
    name: str
    hostname: str = ""
    # Kept as a plain string: Pingdom may report states outside CheckStatus
    status: str = ""
    last_response_time: int = Field(default=0, alias="lastresponsetime")
    resolution: int = 0

    @field_validator('hostname', 'status', 'last_response_time', 'resolution', mode='before')
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        """Treat explicit nulls like absent fields"""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v
