from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, StrictStr, model_validator

class HealthStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"

class ConnectionHealth(BaseModel):
    db_alias: str
    status: HealthStatus
    latency_ms: Optional[float] = None
    error_message: Optional[str] = None

class Credentials(BaseModel):
    """
    Username/password pair read from the credentials file.
    Keys match the field names case-insensitively, an exact match wins.
    Empty strings are valid values.
    """
    model_config = ConfigDict(extra="ignore")

    Username: StrictStr
    Password: StrictStr

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        matched = dict(data)
        for field in ("Username", "Password"):
            if field in data:
                continue
            for key, value in data.items():
                if isinstance(key, str) and key.lower() == field.lower():
                    matched[field] = value
                    break
        return matched
