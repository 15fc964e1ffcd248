from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


class UberResponse(BaseModel):
    # Field order is the JSON key order on the wire.
    model_config = ConfigDict(frozen=True)

    request_id: str = Field(min_length=1)
    status: Literal["success"] = "success"
    data: str = "fake-uber-data"
    timestamp: datetime = Field(default_factory=_now)
