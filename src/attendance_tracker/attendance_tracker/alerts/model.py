from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from ..common.datetime_utils import parse_timestamp, to_timestamp
from ..core.enums import AlertType


@dataclass(frozen=True)
class AlertNotification:
    id: str
    user_id: str
    type: AlertType
    message: str
    timestamp: datetime
    read: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "type": self.type.value,
            "message": self.message,
            "timestamp": to_timestamp(self.timestamp),
            "read": self.read,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AlertNotification":
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            type=AlertType(data["type"]),
            message=str(data.get("message", "")),
            timestamp=parse_timestamp(data["timestamp"]),
            read=bool(data.get("read", False)),
        )
