"""Mini README: Mission command value types for autopilot uplink.

Structure:
    * CommandKind - supported MAVLink command ids.
    * MissionFrame - coordinate frame ids (only relative-altitude is emitted).
    * MissionCommand - one ``MISSION_ITEM_INT``-shaped mission entry.

Coordinates are stored as integers scaled by 1e7, exactly as the autopilot
expects them. ``encode_coordinate`` truncates towards zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict

COORDINATE_SCALE = 1e7


class CommandKind(IntEnum):
    """MAVLink ``MAV_CMD`` ids used by survey missions."""

    WAYPOINT = 16
    RETURN_TO_LAUNCH = 20
    TAKEOFF = 22
    CHANGE_SPEED = 178


class MissionFrame(IntEnum):
    """MAVLink ``MAV_FRAME`` ids."""

    GLOBAL_RELATIVE_ALT_INT = 6


class SpeedType(IntEnum):
    AIRSPEED = 0
    GROUND_SPEED = 1


THROTTLE_NO_CHANGE = -1.0


def encode_coordinate(degrees: float) -> int:
    """Scale decimal degrees to a 1e7 integer, truncating towards zero."""

    return int(degrees * COORDINATE_SCALE)


@dataclass(frozen=True, slots=True)
class MissionCommand:
    """Single item of an ordered mission."""

    seq: int
    command: CommandKind
    frame: MissionFrame = MissionFrame.GLOBAL_RELATIVE_ALT_INT
    current: bool = False
    autocontinue: bool = True
    param1: float = 0.0
    param2: float = 0.0
    param3: float = 0.0
    param4: float = 0.0
    x: int = 0
    y: int = 0
    z: float = 0.0

    @property
    def latitude(self) -> float:
        return self.x / COORDINATE_SCALE

    @property
    def longitude(self) -> float:
        return self.y / COORDINATE_SCALE

    def as_dict(self) -> Dict[str, Any]:
        """Export the command with serialisable values."""

        return {
            "seq": self.seq,
            "command": self.command.name,
            "frame": self.frame.name,
            "current": self.current,
            "autocontinue": self.autocontinue,
            "param1": self.param1,
            "param2": self.param2,
            "param3": self.param3,
            "param4": self.param4,
            "x": self.x,
            "y": self.y,
            "z": self.z,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "MissionCommand":
        return cls(
            seq=int(payload["seq"]),
            command=CommandKind[payload["command"]],
            frame=MissionFrame[payload.get("frame", MissionFrame.GLOBAL_RELATIVE_ALT_INT.name)],
            current=bool(payload.get("current", False)),
            autocontinue=bool(payload.get("autocontinue", True)),
            param1=float(payload.get("param1", 0.0)),
            param2=float(payload.get("param2", 0.0)),
            param3=float(payload.get("param3", 0.0)),
            param4=float(payload.get("param4", 0.0)),
            x=int(payload.get("x", 0)),
            y=int(payload.get("y", 0)),
            z=float(payload.get("z", 0.0)),
        )
