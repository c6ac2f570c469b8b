"""Mini README: Mission encoding subsystem.

``commands`` defines the MAVLink-shaped value types and ``encoder`` turns a
grid survey result into the ordered list consumed by the uplink transport.
"""

from .commands import CommandKind, MissionCommand, MissionFrame, encode_coordinate
from .encoder import MissionEncoder

__all__ = [
    "CommandKind",
    "MissionCommand",
    "MissionEncoder",
    "MissionFrame",
    "encode_coordinate",
]
