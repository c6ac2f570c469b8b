"""Mini README: Write and read QGroundControl waypoint files.

Structure:
    * MissionFileExporter - serialises MissionCommand lists to ``QGC WPL 110``.

Each line after the header is tab separated:
``seq current frame command p1 p2 p3 p4 lat lon alt autocontinue``.
Latitude and longitude are written in degrees with seven decimals, so reading
a file back recovers the encoded 1e7 integers exactly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from ..logging_utils import get_logger
from ..mission.commands import COORDINATE_SCALE, CommandKind, MissionCommand, MissionFrame

LOGGER = get_logger(__name__)

HEADER = "QGC WPL 110"
FIELD_COUNT = 12


class MissionFileExporter:
    """Persist encoded missions as plain-text waypoint files."""

    def export(self, commands: Iterable[MissionCommand], destination: Path) -> Path:
        """Write ``commands`` to ``destination`` and return the path."""

        commands = list(commands)
        LOGGER.info("Exporting %s mission commands to %s", len(commands), destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8") as mission_file:
            mission_file.write(HEADER + "\n")
            for item in commands:
                fields = [
                    item.seq,
                    int(item.current),
                    int(item.frame),
                    int(item.command),
                    item.param1,
                    item.param2,
                    item.param3,
                    item.param4,
                    f"{item.latitude:.7f}",
                    f"{item.longitude:.7f}",
                    item.z,
                    int(item.autocontinue),
                ]
                mission_file.write("\t".join(str(value) for value in fields) + "\n")
        return destination

    def load(self, source: Path) -> List[MissionCommand]:
        """Parse a waypoint file written by ``export`` (or a ground station)."""

        lines = source.read_text(encoding="utf-8").splitlines()
        if not lines or lines[0].strip() != HEADER:
            raise ValueError(f"{source} is not a {HEADER} file")

        commands: List[MissionCommand] = []
        for number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            fields = line.split("\t")
            if len(fields) != FIELD_COUNT:
                raise ValueError(
                    f"{source}:{number}: expected {FIELD_COUNT} fields, found {len(fields)}"
                )
            try:
                commands.append(
                    MissionCommand(
                        seq=int(fields[0]),
                        current=bool(int(fields[1])),
                        frame=MissionFrame(int(fields[2])),
                        command=CommandKind(int(fields[3])),
                        param1=float(fields[4]),
                        param2=float(fields[5]),
                        param3=float(fields[6]),
                        param4=float(fields[7]),
                        x=round(float(fields[8]) * COORDINATE_SCALE),
                        y=round(float(fields[9]) * COORDINATE_SCALE),
                        z=float(fields[10]),
                        autocontinue=bool(int(fields[11])),
                    )
                )
            except ValueError as error:
                raise ValueError(f"{source}:{number}: {error}") from error
        LOGGER.debug("Loaded %s mission commands from %s", len(commands), source)
        return commands
