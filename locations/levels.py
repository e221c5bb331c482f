from enum import Enum

from errors import InvalidLevel


class Level(str, Enum):
    PROVINCE = "province"
    REGENCY = "regency"
    DISTRICT = "district"
    VILLAGE = "village"


LEVEL_DIRS = {
    Level.PROVINCE: "papua_provinces",
    Level.REGENCY: "papua_regencies",
    Level.DISTRICT: "papua_districts_detailed",
    Level.VILLAGE: "papua_villages_detailed",
}

STRUCTURED_DIR = "papua_structured_data"
STRUCTURED_PREFIX = "papua_"

LEVEL_NAMES = ", ".join(level.value for level in Level)


def parse_level(name: str) -> Level:
    """Map a path segment to a Level; names are matched exactly."""
    try:
        return Level(name)
    except ValueError:
        raise InvalidLevel(f"Invalid level: {name}. Valid levels: {LEVEL_NAMES}")
