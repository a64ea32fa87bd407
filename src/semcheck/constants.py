"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    PARSE_ERROR = 2
    EXIT_MISMATCH = 3


class OutputFormats(Enum):
    """Export formats supported by the program.

    Args:
        Enum (string): Export formats supported by the program.
    """

    JSON = "json"
    CSV = "csv"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    OUTPUT_FORMATS = [
        OutputFormats.JSON.value,
        OutputFormats.CSV.value,
    ]
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "SEMCHECK_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "INFO"

    # Checks config file (YAML or JSON)
    CONFIG_CHECKS_KEY = "checks"
    CONFIG_JSON_SUFFIXES = (".json",)

    CSV_HEADERS = ["condition", "version", "satisfied", "error"]
