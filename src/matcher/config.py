"""Configuration parser for the keyword matcher."""

from pathlib import Path
from typing import cast


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the required configuration settings is not
    provided.
    """


class MatcherConfig:
    """A class to save keyword matcher configuration settings."""

    def __init__(
        self,
        keywords_path: Path,
        case_sensitive: bool,
        log_details: bool = False,
    ) -> None:
        """Initialize the matcher configuration.

        Args:
            keywords_path (Path): The path to the file holding
            one keyword per line.
            case_sensitive (bool): Whether keywords are matched
            with their exact case.
            log_details (bool): Whether every extraction is logged.

        """
        self.keywords_path = keywords_path
        self.case_sensitive = case_sensitive
        self.log_details = log_details

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Keyword matcher configuration settings:
                Keywords path: {self.keywords_path}
                Case sensitive: {"YES" if self.case_sensitive else "NO"}
                Log details: {"YES" if self.log_details else "NO"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def load_config_file(config_file_path: Path) -> MatcherConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        ConfigBoolParsingError: If a boolean setting can't be parsed.
        FileNotFoundError: If the config or the keywords file does not exist.

    Returns:
        MatcherConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    keywords_path = case_sensitive = None
    log_details = False

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "keywordspath":
                keywords_path = Path(value)
            elif key == "case_sensitive":
                case_sensitive = parse_bool("case_sensitive", value)
            elif key == "log_details":
                log_details = parse_bool("log_details", value)

    required = {
        "keywords_path": keywords_path,
        "case_sensitive": case_sensitive,
    }

    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                "Please ensure the config file includes a valid line for "
                f"'{'keywordspath' if key == 'keywords_path' else key}'.",
            )

    # Relative keyword paths are resolved against the config file location
    keywords_path = cast("Path", keywords_path)
    if not keywords_path.is_absolute():
        keywords_path = config_file_path.parent / keywords_path

    if not keywords_path.exists():
        raise FileNotFoundError(
            f"The required file {keywords_path} doesn't exist.",
        )

    return MatcherConfig(
        keywords_path,
        cast("bool", case_sensitive),
        log_details,
    )
