from dotenv import load_dotenv
from dataclasses import dataclass
from pathlib import Path
import json
import logging
import os

load_dotenv()  # Loads variables from .env file

logger = logging.getLogger(__name__)

ENV_PREFIX = "SCHEMACHECK_THRESHOLD_"


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")

    # Optional replacement for the packaged requirement table
    SCHEMA_RULES_PATH = os.getenv("SCHEMA_RULES_PATH")

    # Optional directory holding report templates
    REPORT_TEMPLATE_DIR = os.getenv("REPORT_TEMPLATE_DIR")


settings = Settings()


@dataclass
class ValidationThresholds:
    """Configurable thresholds for content and relationship checks."""

    # Description length (characters)
    description_min_length: int = 50
    description_very_short_length: int = 20
    description_max_length: int = 160

    # Name / headline length (characters)
    name_max_length: int = 100
    headline_max_length: int = 110

    # Keyword stuffing: words longer than keyword_min_length that appear
    # more than keyword_repeat_limit times
    keyword_min_length: int = 3
    keyword_repeat_limit: int = 3

    # aggregateRating
    rating_min: float = 1
    rating_max: float = 5
    best_rating: float = 5

    # Distinct schema types per page
    max_schema_types: int = 10
    min_schema_types: int = 2
    faq_min_schema_types: int = 3

    @staticmethod
    def _coerce(field_name: str, field_type, value):
        """Convert a raw setting to the field's numeric type.

        Raises:
            ValueError: if the value is not a number of that type
        """
        if value is None or isinstance(value, (bool, dict, list)):
            raise ValueError(f"{field_name} must be a number, got {value!r}")

        if field_type in (int, "int"):
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(f"{field_name} must be a whole number, got {value!r}")
            return int(value)
        return float(value)

    @classmethod
    def _field_types(cls) -> dict:
        return {name: f.type for name, f in cls.__dataclass_fields__.items()}

    @classmethod
    def from_env(cls) -> "ValidationThresholds":
        """Load thresholds from environment variables.

        Variables are named SCHEMACHECK_THRESHOLD_<FIELD>, e.g.
        SCHEMACHECK_THRESHOLD_NAME_MAX_LENGTH=80. Values that are not
        numbers are ignored with a warning.
        """
        thresholds = cls()

        for field_name, field_type in cls._field_types().items():
            env_key = f"{ENV_PREFIX}{field_name.upper()}"
            env_value = os.getenv(env_key)
            if env_value is None:
                continue

            try:
                setattr(thresholds, field_name, cls._coerce(field_name, field_type, env_value))
            except ValueError:
                logger.warning(f"Ignoring {env_key}={env_value!r}: not a valid number")

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "ValidationThresholds":
        """Load thresholds from a JSON file.

        The file holds either the fields at the top level or under a
        ``thresholds`` key, as written by save_to_file. Unknown keys are
        ignored; a missing file yields the defaults.

        Raises:
            ValueError: if the JSON is malformed or a value is not a number
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            logger.debug(f"No thresholds file at {file_path}, using defaults")
            return thresholds

        with open(file_path, 'r', encoding='utf-8') as f:
            config = json.load(f)

        if not isinstance(config, dict):
            raise ValueError("thresholds file must contain a JSON object")
        threshold_config = config.get('thresholds', config)
        if not isinstance(threshold_config, dict):
            raise ValueError("'thresholds' must be a JSON object")

        for field_name, field_type in cls._field_types().items():
            if field_name in threshold_config:
                value = cls._coerce(field_name, field_type, threshold_config[field_name])
                setattr(thresholds, field_name, value)

        return thresholds

    def to_dict(self) -> dict:
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }

    def save_to_file(self, path: str) -> None:
        """Write the thresholds in the layout from_file reads."""
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump({'thresholds': self.to_dict()}, f, indent=2)


# Global default thresholds instance
default_thresholds = ValidationThresholds()
