"""Static rule tables: per-type property requirements and format patterns."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml

from schemacheck.exceptions import RuleTableError

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).parent / "data" / "schema_requirements.yaml"


class SchemaType(str, Enum):
    """Schema.org types with a requirement table entry."""

    ARTICLE = "Article"
    PRODUCT = "Product"
    ORGANIZATION = "Organization"
    PERSON = "Person"
    EVENT = "Event"
    BREADCRUMB_LIST = "BreadcrumbList"
    FAQ_PAGE = "FAQPage"
    HOW_TO = "HowTo"
    REVIEW = "Review"
    LOCAL_BUSINESS = "LocalBusiness"
    WEB_SITE = "WebSite"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SchemaType"]:
        """Map a type label to a known SchemaType, or None."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class SchemaRequirement:
    """Required and recommended properties for one type."""

    required: tuple
    recommended: tuple


# Enhanced validation patterns
FORMAT_PATTERNS: Mapping[str, re.Pattern] = MappingProxyType({
    'url': re.compile(r'^https?://.+'),
    'email': re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$'),
    # YYYY-MM-DD or YYYY-MM-DDTHH:mm:ss with optional .SSS and Z
    'date': re.compile(r'^\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2}(\.\d{3})?Z?)?$'),
    'phone': re.compile(r'^[+]?[1-9]\d{0,15}$'),
    'imageUrl': re.compile(r'\.(jpg|jpeg|png|gif|webp|svg)(\?.*)?$', re.IGNORECASE),
    'schemaContext': re.compile(r'^https?://schema\.org/?$'),
    'postalCode': re.compile(r'^[A-Z0-9\s\-]{3,10}$', re.IGNORECASE),
    'price': re.compile(r'^\d+(\.\d{1,2})?$'),
    'currency': re.compile(r'^[A-Z]{3}$'),
})


def _as_text(value: Any) -> str:
    """Render a scalar the way it appears in JSON text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def matches(concern: str, value: Any) -> bool:
    """Whether ``value`` satisfies the named format pattern.

    Non-string scalars are matched against their JSON text; objects and
    lists never match. Unknown concern names are a programming error.
    """
    pattern = FORMAT_PATTERNS[concern]
    if isinstance(value, (dict, list)) or value is None:
        return False
    # The match is anchored by the pattern itself where required
    return pattern.search(_as_text(value)) is not None


def _parse_table(raw: Any, source: str) -> Mapping[str, SchemaRequirement]:
    if not isinstance(raw, dict) or not raw:
        raise RuleTableError(f"Requirement table {source} must be a non-empty mapping")

    table = {}
    for type_name, entry in raw.items():
        if not isinstance(entry, dict):
            raise RuleTableError(f"Entry for {type_name!r} in {source} must be a mapping")

        lists = {}
        for key in ("required", "recommended"):
            values = entry.get(key, [])
            if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
                raise RuleTableError(
                    f"{type_name}.{key} in {source} must be a list of property names"
                )
            lists[key] = tuple(values)

        table[str(type_name)] = SchemaRequirement(**lists)

    return MappingProxyType(table)


@lru_cache(maxsize=None)
def load_requirement_table(path: Optional[str] = None) -> Mapping[str, SchemaRequirement]:
    """Load the requirement table from YAML.

    Args:
        path: Optional YAML file; defaults to the packaged table

    Returns:
        Read-only mapping of type name to SchemaRequirement

    Raises:
        RuleTableError: if the file is missing or malformed
    """
    rules_path = Path(path) if path else DEFAULT_RULES_PATH

    try:
        with open(rules_path, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise RuleTableError(f"Could not load requirement table {rules_path}: {e}") from e

    table = _parse_table(raw, str(rules_path))
    logger.debug(f"Loaded {len(table)} schema requirement entries from {rules_path}")
    return table
