"""
Keyword category table and YAML generator configuration.

Category codes are the ones reported by pg_get_keywords, see
src/backend/utils/adt/misc.c in the PostgreSQL sources.
"""

import re
from dataclasses import dataclass, field
from typing import Dict

import yaml

# Known section header -> category code.
CATEGORIES = {
    "col_name_keyword:":                         "C",
    "unreserved_keyword:":                       "U",
    "type_func_name_keyword:":                   "T",
    "cockroachdb_extra_type_func_name_keyword:": "T",
    "reserved_keyword:":                         "R",
    "cockroachdb_extra_reserved_keyword:":       "R",
}

CATEGORY_CODES = ("C", "U", "T", "R")

DEFAULT_PACKAGE = "lex"
DEFAULT_SENTINEL = "IDENT"

RE_GO_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class ConfigError(Exception):
    """Raised when a generator config file fails validation."""
    pass


@dataclass
class GeneratorConfig:
    """Settings that shape the generated Go file."""
    categories: Dict[str, str] = field(default_factory=lambda: dict(CATEGORIES))
    package: str = DEFAULT_PACKAGE
    sentinel: str = DEFAULT_SENTINEL


def _go_ident(data: dict, key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    value = str(value)
    if not RE_GO_IDENT.fullmatch(value):
        raise ConfigError(f"'{key}' must be a Go identifier, got {value!r}")
    return value


def _parse_categories(section) -> Dict[str, str]:
    if not isinstance(section, dict) or not section:
        raise ConfigError("'categories' must be a non-empty mapping")

    categories = {}
    for name, code in section.items():
        # Accept both "reserved_keyword" and "reserved_keyword:".
        header = str(name)
        if not header.endswith(":"):
            header += ":"
        if not header.endswith("_keyword:"):
            raise ConfigError(
                f"Category header {name!r} must end in '_keyword'")
        if code not in CATEGORY_CODES:
            raise ConfigError(
                f"Category header {name!r} has code {code!r}, "
                f"expected one of {', '.join(CATEGORY_CODES)}")
        categories[header] = code
    return categories


def load_config(yaml_str: str) -> GeneratorConfig:
    """Parse a YAML generator config into a GeneratorConfig.

    Recognized keys are ``package``, ``sentinel`` and ``categories``; any
    key that is left out keeps its default. A ``categories`` mapping
    replaces the built-in table rather than extending it.

    Raises:
        ConfigError: If the YAML is empty, malformed, or holds bad values.
    """
    if not yaml_str or not yaml_str.strip():
        raise ConfigError("Empty YAML config")

    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}")

    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping")

    unknown = sorted(set(data) - {"package", "sentinel", "categories"})
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(map(str, unknown))}")

    config = GeneratorConfig(
        package=_go_ident(data, "package", DEFAULT_PACKAGE),
        sentinel=_go_ident(data, "sentinel", DEFAULT_SENTINEL),
    )
    if data.get("categories") is not None:
        config.categories = _parse_categories(data["categories"])
    return config
