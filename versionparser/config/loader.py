# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Configuration loading for versionparser.

A YAML file can declare custom tag types and the default rendering options,
so projects with their own release-stage keywords (``nightly``, ``preview``,
...) can share one definition between the CLI and library code.

File Format
-----------
    tags:
      - name: nightly      # required, tag keyword
        weight: 9          # required, non-negative integer
        short: n           # optional short alias
      - name: beta         # known tags may be re-weighted
        weight: 5
    render:
      separator: "_"       # single character, default "-"
      uppercase: true      # render tag keywords uppercase, default false

Both top-level keys are optional. The file is deep-merged over the built-in
defaults:
  - **Dicts**: Recursively merged (keys from the file override defaults)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten

Functions
---------
load_config : function
    Load a configuration file (main public API).

Error Handling
--------------
- FileNotFoundError: Configuration file doesn't exist
- ConfigError: YAML parse errors, empty or unreadable files, invalid
  structure or values
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from versionparser.config import load_config
    >>> config = load_config(Path("versions.yaml"))
    >>> config.parse("2.0-nightly3").tag_type()
    'nightly'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from versionparser.exceptions import ConfigError, VocabularyError
from versionparser.logging import get_global_logger
from versionparser.version import Version, parse
from versionparser.vocabulary import TagVocabulary

DEFAULT_CONFIG: dict[str, Any] = {
    "tags": [],
    "render": {
        "separator": "-",
        "uppercase": False,
    },
}

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class TagDefinition:
    """One custom tag type from the configuration.

    Attributes:
        name: Tag keyword.
        weight: Ordering weight (higher sinks further below the release).
        short: Optional short alias.

    """

    name: str
    weight: int
    short: str = ""


@dataclass(frozen=True)
class ParserConfig:
    """Effective parser configuration.

    Attributes:
        tags: Custom tag types, registered in file order.
        separator: Separator character for rendered tag versions.
        uppercase: Whether tag keywords render in uppercase.
        source_path: File the configuration was loaded from, if any.

    """

    tags: tuple[TagDefinition, ...] = ()
    separator: str = "-"
    uppercase: bool = False
    source_path: Path | None = field(default=None, compare=False)

    def apply(self, vocabulary: TagVocabulary) -> None:
        """Register the configured tags in an existing vocabulary."""
        for tag in self.tags:
            vocabulary.register_tag_type(tag.name, tag.weight, tag.short)

    def build_vocabulary(self) -> TagVocabulary:
        """Fresh vocabulary: built-in tags plus the configured ones."""
        vocabulary = TagVocabulary()
        self.apply(vocabulary)
        return vocabulary

    def parse(self, version: str) -> Version:
        """Parse a version with this configuration's tags and render options."""
        return parse(
            version,
            vocabulary=self.build_vocabulary(),
            separator=self.separator,
            uppercase=self.uppercase,
        )


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      FileNotFoundError      - when file does not exist
      ConfigError            - for invalid YAML (parse error), an empty file or
                               a path that cannot be read (directory, permissions)
    """
    if not p.exists():
        raise FileNotFoundError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"invalid YAML in {p}: {err}") from err
    except OSError as err:
        raise ConfigError(f"cannot read {p}: {err}") from err
    if data is None:
        raise ConfigError(f"configuration file is empty: {p}")
    return data


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Validation
# -------------------------------


def _parse_tags(raw: Any) -> tuple[TagDefinition, ...]:
    """Validate the 'tags' list and convert it to TagDefinitions."""
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigError(f"'tags' must be a list, got {type(raw).__name__}")

    tags: list[TagDefinition] = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ConfigError(f"tags[{idx}] must be a mapping")

        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"tags[{idx}].name must be a non-empty string")

        weight = entry.get("weight")
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise ConfigError(
                f"tags[{idx}].weight must be a non-negative integer, got {weight!r}"
            )

        short = entry.get("short", "") or ""
        if not isinstance(short, str):
            raise ConfigError(f"tags[{idx}].short must be a string")

        tags.append(
            TagDefinition(name=name.strip(), weight=weight, short=short.strip())
        )

    return tuple(tags)


def _parse_render(raw: Any) -> tuple[str, bool]:
    """Validate the 'render' mapping; returns (separator, uppercase)."""
    if not isinstance(raw, dict):
        raise ConfigError(f"'render' must be a mapping, got {type(raw).__name__}")

    separator = raw.get("separator")
    if not isinstance(separator, str) or len(separator) != 1:
        raise ConfigError(
            f"render.separator must be a single character, got {separator!r}"
        )

    uppercase = raw.get("uppercase")
    if not isinstance(uppercase, bool):
        raise ConfigError(f"render.uppercase must be true or false, got {uppercase!r}")

    return separator, uppercase


# -------------------------------
# Public API
# -------------------------------


def load_config(path: Path) -> ParserConfig:
    """
    Load the parser configuration from a YAML file.

    Steps
      1) Read the YAML file (must be a mapping).
      2) Deep-merge it over the built-in defaults.
      3) Validate tag definitions and render options.
      4) Check that the tags register cleanly in a scratch vocabulary.

    Returns
      The effective ParserConfig.

    Raises
      FileNotFoundError if the file is missing,
      ConfigError for YAML errors or invalid values (chained with "from err").
    """
    logger = get_global_logger()

    path = Path(path).resolve()
    logger.verbose("CONFIG", f"Loading configuration: {path}")

    data = _load_yaml_file(path)
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {path}")

    merged = _deep_merge_dicts(DEFAULT_CONFIG, data)

    tags = _parse_tags(merged.get("tags"))
    separator, uppercase = _parse_render(merged.get("render"))

    config = ParserConfig(
        tags=tags, separator=separator, uppercase=uppercase, source_path=path
    )
    try:
        config.build_vocabulary()
    except VocabularyError as err:
        raise ConfigError(f"invalid tag definition in {path}: {err}") from err

    logger.verbose(
        "CONFIG",
        f"Loaded {len(tags)} tag definition(s), separator={separator!r}, "
        f"uppercase={uppercase}",
    )
    for tag in tags:
        short = f" (short: {tag.short})" if tag.short else ""
        logger.debug("CONFIG", f"Tag {tag.name!r} weight={tag.weight}{short}")

    return config
