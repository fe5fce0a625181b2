"""Configuration loading for versionparser.

A YAML file declares custom tag types and the default rendering options.
The file is deep-merged over the built-in defaults (dicts merge
recursively, lists and scalars are replaced).

Public API:

- load_config: Load and validate a configuration file
- ParserConfig: Effective configuration (tags, separator, uppercase)
- TagDefinition: One configured tag type

Example:
    Basic usage:

        from pathlib import Path
        from versionparser.config import load_config

        config = load_config(Path("versions.yaml"))
        version = config.parse("2.0-nightly3")
        print(version.tag_type())  # "nightly"

"""

from .loader import ParserConfig, TagDefinition, load_config

__all__ = ["ParserConfig", "TagDefinition", "load_config"]
