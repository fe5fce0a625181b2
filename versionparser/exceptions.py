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

"""Exception hierarchy for versionparser.

Parsing itself never raises: every input string, however malformed,
produces a well-defined result. Errors only occur at the edges of the
library, where callers hand in configuration:

- ConfigError: Configuration file errors (YAML parse, invalid structure,
  invalid tag definitions or render options)
- VocabularyError: Invalid tag registrations (empty name, negative weight)

All exceptions inherit from VersionParserError, allowing users to catch
all library errors with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from versionparser.config import load_config
        from versionparser.exceptions import ConfigError

        try:
            config = load_config(Path("versions.yaml"))
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```

    Catching all library errors:
        ```python
        from versionparser.exceptions import VersionParserError

        try:
            register_tag_type("", 3)
        except VersionParserError as e:
            print(f"versionparser error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "VersionParserError",
    "ConfigError",
    "VocabularyError",
]


class VersionParserError(Exception):
    """Base exception for all versionparser errors.

    All library-specific exceptions inherit from this class, allowing users
    to catch all versionparser errors with a single except clause if needed.
    """

    pass


class ConfigError(VersionParserError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, invalid structure)
    - Tag definitions missing a name or carrying an invalid weight
    - Render options of the wrong type (e.g., a multi-character separator)

    Example:
        Catching configuration errors:
            ```python
            from versionparser.exceptions import ConfigError

            try:
                config = load_config(Path("invalid.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass


class VocabularyError(VersionParserError):
    """Raised when a tag type registration is invalid.

    Tag names must be non-empty and weights must be non-negative integers.
    Lookups never raise; unknown tags simply resolve to weight 0.
    """

    pass
