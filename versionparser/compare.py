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

"""Comparison helpers for raw version strings.

Thin wrappers around ``Version`` for callers that only hold strings: every
helper parses its inputs and compares the integer build numbers, so the
order is exactly the one defined by ``Version.build_number_int()``.
"""

from __future__ import annotations

from collections.abc import Iterable

from versionparser.logging import get_global_logger
from versionparser.version import Version, parse
from versionparser.vocabulary import TagVocabulary


def version_key(s: str, *, vocabulary: TagVocabulary | None = None) -> int:
    """Sortable integer key for a version string.

    Example:
        ```python
        sorted(["2", "1.5.9-beta", "1.1"], key=version_key)
        # ["1.1", "1.5.9-beta", "2"]
        ```

    """
    return parse(s, vocabulary=vocabulary).build_number_int()


def compare_versions(
    a: str, b: str, *, vocabulary: TagVocabulary | None = None
) -> int:
    """Compare two version strings.

    Returns -1 if a < b, 0 if equal, 1 if a > b.
    """
    ka = version_key(a, vocabulary=vocabulary)
    kb = version_key(b, vocabulary=vocabulary)
    result = (ka > kb) - (ka < kb)

    logger = get_global_logger()
    if result < 0:
        logger.verbose("COMPARE", f"{a!r} is older than {b!r}")
    elif result > 0:
        logger.verbose("COMPARE", f"{a!r} is newer than {b!r}")
    else:
        logger.verbose("COMPARE", f"{a!r} is the same as {b!r}")
    return result


def is_newer(
    remote: str,
    current: str | None,
    *,
    vocabulary: TagVocabulary | None = None,
) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    A missing current version (None) is always older.
    """
    if current is None:
        get_global_logger().verbose(
            "COMPARE", f"No current version. Treat {remote!r} as newer"
        )
        return True
    return compare_versions(remote, current, vocabulary=vocabulary) > 0


def sort_versions(
    versions: Iterable[str | Version],
    *,
    reverse: bool = False,
    vocabulary: TagVocabulary | None = None,
) -> list[Version]:
    """Parse and sort versions by build number (stable for equal keys).

    Already parsed ``Version`` instances are used as they are.
    """
    parsed = [
        v if isinstance(v, Version) else parse(v, vocabulary=vocabulary)
        for v in versions
    ]
    return sorted(parsed, key=lambda v: v.build_number_int(), reverse=reverse)
