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

"""Numeric prefix detection.

Splits a raw version string into its ``major.minor.patch`` triple and the
residual "tag string" holding everything after the leading numbers,
normalized to dash-separated tokens (e.g. ``"1.2 (Branch) / Alpha2"`` ->
``(1, 2, 0)`` and ``"Branch-Alpha2"``).
"""

from __future__ import annotations

from dataclasses import dataclass
import re

# Every one of these is treated like a dot when splitting.
SEPARATOR_CHARS: frozenset[str] = frozenset(
    [
        ".", "_", "-", ":", ",", ";", "!", "?", "#", "`", "´", "=", "~", "^",
        "°", "+", "*", "/", "(", ")", "[", "]", "{", "}", '"', "'",
        " ", "\t", "\n", "\r",
    ]
)  # fmt: skip

_TO_DOTS = str.maketrans({char: "." for char in SEPARATOR_CHARS})
_DOT_RUNS = re.compile(r"\.{2,}")
_INTEGER = re.compile(r"[0-9]+")

# Numbers saturate at the largest signed 64-bit integer.
MAX_NUMBER = 2**63 - 1
_MAX_DIGITS = len(str(MAX_NUMBER))


@dataclass(frozen=True)
class NumericTriple:
    """Normalized ``(major, minor, patch)`` version numbers.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.

    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_number(digits: str) -> int:
    """Integer value of a digit string, saturating at ``MAX_NUMBER``.

    Digit runs of any length are accepted; nothing longer than
    ``MAX_NUMBER`` is ever handed to ``int()``.
    """
    digits = digits.lstrip("0")
    if len(digits) > _MAX_DIGITS:
        return MAX_NUMBER
    return min(int(digits or "0"), MAX_NUMBER)


def split_version_string(raw: str) -> list[str]:
    """Split a version string into tokens on any separator character.

    Runs of separators count as one, so ``"1 . 2"`` yields ``["1", "2"]``.
    Leading or trailing separators produce an empty first or last token.
    """
    normalized = _DOT_RUNS.sub(".", raw.translate(_TO_DOTS))
    return normalized.split(".")


def detect_numbers(raw: str) -> tuple[NumericTriple, str]:
    """Split a raw version string into its numeric triple and tag string.

    Tokens are consumed from the front as long as they are plain integers;
    the first other token ends the numeric prefix. Missing components default
    to 0, components past the third are dropped and oversized components
    saturate at ``MAX_NUMBER``.

    Args:
        raw: Version string as given by the user.

    Returns:
        A tuple (numbers, tag_string), where tag_string is the unconsumed
            tokens joined with ``-`` and stripped of leading and trailing
            dashes (empty if nothing remains).

    Example:
        ```python
        detect_numbers("1.0.0_BranchName_rc")
        # (NumericTriple(major=1, minor=0, patch=0), "BranchName-rc")
        ```

    """
    tokens = split_version_string(raw)

    numbers: list[int] = []
    consumed = 0
    for token in tokens:
        if not _INTEGER.fullmatch(token):
            break
        numbers.append(parse_number(token))
        consumed += 1

    numbers = (numbers + [0, 0, 0])[:3]
    tag_string = "-".join(tokens[consumed:]).strip("-")

    return NumericTriple(*numbers), tag_string
