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

"""Build number encoding.

Maps ``(major, minor, patch, tag weight, tag number)`` to one real number
whose natural order is the version order:

- a higher ``major.minor.patch`` always wins;
- with equal numbers, an untagged version beats every tagged one;
- with equal numbers, a lighter tag beats a heavier one (rc > beta > alpha);
- with equal numbers and weight, a higher tag number wins (beta5 > beta2).

The integer part is the concatenation of major, minor and patch (minor and
patch zero-padded to three digits). Tagged versions subtract a fraction
built from a six-digit field: the tag number is left-padded to ``weight``
digits, then right-padded with zeros to six digits. Heavier tags push the
number into less significant positions, which yields a bigger penalty.

    1.0.0        -> 1000000.0
    1.0.0-rc     -> 999999.010001   ("01"   -> "010000")
    1.0.0-beta   -> 999999.000101   ("0001" -> "000100")
    1.0.0-alpha  -> 999999.000002   ("000001")

Weights above 6 are not clamped: the field then has more than six digits
and the penalty no longer grows with the weight (``dev1`` encodes like
``alpha1`` with the default weights).
"""

from __future__ import annotations

from versionparser.parser.numbers import MAX_NUMBER

_FIELD_WIDTH = 6
_FIELD_MAX = 999999
_SCALE = 1_000_000


def base_number(major: int, minor: int, patch: int) -> int:
    """Integer part of the build number (``1, 2, 3`` -> ``1002003``)."""
    return int(f"{major}{minor:03d}{patch:03d}")


def tag_penalty(weight: int, number: int) -> float:
    """Fraction subtracted from the base number for a tagged version.

    Args:
        weight: Tag weight from the vocabulary (0 means no penalty).
        number: Tag number (1 when the tag had no explicit number).

    Returns:
        The penalty, in ``[0, 1)`` for weights up to 6 and tag numbers that
            fit the field.

    """
    if weight == 0:
        return 0.0

    # Same value as f"{number:0{weight}d}".ljust(6, "0"), without building
    # a weight-wide string.
    width = max(weight, len(str(number)))
    if width >= _FIELD_WIDTH:
        field = number
    else:
        field = number * 10 ** (_FIELD_WIDTH - width)
    return (_FIELD_MAX - field) / _SCALE


def build_number(
    major: int, minor: int, patch: int, weight: int = 0, number: int = 0
) -> float:
    """Encode a parsed version into its comparison key.

    Components and tag number saturate at ``MAX_NUMBER``, which keeps the
    key a finite float for any input.

    Args:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        weight: Weight of the tag, 0 if the version is untagged.
        number: Tag number, 0 if the version is untagged.

    Returns:
        The build number. Untagged versions get the base number exactly.

    Example:
        ```python
        build_number(1, 0, 0, weight=4, number=1)  # 999999.000101
        ```

    """
    major, minor, patch, number = (
        min(n, MAX_NUMBER) for n in (major, minor, patch, number)
    )
    base = base_number(major, minor, patch)
    if weight == 0:
        return float(base)
    return base - tag_penalty(weight, number)


def build_number_int(value: float) -> int:
    """Integer form of a build number, for exact comparisons.

    The real-valued key is scaled by one million and truncated toward zero.
    """
    return int(value * _SCALE)
