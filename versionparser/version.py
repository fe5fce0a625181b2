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

"""Parsed version facade.

``Version`` runs the parsing pipeline for one input string and exposes the
results. Parsing happens once, in the constructor; the build number is
computed on first request and cached. Apart from the rendering options
(separator character and tag case), instances do not change after
construction.

Expected structure of a version string (every part optional):

    Major.Minor.Patch-(Branch or release name)-(Release type: alpha, beta...)

Examples:

- ``1``, ``1.0``, ``1.145.147``
- ``1.1.5-beta``, ``1.1.5-beta2``, ``1.0-rc.2``
- ``1.1.5-BranchName``, ``1.1.5-BranchName-alpha2``
- ``1.2 (BranchName) / Alpha2``, ``1.2-beta2 "Super branch"``

Example:
    ```python
    from versionparser import parse

    version = parse("1.0.0_BranchName_rc")
    version.normalized_version()  # "1.0.0"
    version.tag_type()            # "rc"
    version.branch_name()         # "BranchName"
    version.build_number()        # 999999.010001
    version.is_higher_than(parse("1.0-beta11"))  # True
    ```
"""

from __future__ import annotations

from typing import Any

from versionparser.parser.build_number import build_number, build_number_int
from versionparser.parser.components import detect_components
from versionparser.parser.numbers import NumericTriple, detect_numbers
from versionparser.tag import VersionTag
from versionparser.vocabulary import (
    TAG_TYPE_NONE,
    TagVocabulary,
    get_default_vocabulary,
)


class Version:
    """A parsed version string.

    Args:
        version: Raw version string. Any string is accepted; unparseable
            input yields ``0.0.0`` without tag or branch.
        vocabulary: Tag vocabulary to detect tags with. Defaults to the
            process-wide default vocabulary.
        separator: Separator character used when rendering the tag version.
        uppercase: Render tag keywords in uppercase (``1.0.0-BETA``).

    """

    def __init__(
        self,
        version: str,
        *,
        vocabulary: TagVocabulary | None = None,
        separator: str = "-",
        uppercase: bool = False,
    ) -> None:
        self._original = version
        self._separator = separator
        self._uppercase = uppercase
        self._build_number: float | None = None

        if vocabulary is None:
            vocabulary = get_default_vocabulary()

        self._parts, tag_string = detect_numbers(version)
        self._tag: VersionTag | None = None

        parsed = detect_components(tag_string, version, vocabulary)
        if parsed is not None:
            self._tag = VersionTag(
                self,
                parsed.tag_name,
                parsed.tag_number,
                parsed.branch_name,
                vocabulary=vocabulary,
            )

    @classmethod
    def create(cls, version: str, **kwargs: Any) -> Version:
        """Create a new instance for the specified version string."""
        return cls(version, **kwargs)

    def __repr__(self) -> str:
        return f"Version({self._original!r})"

    def __str__(self) -> str:
        return self.tag_version()

    # -------------------------------
    # Rendering options
    # -------------------------------

    def set_tag_uppercase(self, uppercase: bool = True) -> Version:
        """Render the tag keyword in uppercase, e.g. ``1.0.0-BETA``."""
        self._uppercase = uppercase
        return self

    def set_separator_char(self, char: str) -> Version:
        """Set the separator between number, branch and tag when rendering."""
        self._separator = char
        return self

    def is_tag_uppercase(self) -> bool:
        return self._uppercase

    @property
    def separator_char(self) -> str:
        return self._separator

    # -------------------------------
    # Numbers
    # -------------------------------

    @property
    def original_string(self) -> str:
        """The version string as passed to the constructor."""
        return self._original

    @property
    def parts(self) -> NumericTriple:
        return self._parts

    @property
    def major_version(self) -> int:
        return self._parts.major

    @property
    def minor_version(self) -> int:
        return self._parts.minor

    @property
    def patch_version(self) -> int:
        return self._parts.patch

    def normalized_version(self) -> str:
        """Version without tag, always with three levels (``1`` -> ``1.0.0``)."""
        return str(self._parts)

    def short_version(self) -> str:
        """Numeric version with trailing zero levels dropped (``1.0.0`` -> ``1``)."""
        major, minor, patch = self._parts.as_tuple()
        if patch > 0:
            keep = [major, minor, patch]
        elif minor > 0:
            keep = [major, minor]
        else:
            keep = [major]
        return ".".join(str(n) for n in keep)

    def tag_version(self) -> str:
        """Normalized version with the rendered tag appended, if any.

        Example:
            ```python
            parse("1-BranchName-beta2").set_separator_char("_").tag_version()
            # "1.0.0_BranchName_beta2"
            ```

        """
        version = self.normalized_version()
        if self._tag is None:
            return version
        return f"{version}{self._separator}{self._tag.render()}"

    # -------------------------------
    # Tag
    # -------------------------------

    @property
    def tag_info(self) -> VersionTag | None:
        return self._tag

    def tag(self) -> str:
        """Rendered tag (``"BranchName-rc5"``), or an empty string."""
        if self._tag is None:
            return ""
        return self._tag.render()

    def has_tag(self) -> bool:
        """Whether a tag keyword or a branch name was detected."""
        return self._tag is not None

    def tag_type(self) -> str:
        """Lowercase tag type (short aliases resolved), ``"none"`` if untagged."""
        if self._tag is None:
            return TAG_TYPE_NONE
        return self._tag.tag_type

    def tag_number(self) -> int:
        """Tag number if present, 1 if implicit, 0 if the version has no tag."""
        if self._tag is None:
            return 0
        return self._tag.number

    def has_branch(self) -> bool:
        return bool(self.branch_name())

    def branch_name(self) -> str:
        if self._tag is None:
            return ""
        return self._tag.branch_name

    def is_alpha(self) -> bool:
        return self._tag is not None and self._tag.is_alpha()

    def is_beta(self) -> bool:
        return self._tag is not None and self._tag.is_beta()

    def is_release_candidate(self) -> bool:
        return self._tag is not None and self._tag.is_release_candidate()

    def is_snapshot(self) -> bool:
        return self._tag is not None and self._tag.is_snapshot()

    def is_dev(self) -> bool:
        return self._tag is not None and self._tag.is_dev()

    def is_patch(self) -> bool:
        return self._tag is not None and self._tag.is_patch()

    def is_stable(self) -> bool:
        """Untagged versions and ``stable``/``none`` tags are stable."""
        if self._tag is None:
            return True
        return self._tag.is_stable()

    # -------------------------------
    # Comparison
    # -------------------------------

    def build_number(self) -> float:
        """Real-valued comparison key, computed once and cached."""
        if self._build_number is None:
            weight = self._tag.weight if self._tag is not None else 0
            number = self._tag.number if self._tag is not None else 0
            self._build_number = build_number(
                self.major_version,
                self.minor_version,
                self.patch_version,
                weight,
                number,
            )
        return self._build_number

    def build_number_int(self) -> int:
        """Integer comparison key (build number times one million, truncated)."""
        return build_number_int(self.build_number())

    def is_higher_than(self, other: Version) -> bool:
        return self.build_number_int() > other.build_number_int()

    def is_lower_than(self, other: Version) -> bool:
        return self.build_number_int() < other.build_number_int()

    def to_dict(self) -> dict[str, Any]:
        return {
            "originalVersion": self.original_string,
            "normalized": self.normalized_version(),
            "majorVersion": self.major_version,
            "minorVersion": self.minor_version,
            "patchVersion": self.patch_version,
            "shortVersion": self.short_version(),
            "buildNumber": self.build_number(),
            "buildNumberInt": self.build_number_int(),
            "tag": self._tag.to_dict() if self._tag is not None else None,
        }


def parse(
    version: str,
    *,
    vocabulary: TagVocabulary | None = None,
    separator: str = "-",
    uppercase: bool = False,
) -> Version:
    """Parse a version string. Never fails; see ``Version``."""
    return Version(
        version, vocabulary=vocabulary, separator=separator, uppercase=uppercase
    )
