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

"""Release tag of a parsed version.

A ``VersionTag`` wraps the detected tag keyword, tag number and branch name
of one ``Version``. Weight and tag type are resolved against the vocabulary
once, when the tag is created, so later registrations do not change an
already parsed version.

The tag keeps a reference to its version only to read the rendering options
(separator character, uppercase flag) when it renders itself.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from versionparser.vocabulary import (
    TAG_TYPE_ALPHA,
    TAG_TYPE_BETA,
    TAG_TYPE_DEV,
    TAG_TYPE_NONE,
    TAG_TYPE_PATCH,
    TAG_TYPE_RELEASE_CANDIDATE,
    TAG_TYPE_SNAPSHOT,
    TAG_TYPE_STABLE,
    TagVocabulary,
)

if TYPE_CHECKING:
    from versionparser.version import Version

_WORD = re.compile(r"[a-zA-Z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def normalize_branch_name(branch: str) -> str:
    """Compact a branch name for display.

    Whitespace is removed and every alphanumeric run starts uppercase;
    other punctuation is kept (``"Super branch/epic*new"`` ->
    ``"SuperBranch/Epic*New"``).
    """
    capitalized = _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], branch)
    return _WHITESPACE.sub("", capitalized)


class VersionTag:
    """Tag keyword, tag number and branch name of a version.

    Args:
        version: The version this tag belongs to (rendering options only).
        tag_name: Tag keyword as detected, e.g. ``"beta"`` or ``"B"``.
            Stored lowercase; may be empty for branch-only tags.
        number: Tag number. A keyword without number counts as 1.
        branch_name: Branch or release name, empty if none.
        vocabulary: Vocabulary to resolve weight and tag type against.

    """

    def __init__(
        self,
        version: Version,
        tag_name: str,
        number: int,
        branch_name: str = "",
        *,
        vocabulary: TagVocabulary,
    ) -> None:
        self._version = version
        self._name = tag_name.lower()
        self._number = number
        self._branch = branch_name

        if not self._name:
            self._number = 0
        elif self._number == 0:
            self._number = 1

        self._weight = vocabulary.weight_of(self._name)
        self._type = self._resolve_type(vocabulary)

    def _resolve_type(self, vocabulary: TagVocabulary) -> str:
        if not self._name:
            return TAG_TYPE_NONE
        return vocabulary.long_name_of(self._name) or self._name

    def __repr__(self) -> str:
        return (
            f"VersionTag(tag_name={self._name!r}, number={self._number}, "
            f"branch_name={self._branch!r})"
        )

    def __str__(self) -> str:
        return self.render()

    # -------------------------------
    # Accessors
    # -------------------------------

    @property
    def tag_name(self) -> str:
        """Tag keyword as used in the version (may be a short alias).

        Lowercase by default, uppercase when the owning version has
        ``set_tag_uppercase()`` enabled.
        """
        if self._version.is_tag_uppercase():
            return self._name.upper()
        return self._name

    @property
    def number(self) -> int:
        """Tag number: explicit number, 1 if implicit, 0 if there is no keyword."""
        return self._number

    @property
    def branch_name(self) -> str:
        return self._branch

    @property
    def branch_name_normalized(self) -> str:
        return normalize_branch_name(self._branch)

    @property
    def weight(self) -> int:
        return self._weight

    @property
    def tag_type(self) -> str:
        """Lowercase tag type; short aliases resolve to their long name (a -> alpha)."""
        return self._type

    # -------------------------------
    # Classification
    # -------------------------------

    def is_tag_type(self, tag_type: str) -> bool:
        return tag_type in (self._type, self._name)

    def is_alpha(self) -> bool:
        return self.is_tag_type(TAG_TYPE_ALPHA)

    def is_beta(self) -> bool:
        return self.is_tag_type(TAG_TYPE_BETA)

    def is_release_candidate(self) -> bool:
        return self.is_tag_type(TAG_TYPE_RELEASE_CANDIDATE)

    def is_snapshot(self) -> bool:
        return self.is_tag_type(TAG_TYPE_SNAPSHOT)

    def is_dev(self) -> bool:
        return self.is_tag_type(TAG_TYPE_DEV)

    def is_patch(self) -> bool:
        return self.is_tag_type(TAG_TYPE_PATCH)

    def is_stable(self) -> bool:
        return self.is_tag_type(TAG_TYPE_NONE) or self.is_tag_type(TAG_TYPE_STABLE)

    # -------------------------------
    # Rendering
    # -------------------------------

    def render(self) -> str:
        """Normalized display form of the tag.

        The tag number is only shown when it is above 1. A branch is
        prepended using the version's separator character; without a tag
        keyword only the branch is rendered.

        Example:
            ```python
            parse("1.2.3-BranchName-rc5").tag_info.render()  # "BranchName-rc5"
            parse("1.0-Beta2").tag_info.render()             # "beta2"
            ```

        """
        branch = self.branch_name_normalized
        name = self.tag_name

        if not name:
            return branch

        if self._number > 1:
            name = f"{name}{self._number}"

        if branch:
            name = f"{branch}{self._version.separator_char}{name}"

        return name

    def to_dict(self) -> dict[str, Any]:
        return {
            "tagName": self.tag_name,
            "tagType": self.tag_type,
            "number": self.number,
            "branch": self.branch_name,
            "weight": self.weight,
            "normalized": self.render(),
        }
