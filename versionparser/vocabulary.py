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

"""Release-stage tag vocabulary for versionparser.

The vocabulary maps tag keywords (``beta``, ``rc``, ...) to integer weights
and canonical tag names to optional short aliases (``beta`` -> ``b``). The
component detector reads the known keywords from it, and the build number
encoder reads the weight of the detected tag.

Weights sink a version down: the higher the weight, the further a tagged
version ranks below its untagged release. A weight of 0 means "no ordering
penalty" and is reserved for ``none``, ``stable`` and unknown names.

Vocabularies are plain objects that can be passed to ``parse()``. A
module-level default instance backs the convenience functions
``register_tag_type()`` and ``reset_tag_types()``.

Example:
    Scoped vocabulary:
        ```python
        from versionparser import TagVocabulary, parse

        vocabulary = TagVocabulary()
        vocabulary.register_tag_type("nightly", 9, "n")
        parse("2.1-nightly3", vocabulary=vocabulary).tag_type()  # "nightly"
        ```

    Default vocabulary:
        ```python
        from versionparser import register_tag_type, reset_tag_types

        register_tag_type("foobar", 5)
        ...
        reset_tag_types()
        ```

Note:
    Vocabularies are not synchronized. Register tags before parsing starts
    (or serialize registration with in-flight parses); each parse works on a
    snapshot of the known keywords taken when it starts.
"""

from __future__ import annotations

from versionparser.exceptions import VocabularyError

TAG_TYPE_NONE = "none"
TAG_TYPE_STABLE = "stable"
TAG_TYPE_ALPHA = "alpha"
TAG_TYPE_ALPHA_SHORT = "a"
TAG_TYPE_BETA = "beta"
TAG_TYPE_BETA_SHORT = "b"
TAG_TYPE_RELEASE_CANDIDATE = "rc"
TAG_TYPE_SNAPSHOT = "snapshot"
TAG_TYPE_SNAPSHOT_SHORT = "s"
TAG_TYPE_DEV = "dev"
TAG_TYPE_DEV_SHORT = "d"
TAG_TYPE_PATCH = "patch"
TAG_TYPE_PATCH_SHORT = "p"

# Order matters: the detector tries keywords in this order, long names
# before their short aliases.
DEFAULT_TAG_WEIGHTS: dict[str, int] = {
    TAG_TYPE_DEV: 8,
    TAG_TYPE_SNAPSHOT: 8,
    TAG_TYPE_ALPHA: 6,
    TAG_TYPE_BETA: 4,
    TAG_TYPE_RELEASE_CANDIDATE: 2,
    TAG_TYPE_PATCH: 1,
    TAG_TYPE_STABLE: 0,
    TAG_TYPE_NONE: 0,
    TAG_TYPE_ALPHA_SHORT: 6,
    TAG_TYPE_BETA_SHORT: 4,
    TAG_TYPE_PATCH_SHORT: 1,
    TAG_TYPE_SNAPSHOT_SHORT: 8,
    TAG_TYPE_DEV_SHORT: 8,
}

DEFAULT_SHORT_TAGS: dict[str, str] = {
    TAG_TYPE_ALPHA: TAG_TYPE_ALPHA_SHORT,
    TAG_TYPE_BETA: TAG_TYPE_BETA_SHORT,
    TAG_TYPE_PATCH: TAG_TYPE_PATCH_SHORT,
    TAG_TYPE_SNAPSHOT: TAG_TYPE_SNAPSHOT_SHORT,
    TAG_TYPE_DEV: TAG_TYPE_DEV_SHORT,
}


class TagVocabulary:
    """Mutable registry of tag weights and short aliases.

    A new vocabulary starts out with the built-in default tags.
    ``reset()`` restores that state.
    """

    def __init__(self) -> None:
        self._weights: dict[str, int] = dict(DEFAULT_TAG_WEIGHTS)
        self._short_tags: dict[str, str] = dict(DEFAULT_SHORT_TAGS)

    def __repr__(self) -> str:
        return f"TagVocabulary(tags={list(self._weights)!r})"

    @property
    def weights(self) -> dict[str, int]:
        """Copy of the ``name -> weight`` map, in detection order."""
        return dict(self._weights)

    @property
    def short_tags(self) -> dict[str, str]:
        """Copy of the ``canonical name -> short alias`` map."""
        return dict(self._short_tags)

    def tag_names(self) -> tuple[str, ...]:
        """All known keywords (canonical names and aliases) in detection order."""
        return tuple(self._weights)

    def weight_of(self, name: str) -> int:
        """Weight of a tag keyword; 0 for empty or unknown names."""
        if not name:
            return 0
        return self._weights.get(name.lower(), 0)

    def long_name_of(self, name: str) -> str | None:
        """Canonical name for a short alias, or None if ``name`` is not an alias."""
        name = name.lower()
        for long_name, short_name in self._short_tags.items():
            if short_name == name:
                return long_name
        return None

    def register_tag_type(self, name: str, weight: int, short_name: str = "") -> None:
        """Register a tag keyword, or change the weight of a known one.

        Args:
            name: Tag keyword to look for in version strings. Matching is
                case-insensitive; the name is stored lowercase.
            weight: Ordering penalty. The higher the weight, the further the
                tag sinks below the untagged release (alpha=6, beta=4).
            short_name: Optional short alias sharing the same weight.

        Raises:
            VocabularyError: If the name is empty or the weight is not a
                non-negative integer.
        """
        name = (name or "").strip().lower()
        if not name:
            raise VocabularyError("tag name must not be empty")
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise VocabularyError(
                f"tag weight for {name!r} must be a non-negative integer, "
                f"got {weight!r}"
            )

        self._weights[name] = weight

        short_name = (short_name or "").strip().lower()
        if short_name:
            self._short_tags[name] = short_name
            self._weights[short_name] = weight

    def reset(self) -> None:
        """Drop all registrations and restore the built-in defaults."""
        self._weights = dict(DEFAULT_TAG_WEIGHTS)
        self._short_tags = dict(DEFAULT_SHORT_TAGS)

    def copy(self) -> TagVocabulary:
        """Independent copy carrying the same registrations."""
        clone = TagVocabulary()
        clone._weights = dict(self._weights)
        clone._short_tags = dict(self._short_tags)
        return clone


# -------------------------------
# Process-wide default vocabulary
# -------------------------------

_default_vocabulary = TagVocabulary()


def get_default_vocabulary() -> TagVocabulary:
    """Vocabulary used by ``parse()`` when none is passed explicitly."""
    return _default_vocabulary


def register_tag_type(name: str, weight: int, short_name: str = "") -> None:
    """Register a tag type in the default vocabulary.

    See ``TagVocabulary.register_tag_type()``.
    """
    _default_vocabulary.register_tag_type(name, weight, short_name)


def reset_tag_types() -> None:
    """Restore the default vocabulary to the built-in tags."""
    _default_vocabulary.reset()
