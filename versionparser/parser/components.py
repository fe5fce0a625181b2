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

"""Tag and branch detection for the tag string of a version.

The tag string left over by the number detector (``"BranchName-rc2"``,
``"beta2-Super-branch"``, ...) may hold a release-stage keyword with an
optional number, a branch or release name, both, or neither. This module
resolves it into a ``ParsedTag`` by trying a fixed list of strategies in
order; the first one that matches wins:

1. tag-only: ``beta``, ``beta2``, ``rc-2``
2. branch-then-tag: ``BranchName-rc``, ``custom3-beta5``
3. tag-then-branch: ``beta2-Super-branch``
4. tag-anywhere: ``Super-beta-branch`` (keyword in the middle)
5. branch-only: ``BranchName``

Tag keywords are matched case-insensitively against the vocabulary, with
ASCII case folding only (``ſ`` never stands in for ``s``).

Branch names lose their original punctuation when the version string is
normalized, so strategies 2, 3 and 5 search the untouched input for the
branch skeleton to recover it (``Super-branch`` -> ``Super branch``).
Strategy 4 cannot do this, because the keyword splits the branch in two;
``1.2 Super beta branch`` therefore yields the branch ``Super-branch``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
import re

from versionparser.logging import get_global_logger
from versionparser.parser.numbers import parse_number
from versionparser.vocabulary import TagVocabulary

_BRANCH = r"[a-zA-Z0-9-]+"
_BRANCH_ONLY = re.compile(rf"\A({_BRANCH})\Z")
_SKELETON_GAP = "[^a-zA-Z0-9]+"
# Keyword and branch letters are ASCII only; no Unicode case folding.
_ASCII_NOCASE = re.IGNORECASE | re.ASCII


@dataclass(frozen=True)
class ParsedTag:
    """Result of tag string detection.

    Attributes:
        tag_name: Lowercase tag keyword as found (``"b"`` stays ``"b"``), or
            an empty string when the tag string only holds a branch.
        tag_number: Explicit tag number, 1 when the keyword had no digits,
            0 when there is no keyword.
        branch_name: Branch or release name, empty if none.
        strategy: Name of the detection strategy that matched.

    """

    tag_name: str
    tag_number: int
    branch_name: str = ""
    strategy: str = ""


@dataclass(frozen=True)
class _Patterns:
    tag_only: re.Pattern[str]
    branch_then_tag: re.Pattern[str]
    tag_then_branch: re.Pattern[str]
    tag_anywhere: re.Pattern[str]


@dataclass(frozen=True)
class _Context:
    tag_string: str
    original: str
    patterns: _Patterns


@lru_cache(maxsize=32)
def _compile_patterns(tags: str) -> _Patterns:
    """Compile the keyword-based patterns for one tag alternation."""
    return _Patterns(
        tag_only=re.compile(
            rf"\A({tags})-?([0-9]+)\Z|\A({tags})\Z",
            _ASCII_NOCASE,
        ),
        branch_then_tag=re.compile(
            rf"\A({_BRANCH})-({tags})-?([0-9]+)\Z|\A({_BRANCH})-({tags})\Z",
            _ASCII_NOCASE,
        ),
        tag_then_branch=re.compile(
            rf"\A({tags})-?([0-9]+)-({_BRANCH})\Z|\A({tags})-({_BRANCH})\Z",
            _ASCII_NOCASE,
        ),
        tag_anywhere=re.compile(
            rf"-({tags})-?([0-9]+)-|-({tags})-",
            _ASCII_NOCASE,
        ),
    )


def _first(match: re.Match[str], *groups: int) -> str:
    """Value of the first non-empty group among ``groups``."""
    for group in groups:
        value = match.group(group)
        if value:
            return value
    return ""


def _make_tag(tag: str, digits: str, branch: str, strategy: str) -> ParsedTag:
    name = tag.lower()
    if not name:
        return ParsedTag("", 0, branch, strategy)
    number = parse_number(digits) if digits else 0
    return ParsedTag(name, number or 1, branch, strategy)


def recover_original_branch(branch: str, original: str) -> str:
    """Find the original spelling of a normalized branch name.

    Each dash of the normalized name stands for one or more separator
    characters in the original string. The first case-insensitive match of
    that skeleton in ``original`` is returned; if there is none, the
    normalized name is returned unchanged.

    Example:
        ```python
        recover_original_branch("Super-branch", '1.2-beta2 "Super branch"')
        # "Super branch"
        ```

    """
    if not branch:
        return ""

    words = [re.escape(word) for word in branch.split("-") if word]
    if not words:
        return branch

    match = re.search(_SKELETON_GAP.join(words), original, _ASCII_NOCASE)
    if match:
        return match.group(0)

    get_global_logger().debug(
        "PARSER", f"Could not recover original spelling of branch {branch!r}"
    )
    return branch


# -------------------------------
# Strategies
# -------------------------------


def _tag_only(ctx: _Context) -> ParsedTag | None:
    m = ctx.patterns.tag_only.match(ctx.tag_string)
    if not m:
        return None
    return _make_tag(_first(m, 1, 3), _first(m, 2), "", "tag-only")


def _branch_then_tag(ctx: _Context) -> ParsedTag | None:
    m = ctx.patterns.branch_then_tag.match(ctx.tag_string)
    if not m:
        return None
    branch = recover_original_branch(_first(m, 1, 4), ctx.original)
    return _make_tag(_first(m, 2, 5), _first(m, 3), branch, "branch-then-tag")


def _tag_then_branch(ctx: _Context) -> ParsedTag | None:
    m = ctx.patterns.tag_then_branch.match(ctx.tag_string)
    if not m:
        return None
    branch = recover_original_branch(_first(m, 3, 5), ctx.original)
    return _make_tag(_first(m, 1, 4), _first(m, 2), branch, "tag-then-branch")


def _tag_anywhere(ctx: _Context) -> ParsedTag | None:
    m = ctx.patterns.tag_anywhere.search(ctx.tag_string)
    if not m:
        return None

    branch = ctx.tag_string.replace(m.group(0), "-")
    while "--" in branch:
        branch = branch.replace("--", "-")
    branch = branch.strip("-")

    return _make_tag(_first(m, 1, 3), _first(m, 2), branch, "tag-anywhere")


def _branch_only(ctx: _Context) -> ParsedTag | None:
    m = _BRANCH_ONLY.match(ctx.tag_string)
    if not m:
        return None
    branch = recover_original_branch(m.group(1), ctx.original)
    return _make_tag("", "", branch, "branch-only")


STRATEGIES: tuple[tuple[str, Callable[[_Context], ParsedTag | None]], ...] = (
    ("tag-only", _tag_only),
    ("branch-then-tag", _branch_then_tag),
    ("tag-then-branch", _tag_then_branch),
    ("tag-anywhere", _tag_anywhere),
    ("branch-only", _branch_only),
)


def detect_components(
    tag_string: str, original: str, vocabulary: TagVocabulary
) -> ParsedTag | None:
    """Resolve a tag string into tag keyword, tag number and branch name.

    Args:
        tag_string: Dash-separated residue of the version string after the
            numeric prefix (see ``detect_numbers()``).
        original: The untouched input string, used to recover the original
            spelling of branch names.
        vocabulary: Source of the known tag keywords.

    Returns:
        The detected components, or None if the tag string is empty or
            contains characters no strategy accepts.

    Note:
        Never raises. Failing to recover a branch's original spelling falls
        back to the normalized (dash-joined) name.

    """
    logger = get_global_logger()

    if not tag_string:
        return None

    tags = "|".join(re.escape(name) for name in vocabulary.tag_names())
    ctx = _Context(tag_string, original, _compile_patterns(tags))

    for name, strategy in STRATEGIES:
        result = strategy(ctx)
        if result is not None:
            logger.debug(
                "PARSER",
                f"Strategy {name!r} matched {tag_string!r}: tag={result.tag_name!r} "
                f"number={result.tag_number} branch={result.branch_name!r}",
            )
            return result

    logger.debug("PARSER", f"No strategy matched tag string {tag_string!r}")
    return None
