"""
Tests for versionparser.parser.components module.

Tests tag string detection including:
- Strategy order (tag-only, branch-then-tag, tag-then-branch,
  tag-anywhere, branch-only)
- Implicit and explicit tag numbers
- Original branch spelling recovery
- Custom vocabularies
"""

from __future__ import annotations

import pytest

from versionparser.logging import get_logger, set_global_logger
from versionparser.parser.components import (
    ParsedTag,
    detect_components,
    recover_original_branch,
)
from versionparser.parser.numbers import MAX_NUMBER
from versionparser.vocabulary import TagVocabulary


@pytest.fixture
def vocabulary() -> TagVocabulary:
    """Provide a fresh vocabulary with the built-in tags."""
    return TagVocabulary()


class TestTagOnly:
    """Tests for tag strings holding only a tag keyword."""

    @pytest.mark.parametrize(
        "tag_string, name, number",
        [
            ("beta", "beta", 1),
            ("beta2", "beta", 2),
            ("beta-2", "beta", 2),
            ("Beta11", "beta", 11),
            ("RC", "rc", 1),
            ("snapshot", "snapshot", 1),
            ("A2", "a", 2),
            ("D2", "d", 2),
        ],
    )
    def test_tag_and_number(self, vocabulary, tag_string, name, number):
        """Test keyword and number detection, case-insensitively."""
        result = detect_components(tag_string, f"1.0-{tag_string}", vocabulary)
        assert result == ParsedTag(name, number, "", "tag-only")

    def test_zero_counts_as_implicit_number(self, vocabulary):
        """Test that an explicit 0 is raised to the implicit number 1."""
        result = detect_components("beta0", "1.0-beta0", vocabulary)
        assert result is not None
        assert result.tag_number == 1


class TestBranchAndTag:
    """Tests for tag strings combining a branch and a tag keyword."""

    def test_branch_then_tag(self, vocabulary):
        """Test a branch name followed by a tag keyword."""
        result = detect_components("BranchName-rc", "1.0.0-BranchName-rc", vocabulary)
        assert result == ParsedTag("rc", 1, "BranchName", "branch-then-tag")

    def test_branch_with_number_then_tag(self, vocabulary):
        """Test that a branch may contain digits."""
        result = detect_components("custom3-beta5", "1.0-custom3-beta5", vocabulary)
        assert result == ParsedTag("beta", 5, "custom3", "branch-then-tag")

    def test_branch_starting_with_number(self, vocabulary):
        """Test that a branch may start with digits."""
        result = detect_components(
            "42BranchName-RC", "1.0-42BranchName-RC", vocabulary
        )
        assert result is not None
        assert result.branch_name == "42BranchName"
        assert result.tag_name == "rc"

    def test_tag_then_branch_recovers_spelling(self, vocabulary):
        """Test a tag keyword followed by a branch with original spacing."""
        result = detect_components(
            "beta2-Super-branch", '1.2-beta2 "Super branch"', vocabulary
        )
        assert result == ParsedTag("beta", 2, "Super branch", "tag-then-branch")

    def test_tag_in_middle_of_branch_is_lossy(self, vocabulary):
        """Test that a keyword inside a branch name splits it irreversibly."""
        result = detect_components(
            "Super-beta-branch", "1.2 Super beta branch", vocabulary
        )
        assert result == ParsedTag("beta", 1, "Super-branch", "tag-anywhere")

    def test_tag_in_middle_with_number(self, vocabulary):
        """Test tag-anywhere with an explicit tag number."""
        result = detect_components("foo-rc3-bar", "1.0 foo rc3 bar", vocabulary)
        assert result == ParsedTag("rc", 3, "foo-bar", "tag-anywhere")


class TestBranchOnly:
    """Tests for tag strings without a known keyword."""

    def test_branch_only(self, vocabulary):
        """Test that a lone word becomes the branch."""
        result = detect_components("BranchName", "1.0.0-BranchName", vocabulary)
        assert result == ParsedTag("", 0, "BranchName", "branch-only")

    def test_branch_keeps_special_characters(self, vocabulary):
        """Test that the original punctuation of the branch is recovered."""
        result = detect_components("Foobar-42", '1.5.2 "Foobar/42"', vocabulary)
        assert result is not None
        assert result.branch_name == "Foobar/42"
        assert result.tag_name == ""
        assert result.tag_number == 0

    def test_unknown_characters_match_nothing(self, vocabulary):
        """Test that non-ASCII tag strings yield no result."""
        assert detect_components("café", "1.0 café", vocabulary) is None

    @pytest.mark.parametrize(
        "tag_string",
        [
            "ſnapshot",  # LATIN SMALL LETTER LONG S
            "beta-K",  # KELVIN SIGN
            "İ-rc",  # LATIN CAPITAL LETTER I WITH DOT ABOVE
        ],
    )
    def test_no_unicode_case_folding(self, vocabulary, tag_string):
        """Test that non-ASCII letters never fold onto ASCII keywords."""
        assert detect_components(tag_string, f"1.0-{tag_string}", vocabulary) is None

    def test_huge_tag_number(self, vocabulary):
        """Test that tag numbers saturate instead of failing."""
        result = detect_components("beta" + "9" * 5000, "1.0-beta", vocabulary)
        assert result is not None
        assert result.tag_number == MAX_NUMBER

    def test_empty_tag_string(self, vocabulary):
        """Test that an empty tag string yields no result."""
        assert detect_components("", "1.0", vocabulary) is None


class TestCustomVocabulary:
    """Tests for detection with registered tag types."""

    def test_custom_tag(self, vocabulary):
        """Test that registered keywords are detected."""
        vocabulary.register_tag_type("foobar", 14, "f")

        result = detect_components("foobar", "1.0.0-foobar", vocabulary)
        assert result == ParsedTag("foobar", 1, "", "tag-only")

    def test_custom_short_tag(self, vocabulary):
        """Test that registered short aliases are detected."""
        vocabulary.register_tag_type("foobar", 14, "f")

        result = detect_components("F2", "1.0.0-F2", vocabulary)
        assert result == ParsedTag("f", 2, "", "tag-only")

    def test_unregistered_keyword_is_a_branch(self, vocabulary):
        """Test that unknown keywords fall through to branch-only."""
        result = detect_components("foobar2", "1-foobar2", vocabulary)
        assert result == ParsedTag("", 0, "foobar2", "branch-only")


class TestRecoverOriginalBranch:
    """Tests for recover_original_branch function."""

    def test_recovers_spaces(self):
        """Test that dashes map back to the original separators."""
        assert (
            recover_original_branch("Super-branch", '1.2-beta2 "Super branch"')
            == "Super branch"
        )

    def test_recovers_mixed_punctuation(self):
        """Test recovery across different separator characters."""
        original = '1.2 "Super branch/epic*new"'
        assert (
            recover_original_branch("Super-branch-epic-new", original)
            == "Super branch/epic*new"
        )

    def test_case_insensitive(self):
        """Test that the search ignores case and returns the original casing."""
        assert recover_original_branch("branchname", "1.0-BranchName") == "BranchName"

    def test_case_folding_is_ascii_only(self):
        """Test that a long s in the original does not match an ASCII s."""
        original = "1.0 ſuper branch"
        assert recover_original_branch("super-branch", original) == "super-branch"

    def test_falls_back_to_normalized_name(self):
        """Test that an unmatched skeleton returns the normalized name."""
        assert recover_original_branch("foo-bar", "nothing here") == "foo-bar"

    def test_empty_branch(self):
        """Test that an empty branch stays empty."""
        assert recover_original_branch("", "1.0") == ""


class TestDetectionLogging:
    """Tests for debug output of the detector."""

    def test_strategy_logged_in_debug_mode(self, vocabulary, capsys):
        """Test that the matching strategy is reported at debug level."""
        set_global_logger(get_logger(debug=True))

        detect_components("beta2", "1.0-beta2", vocabulary)

        out = capsys.readouterr().out
        assert "[PARSER] Strategy 'tag-only' matched 'beta2'" in out

    def test_silent_by_default(self, vocabulary, capsys):
        """Test that nothing is printed with the default logger."""
        detect_components("beta2", "1.0-beta2", vocabulary)

        assert capsys.readouterr().out == ""
