"""
Tests for versionparser.tag module.

Tests the tag model including:
- Short alias resolution
- Tag type predicates
- Branch normalization and rendering
- Weight snapshots
"""

from __future__ import annotations

import pytest

from versionparser.tag import normalize_branch_name
from versionparser.version import parse
from versionparser.vocabulary import TagVocabulary


class TestNormalizeBranchName:
    """Tests for normalize_branch_name function."""

    @pytest.mark.parametrize(
        "branch, expected",
        [
            ("BranchName", "BranchName"),
            ("custom", "Custom"),
            ("Super branch", "SuperBranch"),
            ("Super branch/epic*new", "SuperBranch/Epic*New"),
            ("Foobar/42", "Foobar/42"),
            ("42BranchName", "42BranchName"),
            ("", ""),
        ],
    )
    def test_normalization(self, branch, expected):
        """Test whitespace removal and word capitalization."""
        assert normalize_branch_name(branch) == expected


class TestTagTypes:
    """Tests for tag type resolution."""

    @pytest.mark.parametrize(
        "version, tag_name, tag_type",
        [
            ("1.0-A2", "a", "alpha"),
            ("1.0-B2", "b", "beta"),
            ("1.0-S2", "s", "snapshot"),
            ("1.0-D2", "d", "dev"),
            ("1.0-P2", "p", "patch"),
            ("1.0-RC2", "rc", "rc"),
            ("1.0-Beta2", "beta", "beta"),
        ],
    )
    def test_short_aliases_resolve(self, version, tag_name, tag_type):
        """Test that short aliases keep their name but report the long type."""
        tag = parse(version).tag_info
        assert tag is not None
        assert tag.tag_name == tag_name
        assert tag.tag_type == tag_type
        assert tag.number == 2

    def test_alias_predicates(self):
        """Test that predicates match both canonical names and aliases."""
        assert parse("1.0-a").tag_info.is_alpha()
        assert parse("1.0-b3").tag_info.is_beta()
        assert parse("1.0-rc").tag_info.is_release_candidate()
        assert parse("1.0-s").tag_info.is_snapshot()
        assert parse("1.0-dev").tag_info.is_dev()
        assert parse("1.0-p").tag_info.is_patch()
        assert not parse("1.0-beta").tag_info.is_alpha()

    def test_stable_predicate(self):
        """Test that 'stable' and branch-only tags count as stable."""
        assert parse("1.0-stable").tag_info.is_stable()
        assert parse("1.0-BranchName").tag_info.is_stable()
        assert not parse("1.0-rc").tag_info.is_stable()

    def test_weights(self):
        """Test that tags carry the weight of their keyword."""
        assert parse("1.0-alpha").tag_info.weight == 6
        assert parse("1.0-a").tag_info.weight == 6
        assert parse("1.0-beta").tag_info.weight == 4
        assert parse("1.0-rc").tag_info.weight == 2
        assert parse("1.0-BranchName").tag_info.weight == 0

    def test_custom_tag(self):
        """Test a registered tag with a short alias."""
        vocabulary = TagVocabulary()
        vocabulary.register_tag_type("foobar", 14, "f")

        tag = parse("1.0.0-F2", vocabulary=vocabulary).tag_info
        assert tag is not None
        assert tag.tag_name == "f"
        assert tag.tag_type == "foobar"
        assert tag.weight == 14
        assert tag.is_tag_type("foobar")
        assert tag.is_tag_type("f")


class TestWeightSnapshot:
    """Tests that parsed tags do not follow later registrations."""

    def test_reweighting_keeps_parsed_weight(self):
        """Test that a tag keeps the weight it was created with."""
        vocabulary = TagVocabulary()
        vocabulary.register_tag_type("nightly", 9)
        version = parse("2.0-nightly", vocabulary=vocabulary)
        key = version.build_number_int()

        vocabulary.register_tag_type("nightly", 3)

        assert version.tag_info.weight == 9
        assert version.build_number_int() == key

    def test_new_alias_does_not_change_type(self):
        """Test that the tag type is resolved once, at creation."""
        vocabulary = TagVocabulary()
        vocabulary.register_tag_type("xyz", 5)
        version = parse("1.0-xyz", vocabulary=vocabulary)

        vocabulary.register_tag_type("other", 5, "xyz")

        assert version.tag_info.tag_type == "xyz"


class TestRender:
    """Tests for VersionTag.render and to_dict."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("1.0-beta", "beta"),
            ("1.0-Beta2", "beta2"),
            ("1.2.3-BranchName-rc5", "BranchName-rc5"),
            ("1.0-custom-beta5", "Custom-beta5"),
            ("1.0.0-BranchName", "BranchName"),
            ('1.2-beta2 "Super branch"', "SuperBranch-beta2"),
        ],
    )
    def test_render(self, version, expected):
        """Test normalized tag rendering."""
        assert parse(version).tag_info.render() == expected
        assert str(parse(version).tag_info) == expected

    def test_render_uppercase(self):
        """Test that only the keyword is uppercased."""
        tag = parse("1-BranchName-beta2", uppercase=True).tag_info
        assert tag.tag_name == "BETA"
        assert tag.render() == "BranchName-BETA2"

    def test_render_separator(self):
        """Test that the version separator joins branch and keyword."""
        tag = parse("1-BranchName-beta2", separator="_").tag_info
        assert tag.render() == "BranchName_beta2"

    def test_branch_keeps_original_spelling(self):
        """Test that branch_name is the recovered original."""
        tag = parse('1.2-beta2 "Super branch"').tag_info
        assert tag.branch_name == "Super branch"
        assert tag.branch_name_normalized == "SuperBranch"

    def test_to_dict(self):
        """Test the serialized tag structure."""
        tag = parse("1.2.3-BranchName-rc5").tag_info
        assert tag.to_dict() == {
            "tagName": "rc",
            "tagType": "rc",
            "number": 5,
            "branch": "BranchName",
            "weight": 2,
            "normalized": "BranchName-rc5",
        }

    def test_branch_only_number(self):
        """Test that a tag without keyword has number 0."""
        tag = parse("1.0-BranchName").tag_info
        assert tag.tag_name == ""
        assert tag.number == 0
        assert tag.tag_type == "none"
