"""
versionparser - free-form version string parsing

Parses version strings that do not follow any strict scheme (mixed
separators, embedded branch names, custom release-stage keywords, arbitrary
casing) into a normalized ``major.minor.patch`` triple, an optional
release-stage tag and an optional branch name, and derives a single build
number that ranks any two versions.

versionparser provides:
  - Tolerant parsing: every input yields a result, never an exception
  - Release tags with numbers: alpha, beta, rc, dev, snapshot, patch
    (and short aliases a, b, d, s, p)
  - Custom tag types with their own ordering weight
  - Branch names with their original spelling recovered
  - A totally ordered build number for sorting and gating
  - YAML configuration and a ``verparse`` command line

Quick Start
-----------
    >>> from versionparser import parse
    >>> v = parse("1.0.0_BranchName_rc")
    >>> v.normalized_version(), v.tag_type(), v.branch_name()
    ('1.0.0', 'rc', 'BranchName')
    >>> parse("1.0").is_higher_than(parse("1.0-rc"))
    True

Package Structure
-----------------
version : module
    The Version facade and parse().
tag : module
    VersionTag, the resolved tag of a version.
vocabulary : module
    Tag keyword registry with weights and short aliases.
parser : package
    Number detection, tag/branch detection and build number encoding.
compare : module
    Comparison helpers for raw strings.
config : package
    YAML configuration loading.
cli : module
    Command-line interface.

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Parse, compare and sort free-form version strings"

from versionparser.compare import compare_versions, is_newer, sort_versions, version_key
from versionparser.config import ParserConfig, load_config
from versionparser.exceptions import ConfigError, VersionParserError, VocabularyError
from versionparser.tag import VersionTag
from versionparser.version import Version, parse
from versionparser.vocabulary import (
    TagVocabulary,
    get_default_vocabulary,
    register_tag_type,
    reset_tag_types,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "parse",
    "Version",
    "VersionTag",
    "TagVocabulary",
    "get_default_vocabulary",
    "register_tag_type",
    "reset_tag_types",
    "compare_versions",
    "is_newer",
    "sort_versions",
    "version_key",
    "load_config",
    "ParserConfig",
    "ConfigError",
    "VersionParserError",
    "VocabularyError",
]
