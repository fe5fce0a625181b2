"""
Parsing pipeline for version strings.

The pipeline runs in three stages, each in its own module:

Modules
-------
numbers : module
    Splits the raw string into the numeric triple and the residual tag string.
components : module
    Resolves the tag string into tag keyword, tag number and branch name.
build_number : module
    Encodes the numeric triple and tag into a single ordered comparison key.

Public API
----------
NumericTriple : dataclass
    Normalized (major, minor, patch) numbers.
ParsedTag : dataclass
    Detected tag keyword, tag number and branch name.
detect_numbers : function
    Numeric prefix detection.
detect_components : function
    Tag and branch detection.
build_number : function
    Build number encoding.
build_number_int : function
    Integer form of a build number.

Notes
-----
- No stage raises for any input string.
- The stages are pure functions; only the vocabulary passed to
  detect_components() is read.
"""

from .build_number import build_number, build_number_int
from .components import ParsedTag, detect_components, recover_original_branch
from .numbers import SEPARATOR_CHARS, NumericTriple, detect_numbers

__all__ = [
    "SEPARATOR_CHARS",
    "NumericTriple",
    "ParsedTag",
    "build_number",
    "build_number_int",
    "detect_components",
    "detect_numbers",
    "recover_original_branch",
]
