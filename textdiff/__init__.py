"""
TextDiff - line and word level text comparison.

The diff engine lives in `textdiff.core`; settings, file input and
caching in `textdiff.services`; background workers in
`textdiff.workers`.
"""

__version__ = "1.0.0"
