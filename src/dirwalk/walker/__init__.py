"""Directory walker with per-directory error isolation.

This package provides the walk entry points and the value types they yield.
"""

from dirwalk.walker.entry import Entry
from dirwalk.walker.options import WalkOptions
from dirwalk.walker.walk_error import WalkError
from dirwalk.walker.walker import WalkResult, walk, walk_options

__all__ = ["Entry", "WalkError", "WalkOptions", "WalkResult", "walk", "walk_options"]
