from importlib.resources import files

from loguru import logger

from .core import (
    format_range,
    is_inside,
    is_overlap,
    merge_overlap,
    split_range,
    subtract_ranges,
)
from .errors import InvalidArgument, InvalidInterval, TimeRangeError
from .interval import Instant, Interval
from .util import from_millis, to_millis

# Library convention for loguru: silent until the application opts in
# with logger.enable("timerange")
logger.disable(__name__)

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Interval",
    "Instant",
    "is_overlap",
    "merge_overlap",
    "subtract_ranges",
    "split_range",
    "is_inside",
    "format_range",
    "TimeRangeError",
    "InvalidArgument",
    "InvalidInterval",
    "to_millis",
    "from_millis",
    "docs",
]
