"""Utility functions for choice_string."""

from choice_string.utils.indices import out_of_range, pick, to_indices
from choice_string.utils.log import get_logger

__all__ = ["get_logger", "out_of_range", "pick", "to_indices"]
