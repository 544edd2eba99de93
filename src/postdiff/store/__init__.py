"""Storage collaborator interface and filter evaluation."""

from .base import Storer, check_new_post
from .filters import filter_posts, match_string_list, matches

__all__ = [
    "Storer",
    "check_new_post",
    "filter_posts",
    "match_string_list",
    "matches",
]
