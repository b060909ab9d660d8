"""
Loader profiles.

A LoaderProfile gathers the constants of a room load; profile_storage
reads and writes them as JSON.
"""

from .loader_profile import (
    DEFAULT_START,
    SHARP_EDGE_DOT,
    DirectivePolicy,
    LoaderProfile,
    get_default_profile,
)
from .profile_storage import (
    dict_to_profile,
    load_profile_from_path,
    profile_to_dict,
    save_profile,
)

__all__ = [
    'DEFAULT_START',
    'SHARP_EDGE_DOT',
    'DirectivePolicy',
    'LoaderProfile',
    'get_default_profile',
    'dict_to_profile',
    'load_profile_from_path',
    'profile_to_dict',
    'save_profile',
]
