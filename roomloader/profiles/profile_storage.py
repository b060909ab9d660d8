"""
Profile persistence layer for loader profiles.

Profiles are plain JSON objects.  Unknown keys are ignored and missing
keys fall back to the defaults, so older profile files keep loading.
"""

from __future__ import annotations
import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Union

from .loader_profile import LoaderProfile

logger = logging.getLogger(__name__)


def profile_to_dict(profile: LoaderProfile) -> Dict[str, Any]:
    """Convert a LoaderProfile to a JSON-serializable dictionary."""
    return {
        "name": profile.name,
        "default_start": list(profile.default_start),
        "sharp_edge_dot": profile.sharp_edge_dot,
        "start_prefix": profile.start_prefix,
        "decoration_prefix": profile.decoration_prefix,
        "directive_prefix": profile.directive_prefix,
        "directive_policy": profile.directive_policy.value,
        "bevel_edges": profile.bevel_edges,
        "check_winding": profile.check_winding,
        "y_up_source": profile.y_up_source,
    }


def dict_to_profile(data: Dict[str, Any]) -> LoaderProfile:
    """Create a LoaderProfile from a dictionary."""
    known = {f.name for f in fields(LoaderProfile)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown profile keys: %s", ", ".join(unknown))
    return LoaderProfile(**{k: v for k, v in data.items() if k in known})


def save_profile(profile: LoaderProfile, file_path: Union[str, Path]) -> Path:
    """
    Save a profile as JSON.

    Args:
        profile: The LoaderProfile to save
        file_path: Destination file

    Returns:
        Path to the saved file

    Raises:
        OSError: If the file cannot be written
    """
    file_path = Path(file_path)
    data = profile_to_dict(profile)

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    return file_path


def load_profile_from_path(file_path: Union[str, Path]) -> LoaderProfile:
    """
    Load a profile from a JSON file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not a valid profile
    """
    file_path = Path(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{file_path}: profile must be a JSON object")

    try:
        return dict_to_profile(data)
    except TypeError as e:
        raise ValueError(f"{file_path}: invalid profile: {e}") from e
