# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Building, merging and reading the reserved ownership tag.

All functions here are pure: they never touch AWS and never modify
the tag sets passed in.
"""

from typing import Optional

from ..models.identity import Identity
from ..models.resource import MANAGED_BY_TAG, Tags


def build_ownership_tag(identity: Identity) -> Tags:
    """
    Create the tag set that marks a resource as owned by `identity`.

    Args:
        identity: Controller identity

    Returns:
        Tag set containing only the ManagedBy entry
    """
    return {MANAGED_BY_TAG: identity.ownership_token}


def merge_with_defaults(identity: Identity, user_tags: Optional[Tags] = None) -> Tags:
    """
    Merge caller tags over the default ownership tag.

    Defaults are applied first, so a caller that passes the reserved
    key explicitly overrides it.

    Args:
        identity: Controller identity
        user_tags: Caller supplied tags (not modified)

    Returns:
        New tag set
    """
    merged = build_ownership_tag(identity)
    merged.update(user_tags or {})
    return merged


def extract_owner(tags: Optional[Tags]) -> str:
    """
    Read the owner token from a tag set.

    Returns:
        The ManagedBy value, or "" when the key is missing or has no value
    """
    if not tags:
        return ""
    return tags.get(MANAGED_BY_TAG) or ""


def contains_tags(query: Tags, candidate: Optional[Tags]) -> bool:
    """
    Check whether `candidate` is a superset of `query`.

    Every query key must be present in the candidate with an equal
    value. Extra candidate tags are ignored, and a key that is missing
    never matches, not even a query value of None. A value of None
    matches "" and vice versa.
    """
    candidate = candidate or {}
    for key, value in query.items():
        if key not in candidate or (candidate[key] or "") != (value or ""):
            return False
    return True


def to_aws_tag_list(tags: Tags) -> list[dict[str, str]]:
    """
    Convert a tag dictionary to the AWS list format.

    Keys with a None value are emitted without "Value".
    """
    result = []
    for key, value in tags.items():
        entry = {"Key": key}
        if value is not None:
            entry["Value"] = value
        result.append(entry)
    return result


def from_aws_tag_list(tag_list: Optional[list[dict[str, str]]]) -> Tags:
    """
    Convert AWS tag list format to dictionary.

    Args:
        tag_list: List of tags in AWS format [{"Key": "...", "Value": "..."}]

    Returns:
        Dictionary of tag key-value pairs; a missing "Value" becomes None
    """
    if not tag_list:
        return {}

    result: Tags = {}
    for tag in tag_list:
        key = tag.get("Key")
        if key:  # Only add if key is not empty
            result[key] = tag.get("Value")
    return result
