"""
Hierarchy Builder for Rule Locations

Resolves where a rule sits in the benchmark hierarchy by walking the
prefixes of its dotted ID.
"""

from typing import Dict, List

from cisextract.models import Location


def get_parent_ids(rule_id: str) -> List[str]:
    """
    Return the proper dotted-ID prefixes of a rule ID, shortest first.

    Examples:
        "1" -> []
        "1.2" -> ["1"]
        "1.2.3" -> ["1", "1.2"]
    """
    parts = rule_id.split('.')
    return ['.'.join(parts[:i + 1]) for i in range(len(parts) - 1)]


def get_rule_location(id_to_name: Dict[str, str], rule_id: str) -> List[Location]:
    """
    Build the location of a rule from its ancestor IDs.

    Each proper prefix present in the map becomes a Location, ordered from
    most distant to nearest. Prefixes missing from the map (gaps in the
    document's numbering) are skipped; that is not an error.

    Args:
        id_to_name: Dotted ID → name for all ToC entries
        rule_id: ID of the rule

    Returns:
        Ordered list of ancestor locations

    Example:
        >>> get_rule_location({"1": "Initial Setup", "1.1": "Filesystem"}, "1.1.1")
        [Location(id='1', name='Initial Setup'), Location(id='1.1', name='Filesystem')]
    """
    location = []
    for parent_id in get_parent_ids(rule_id):
        parent_name = id_to_name.get(parent_id)
        if parent_name is not None:
            location.append(Location(id=parent_id, name=parent_name))
    return location


__all__ = [
    'get_parent_ids',
    'get_rule_location',
]
