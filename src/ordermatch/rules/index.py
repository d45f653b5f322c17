#!/usr/bin/env python3
"""
Rule Index

Identifier -> rule group lookup. Groups are searched in stored order and the
first group containing the identifier wins, so an identifier that was added to
several groups resolves to the earliest one.
"""

import logging
from collections.abc import Iterable

from .models import RuleGroup

logger = logging.getLogger(__name__)


def find_match(identifier: str, groups: Iterable[RuleGroup]) -> tuple[RuleGroup, str] | None:
    """
    Find the first group whose members contain identifier.

    Args:
        identifier: Normalized order identifier
        groups: Rule groups in stored order

    Returns:
        (group, identifier) for the first containing group, or None
    """
    for group in groups:
        if group.has_member(identifier):
            return group, identifier
    return None


class RuleIndex:
    """
    Hash-map index over a rule group snapshot.

    Equivalent to calling find_match against the same groups, but O(1) per
    lookup. Build a new index after every rule-set change.
    """

    def __init__(self, groups: Iterable[RuleGroup]):
        self._owner: dict[str, RuleGroup] = {}
        self.conflicts: dict[str, list[str]] = {}

        for group in groups:
            for identifier in group.members:
                owner = self._owner.setdefault(identifier, group)
                if owner is not group:
                    self.conflicts.setdefault(identifier, [owner.id]).append(group.id)

        if self.conflicts:
            logger.warning(
                "%d identifier(s) belong to more than one rule group; earliest group wins",
                len(self.conflicts),
            )

    def find(self, identifier: str) -> tuple[RuleGroup, str] | None:
        """Look up the owning group for identifier."""
        group = self._owner.get(identifier)
        if group is None:
            return None
        return group, identifier
