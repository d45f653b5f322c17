#!/usr/bin/env python3
"""
Rule Set Editing

Pure operations over a rule group list. Each function validates its arguments
first and returns a new list; the input list and its groups are never
modified, so a rejected edit leaves the caller's snapshot untouched.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..orders.identifier import identifier_of
from .index import find_match
from .models import RuleGroup, generate_rule_id

logger = logging.getLogger(__name__)


class EmptyTargetNameError(ValueError):
    """Raised when a rule is created or edited with a blank target name."""

    pass


class InvalidWeightError(ValueError):
    """Raised when a weight is not an integer >= 1."""

    pass


class RuleGroupNotFoundError(KeyError):
    """Raised when an edit refers to a rule group id that doesn't exist."""

    pass


def _validate_target_name(target_name: str | None) -> str:
    name = (target_name or "").strip()
    if not name:
        raise EmptyTargetNameError("대상 상품명을 선택하거나 입력해주세요.")
    return name


def _validate_weight(weight: Any, label: str = "weight") -> int:
    if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
        raise InvalidWeightError(f"{label} must be an integer >= 1, got {weight!r}")
    return weight


def _index_of(groups: list[RuleGroup], group_id: str) -> int:
    for i, group in enumerate(groups):
        if group.id == group_id:
            return i
    raise RuleGroupNotFoundError(group_id)


def create_rule_from_order(
    groups: list[RuleGroup],
    order: Any,
    target_name: str,
    default_weight: int = 1,
    member_weight: int | None = None,
    id_factory: Callable[[], str] = generate_rule_id,
) -> list[RuleGroup]:
    """
    Create a rule for an unmatched order.

    If a group with the same target name already exists the order's identifier
    is merged into it instead of creating a duplicate group:
    - a new member gets an override of member_weight (or default_weight)
    - an existing member only has its override updated when member_weight is given

    Args:
        groups: Current rule groups
        order: The representative order of an unmatched row
        target_name: Target (category) name; trimmed
        default_weight: Default weight for a newly created group
        member_weight: Weight override for this order's identifier
        id_factory: Id generator for new groups

    Returns:
        New rule group list

    Raises:
        EmptyTargetNameError: If target_name is blank
        InvalidWeightError: If a weight is not an integer >= 1
    """
    name = _validate_target_name(target_name)
    _validate_weight(default_weight, "default_weight")
    if member_weight is not None:
        _validate_weight(member_weight, "member_weight")

    identifier = identifier_of(order)

    existing = find_match(identifier, groups)
    if existing is not None and existing[0].target_name != name:
        logger.warning(
            "Identifier %r already belongs to rule group %r (%s)",
            identifier,
            existing[0].target_name,
            existing[0].id,
        )

    updated = [g.copy() for g in groups]
    for group in updated:
        if group.target_name != name:
            continue

        if identifier not in group.members:
            group.members.append(identifier)
            group.weight_overrides[identifier] = member_weight if member_weight is not None else default_weight
            logger.info("Added %r to rule group %r", identifier, name)
        elif member_weight is not None:
            group.weight_overrides[identifier] = member_weight
            logger.info("Updated weight of %r in rule group %r to %d", identifier, name, member_weight)
        return updated

    overrides = {identifier: member_weight} if member_weight is not None else {}
    new_group = RuleGroup(
        id=id_factory(),
        target_name=name,
        default_weight=default_weight,
        members=[identifier],
        weight_overrides=overrides,
    )
    updated.append(new_group)
    logger.info("Created rule group %r (%s)", name, new_group.id)
    return updated


def update_rule_group(
    groups: list[RuleGroup],
    group_id: str,
    target_name: str,
    default_weight: int,
    identifier: str | None = None,
    member_weight: int | None = None,
) -> list[RuleGroup]:
    """
    Edit a group's target name and default weight, keeping its id and position.

    When identifier and member_weight are both given, that identifier's
    override is set as well.

    Raises:
        EmptyTargetNameError, InvalidWeightError, RuleGroupNotFoundError
    """
    name = _validate_target_name(target_name)
    _validate_weight(default_weight, "default_weight")
    if member_weight is not None:
        _validate_weight(member_weight, "member_weight")
    position = _index_of(groups, group_id)

    updated = [g.copy() for g in groups]
    group = updated[position]
    group.target_name = name
    group.default_weight = default_weight
    if identifier is not None and member_weight is not None:
        group.weight_overrides[identifier] = member_weight
    return updated


def set_member_weight(groups: list[RuleGroup], group_id: str, identifier: str, weight: int) -> list[RuleGroup]:
    """
    Set the weight override of one member.

    Raises:
        InvalidWeightError, RuleGroupNotFoundError, KeyError if identifier is not a member
    """
    _validate_weight(weight)
    position = _index_of(groups, group_id)
    if identifier not in groups[position].members:
        raise KeyError(f"{identifier!r} is not a member of rule group {group_id}")

    updated = [g.copy() for g in groups]
    updated[position].weight_overrides[identifier] = weight
    return updated


def remove_member(groups: list[RuleGroup], group_id: str, identifier: str) -> list[RuleGroup]:
    """
    Remove one identifier (and its override) from a group.

    A group left without members is deleted.

    Raises:
        RuleGroupNotFoundError
    """
    position = _index_of(groups, group_id)

    updated = [g.copy() for g in groups]
    group = updated[position]
    group.members = [m for m in group.members if m != identifier]
    group.weight_overrides.pop(identifier, None)

    if not group.members:
        logger.info("Rule group %r has no members left, deleting it", group.target_name)
        del updated[position]
    return updated


def delete_rule_group(groups: list[RuleGroup], group_id: str) -> list[RuleGroup]:
    """
    Delete a group by id.

    Raises:
        RuleGroupNotFoundError
    """
    position = _index_of(groups, group_id)
    return [g.copy() for i, g in enumerate(groups) if i != position]


def find_group_for_row(groups: list[RuleGroup], row: Any) -> RuleGroup | None:
    """
    Find the rule group behind a matched output row.

    Looks up by the row's rule_group_id first, then falls back to a group whose
    target name equals the row's display name.
    """
    group_id = getattr(row, "rule_group_id", None)
    if group_id:
        for group in groups:
            if group.id == group_id:
                return group

    display_name = getattr(row, "display_name", None)
    for group in groups:
        if group.target_name == display_name:
            return group
    return None


def ensure_rule_ids(groups: list[RuleGroup], id_factory: Callable[[], str] = generate_rule_id) -> list[RuleGroup]:
    """Return copies of groups with a fresh id assigned wherever one is missing."""
    updated = []
    for group in groups:
        group = group.copy()
        if not group.id:
            group.id = id_factory()
        updated.append(group)
    return updated
