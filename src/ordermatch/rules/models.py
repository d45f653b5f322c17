#!/usr/bin/env python3
"""
Matching Rule Domain Models

A RuleGroup maps a set of order identifiers to one target (category) name and
a quantity weight policy. The JSON shape matches the v1 rule files and backups
written by earlier releases, so keys stay camelCase on disk.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any


def generate_rule_id() -> str:
    """Generate a unique, stable rule group id."""
    return uuid.uuid4().hex


@dataclass
class RuleGroup:
    """
    User-defined mapping from order identifiers to a target name.

    members keeps insertion order and never holds duplicates. weight_overrides
    is sparse: an identifier absent from it uses default_weight.
    """

    id: str
    target_name: str
    default_weight: int = 1
    members: list[str] = field(default_factory=list)
    weight_overrides: dict[str, int] = field(default_factory=dict)

    # Carried over from older rule files; unused by matching
    stock: int = 0

    def has_member(self, identifier: str) -> bool:
        """Check whether identifier belongs to this group."""
        return identifier in self.members

    def override_for(self, identifier: str) -> int | None:
        """
        Get the per-identifier weight override.

        Returns:
            The override value, or None if the identifier has no override
            (even when a stored override equals the default weight)
        """
        return self.weight_overrides.get(identifier)

    def copy(self) -> "RuleGroup":
        """Deep-enough copy: members and overrides are not shared."""
        return RuleGroup(
            id=self.id,
            target_name=self.target_name,
            default_weight=self.default_weight,
            members=list(self.members),
            weight_overrides=dict(self.weight_overrides),
            stock=self.stock,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuleGroup":
        """
        Create RuleGroup from its v1 JSON form.

        Args:
            data: Dict with productName, quantityWeight, rules, ruleWeights, id, stock

        Returns:
            RuleGroup instance; id is "" when the stored group had none
        """
        members: list[str] = []
        for member in data.get("rules") or []:
            member = str(member)
            if member not in members:
                members.append(member)

        overrides = data.get("ruleWeights") or {}
        if not isinstance(overrides, dict):
            overrides = {}

        return cls(
            id=str(data.get("id") or ""),
            target_name=str(data.get("productName", "")),
            default_weight=data.get("quantityWeight", 1),
            members=members,
            weight_overrides={str(k): v for k, v in overrides.items()},
            stock=data.get("stock", 0) or 0,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to v1 JSON form."""
        return {
            "id": self.id,
            "productName": self.target_name,
            "stock": self.stock,
            "quantityWeight": self.default_weight,
            "rules": list(self.members),
            "ruleWeights": dict(self.weight_overrides),
        }

    @property
    def member_count(self) -> int:
        return len(self.members)
