#!/usr/bin/env python3
"""
Order Identifier Normalization

Maps an order's four identity fields to the canonical key stored in rule
groups: ``seller|productNumber|productName|optionName``, each field trimmed and
lowercased. Quantity and the aggregated fields never take part.

Embedded ``|`` characters are not escaped, so a field containing ``|`` can
collide with a different split of the same text across fields.
"""

from typing import Any

SEPARATOR = "|"


def normalize_field(value: Any) -> str:
    """Trim and lowercase one identity field; None becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip().lower()


def make_identifier(seller: Any, product_number: Any, product_name: Any, option_name: Any) -> str:
    """Build an identifier from the four raw identity fields."""
    return SEPARATOR.join(
        normalize_field(v) for v in (seller, product_number, product_name, option_name)
    )


def identifier_of(order: Any) -> str:
    """
    Compute the canonical identifier of an order.

    Args:
        order: OrderRecord, or any object exposing seller / product_number /
               product_name / option_name attributes

    Returns:
        Identifier string, e.g. "storea|100|widget|red"
    """
    return make_identifier(
        getattr(order, "seller", None),
        getattr(order, "product_number", None),
        getattr(order, "product_name", None),
        getattr(order, "option_name", None),
    )


def split_identifier(identifier: str) -> tuple[str, str, str, str]:
    """
    Split an identifier back into its four normalized fields.

    Fields that themselves contained ``|`` cannot be recovered; extra parts are
    folded into the option name.
    """
    parts = identifier.split(SEPARATOR, 3)
    parts += [""] * (4 - len(parts))
    return parts[0], parts[1], parts[2], parts[3]
