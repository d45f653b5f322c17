"""
Matching Rules Package

User-defined rule groups that classify order identifiers under a target name,
plus their persistence, backups and the category list.

Key Components:
- models: RuleGroup
- index: first-match-wins identifier lookup
- weights: per-identifier quantity weight resolution
- editor: validated, non-mutating rule set edits
- datastore / backup / categories: persistence
"""

from .backup import InvalidBackupFormatError, build_backup, load_backup, write_backup
from .categories import DEFAULT_CATEGORIES, CategoryStore
from .datastore import PersistenceFailureError, RuleSetStore
from .editor import (
    EmptyTargetNameError,
    InvalidWeightError,
    RuleGroupNotFoundError,
    create_rule_from_order,
    delete_rule_group,
    ensure_rule_ids,
    find_group_for_row,
    remove_member,
    set_member_weight,
    update_rule_group,
)
from .index import RuleIndex, find_match
from .models import RuleGroup, generate_rule_id
from .weights import resolve_weight

__all__ = [
    # Domain models
    "RuleGroup",
    "generate_rule_id",
    # Matching
    "RuleIndex",
    "find_match",
    "resolve_weight",
    # Editing
    "EmptyTargetNameError",
    "InvalidWeightError",
    "RuleGroupNotFoundError",
    "create_rule_from_order",
    "delete_rule_group",
    "ensure_rule_ids",
    "find_group_for_row",
    "remove_member",
    "set_member_weight",
    "update_rule_group",
    # Persistence
    "CategoryStore",
    "DEFAULT_CATEGORIES",
    "InvalidBackupFormatError",
    "PersistenceFailureError",
    "RuleSetStore",
    "build_backup",
    "load_backup",
    "write_backup",
]
