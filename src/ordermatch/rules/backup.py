#!/usr/bin/env python3
"""
Rule Set Backups

Export and restore of the rule set as a versioned JSON document:

    {
      "version": "v1",
      "timestamp": "<ISO-8601>",
      "rules": [<rule group>, ...],
      "metadata": {"totalRules": N, "markets": [...], "lastModified": "<ISO-8601>"}
    }
"""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..core.json_utils import read_json, write_json
from .editor import ensure_rule_ids
from .models import RuleGroup

logger = logging.getLogger(__name__)

BACKUP_VERSION = "v1"
MARKET_PATTERN = re.compile(r"마켓이\s+(\S+)이고")


class InvalidBackupFormatError(ValueError):
    """Raised when a backup file is unreadable, not v1, or has no rules array."""

    pass


def _iso_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def extract_markets(groups: list[RuleGroup]) -> list[str]:
    """Collect market names mentioned in member strings, first-seen order, no duplicates."""
    markets: list[str] = []
    for group in groups:
        for member in group.members:
            match = MARKET_PATTERN.search(member)
            if match and match.group(1) not in markets:
                markets.append(match.group(1))
    return markets


def build_backup(groups: list[RuleGroup], now: datetime | None = None) -> dict[str, Any]:
    """
    Build the v1 backup document for a rule set.

    Args:
        groups: Rule groups to back up
        now: Timestamp to record (defaults to the current time)

    Returns:
        JSON-serializable backup document
    """
    stamp = _iso_timestamp(now or datetime.now(timezone.utc))
    return {
        "version": BACKUP_VERSION,
        "timestamp": stamp,
        "rules": [group.to_dict() for group in groups],
        "metadata": {
            "totalRules": len(groups),
            "markets": extract_markets(groups),
            "lastModified": stamp,
        },
    }


def backup_filename(now: datetime | None = None) -> str:
    """Backup file name for a given day: matching-rules-backup-v1-YYYY-MM-DD.json."""
    day = (now or datetime.now(timezone.utc)).strftime("%Y-%m-%d")
    return f"matching-rules-backup-{BACKUP_VERSION}-{day}.json"


def write_backup(groups: list[RuleGroup], directory: str | Path, now: datetime | None = None) -> Path:
    """
    Write a backup file for groups into directory.

    Returns:
        Path of the written backup
    """
    now = now or datetime.now(timezone.utc)
    output_file = Path(directory) / backup_filename(now)
    write_json(output_file, build_backup(groups, now))
    logger.info("Wrote backup of %d rule groups to %s", len(groups), output_file)
    return output_file


def parse_backup(document: Any) -> list[RuleGroup]:
    """
    Validate a decoded backup document and return its rule groups.

    Raises:
        InvalidBackupFormatError: If the document isn't a v1 backup with a rules array
    """
    if not isinstance(document, dict):
        raise InvalidBackupFormatError("유효하지 않은 백업 파일입니다.")
    rules = document.get("rules")
    if not isinstance(rules, list) or document.get("version") != BACKUP_VERSION:
        raise InvalidBackupFormatError("유효하지 않은 백업 파일입니다.")
    if not all(isinstance(item, dict) for item in rules):
        raise InvalidBackupFormatError("유효하지 않은 백업 파일입니다.")

    return ensure_rule_ids([RuleGroup.from_dict(item) for item in rules])


def load_backup(path: str | Path) -> list[RuleGroup]:
    """
    Load rule groups from a backup file.

    Groups without an id are assigned one.

    Raises:
        InvalidBackupFormatError: If the file can't be read or isn't a valid v1 backup
    """
    try:
        document = read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidBackupFormatError(f"백업 파일을 읽는데 실패했습니다: {e}") from e

    groups = parse_backup(document)
    logger.info("Loaded %d rule groups from backup %s", len(groups), path)
    return groups
