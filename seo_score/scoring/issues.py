from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Any

CRITICAL = "critical"
WARNING = "warning"
SUGGESTION = "suggestion"

# Checklist icon shown next to each issue in the editor.
ISSUE_ICONS = {CRITICAL: "✗", WARNING: "!"}
PASS_ICON = "✓"


@dataclass(frozen=True)
class Issue:
    type: str  # critical | warning | suggestion
    message: str

    @property
    def icon(self) -> str:
        return ISSUE_ICONS.get(self.type, PASS_ICON)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def critical(message: str) -> Issue:
    return Issue(CRITICAL, message)


def warning(message: str) -> Issue:
    return Issue(WARNING, message)


def suggestion(message: str) -> Issue:
    return Issue(SUGGESTION, message)
