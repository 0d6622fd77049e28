"""
Module records loaded from modules.json.
"""

from dataclasses import dataclass
from typing import Dict, Any

DEFAULT_BRANCH = "main"


@dataclass(frozen=True)
class ModuleConfig:
    """Backing repository of one vanity module."""

    git: str = ""
    branch: str = DEFAULT_BRANCH
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModuleConfig":
        return cls(
            git=data.get("git", ""),
            branch=data.get("branch") or DEFAULT_BRANCH,
            description=data.get("description", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "git": self.git,
            "branch": self.branch,
            "description": self.description,
        }


# Module name -> config; the name is the mapping key, not a field.
ModuleSet = Dict[str, ModuleConfig]
