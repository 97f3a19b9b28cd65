# SPDX-License-Identifier: MIT
"""Policy and gate-profile configuration for the work-item rule catalog."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from wicheck.entities import Project, User
from wicheck.rules.base import Severity


class PolicyConfig(BaseModel):
    """Target project, client roles and estimation series the rules check against."""

    model_config = ConfigDict(frozen=True)

    project: Project
    product_owner: User
    story_validator: User
    defect_validator: User
    qa_deployer: User
    estimation_series: tuple[float, ...] = (1.0, 2.0, 3.0, 5.0, 8.0, 13.0, 20.0)

    def is_client(self, user: User | None) -> bool:
        """True when the user is one of the roles the item is handed back to."""
        return user is not None and user in (
            self.product_owner,
            self.story_validator,
            self.defect_validator,
        )


DEFAULT_POLICY = PolicyConfig(
    project=Project(id="gordon", name="Gordon"),
    product_owner=User(id="product-owner", display_name="Product Owner"),
    story_validator=User(id="us-validator", display_name="User Story Validator"),
    defect_validator=User(id="defect-validator", display_name="Defect Validator"),
    qa_deployer=User(id="qa-deployer", display_name="QA Deployer"),
)


def load_policy(cli_path: str | None = None) -> PolicyConfig:
    """Load policy config with CLI > env > default priority.

    Args:
        cli_path: Path to a policy JSON file from the CLI --policy flag.

    Returns:
        The resolved PolicyConfig.

    Raises:
        FileNotFoundError: If the configured file does not exist.
        ValueError: If the file content is not a valid policy.
    """
    path_str = cli_path or os.environ.get("WICHECK_POLICY")
    if not path_str:
        return DEFAULT_POLICY
    text = Path(path_str).read_text(encoding="utf-8")
    try:
        return PolicyConfig.model_validate_json(text)
    except ValidationError as e:
        msg = f"Invalid policy file {path_str!r}: {e.error_count()} error(s)"
        raise ValueError(msg) from e


@dataclass(frozen=True)
class ProfileConfig:
    """Gate profile: the lowest severity that fails a report."""

    name: str
    fail_on: Severity


PROFILES: dict[str, ProfileConfig] = {
    "general": ProfileConfig(name="general", fail_on=Severity.IMPORTANT),
    "strict": ProfileConfig(name="strict", fail_on=Severity.WARN),
    "pedantic": ProfileConfig(name="pedantic", fail_on=Severity.INFO),
}


def load_profile(cli_profile: str | None = None) -> ProfileConfig:
    """Load profile config with CLI > env > default priority.

    Raises:
        ValueError: If the profile name is not recognized.
    """
    name = cli_profile or os.environ.get("WICHECK_PROFILE", "general")
    if name not in PROFILES:
        msg = f"Unknown profile: {name!r}. Valid profiles: {sorted(PROFILES.keys())}"
        raise ValueError(msg)
    return PROFILES[name]
