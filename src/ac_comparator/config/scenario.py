"""Top-level scenario — bundles every input of one comparison."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ac_comparator.config.entry import ComparisonEntry
from ac_comparator.config.lifecycle import LifecycleSettings
from ac_comparator.config.usage import UsagePlan


class ComparisonScenario(BaseModel):
    """Complete, immutable input bundle for one comparison run.

    ``lifecycle`` is optional: when omitted, the lifecycle regime follows the
    usage plan's hours and temperature with regular maintenance in an ideal
    environment.
    """

    model_config = ConfigDict(frozen=True)

    entries: list[ComparisonEntry] = Field(default_factory=list)
    usage: UsagePlan = Field(default_factory=UsagePlan)
    lifecycle: LifecycleSettings | None = None


def load_scenario(path: str | Path) -> ComparisonScenario:
    """Load a YAML scenario file into a :class:`ComparisonScenario`.

    Parse and validation errors (``yaml.YAMLError``,
    ``pydantic.ValidationError``) propagate to the caller.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return ComparisonScenario(**data)
