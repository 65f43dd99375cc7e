"""
Data models for the aggregation feature.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from models.schemas import Feature, PackageFailure, PackageIconMeta


@dataclass
class AggregateResult:
    """Finalized, deterministically ordered cross-package build state."""
    modules: list[str] = field(default_factory=list)
    features: list[Feature] = field(default_factory=list)
    package_icon_metadata: list[PackageIconMeta] = field(default_factory=list)
    failures: list[PackageFailure] = field(default_factory=list)
