"""
Aggregator — the single owner of cross-package build state.

Package tasks never touch this state directly. They send PackageContribution
and PackageFailure messages over a channel and one consumer applies them in
arrival order. Arrival order is irrelevant for the output: finalize() sorts
everything before the aggregate artifacts are rendered.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Union

from features.aggregation.models import AggregateResult
from models.schemas import (
    Feature,
    IconMeta,
    PackageContribution,
    PackageFailure,
    PackageIconMeta,
    PackageOutcome,
    PackageType,
)

log = logging.getLogger(__name__)

Message = Union[PackageContribution, PackageFailure]


class Aggregator:
    """Accumulates features, modules and icon metadata for one build run."""

    def __init__(self, package_types: Iterable[PackageType] = PackageType):
        self.features: list[Feature] = []
        self.modules: list[str] = []
        # Seeded once; entries are replaced, never inserted.
        self.package_icon_metadata: dict[PackageType, list[IconMeta]] = {ty: [] for ty in package_types}
        self.failures: list[PackageFailure] = []

    def append_features(self, features: Iterable[Feature]) -> None:
        self.features.extend(features)

    def append_module(self, name: str) -> None:
        self.modules.append(name)

    def set_package_icon_meta(self, package_type: PackageType, icon_meta: Iterable[IconMeta]) -> None:
        if package_type not in self.package_icon_metadata:
            raise KeyError(f"{package_type!r} has no icon metadata entry; the aggregator was not seeded with it")
        self.package_icon_metadata[package_type] = list(icon_meta)

    def record_failure(self, failure: PackageFailure) -> None:
        self.failures.append(failure)

    def apply(self, message: Message) -> None:
        if isinstance(message, PackageFailure):
            self.record_failure(message)
            return
        self.set_package_icon_meta(message.package_type, message.icon_meta)
        self.append_features(message.features)
        self.append_module(message.module)
        log.info(
            "Aggregated %s: %d features (%d packages so far)",
            message.module, len(message.features), len(self.modules),
        )

    def apply_outcome(self, outcome: PackageOutcome) -> None:
        # A package can contribute and still fail afterwards (e.g. writing its module).
        if outcome.contribution is not None:
            self.apply(outcome.contribution)
        if outcome.failure is not None:
            self.apply(outcome.failure)

    async def consume(self, channel: asyncio.Queue) -> None:
        """Apply messages until a None sentinel arrives."""
        while True:
            message = await channel.get()
            try:
                if message is None:
                    return
                self.apply(message)
            finally:
                channel.task_done()

    def finalize(self) -> AggregateResult:
        """
        Sort and hand over the collected state, leaving the aggregator empty.

        Sorting here is what makes repeated builds byte-identical no matter
        in which order the package tasks finished.
        """
        log.info("Sorting %d modules and %d features to avoid churn", len(self.modules), len(self.features))
        result = AggregateResult(
            modules=sorted(self.modules),
            features=sorted(self.features),
            package_icon_metadata=[
                PackageIconMeta(package_type=ty, icons=icons)
                for ty, icons in self.package_icon_metadata.items()
            ],
            failures=sorted(self.failures, key=lambda f: (f.short_name, f.stage)),
        )
        self.features = []
        self.modules = []
        self.package_icon_metadata = {ty: [] for ty in self.package_icon_metadata}
        self.failures = []
        return result
