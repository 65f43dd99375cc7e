"""
Temporal Workflow: Icon Library Build

Same pipeline as workflows.driver, with the package stage scheduled as
activities on the worker queue:
  1. Reset the library tree
  2. Process every package concurrently (one activity each)
  3. Aggregate the outcomes inside the workflow and finalize
  4. Write the aggregate files
  5. Save the run log

Activities never retry. A failed package comes back as a PackageFailure
inside its outcome. A package activity that errors or times out is turned
into a PackageFailure with stage "activity", so the build still finishes.
"""

from __future__ import annotations

import asyncio
from dataclasses import asdict
from datetime import timedelta

from temporalio import activity, workflow
from temporalio.common import RetryPolicy
from temporalio.exceptions import ActivityError

with workflow.unsafe.imports_passed_through():
    import config
    from activities.library import Library, write_aggregates
    from activities.process_package import run_package
    from features.aggregation import AggregateResult, Aggregator
    from models.packages import all_packages, get_package
    from models.schemas import BuildReport, PackageContribution, PackageFailure, PackageOutcome, PackageType
    from workflows.driver import save_run_log

NO_RETRY = RetryPolicy(maximum_attempts=1)


# ── Activities ────────────────────────────────────────────────────────

@activity.defn
async def reset_library() -> str:
    library = Library()
    await asyncio.get_running_loop().run_in_executor(None, library.reset)
    return str(library.root)


@activity.defn
async def process_package_activity(package_type: str, clean: bool) -> PackageOutcome:
    package = get_package(package_type)
    outcome = PackageOutcome(package_type=package.ty)

    async def submit(contribution: PackageContribution) -> None:
        outcome.contribution = contribution

    outcome.failure = await run_package(package, Library(), submit, clean=clean)
    return outcome


@activity.defn
async def write_aggregates_activity(result: AggregateResult) -> None:
    await asyncio.get_running_loop().run_in_executor(
        None, write_aggregates, Library(), result, all_packages(),
    )


@activity.defn
async def save_run_log_activity(report: BuildReport) -> str:
    return save_run_log(report)


ALL_ACTIVITIES = [
    reset_library,
    process_package_activity,
    write_aggregates_activity,
    save_run_log_activity,
]


# ── Workflow ──────────────────────────────────────────────────────────

def _failed_activity_outcome(ty: PackageType, error: ActivityError) -> PackageOutcome:
    cause = error.cause or error
    short_name = get_package(ty).short_name
    workflow.logger.error("Package %s activity failed: %s", short_name, cause)
    return PackageOutcome(
        package_type=ty,
        failure=PackageFailure(
            package_type=ty,
            short_name=short_name,
            stage="activity",
            error=str(cause),
        ),
    )


@workflow.defn
class IconBuildWorkflow:
    """Rebuilds the leptos-icons library from every known package."""

    @workflow.run
    async def run(self, clean: bool = False) -> dict:
        started = workflow.now()
        report = BuildReport(
            run_id=workflow.info().workflow_id,
            started_at=started.isoformat(),
            status="running",
        )

        report.library_root = await workflow.execute_activity(
            reset_library,
            start_to_close_timeout=timedelta(minutes=1),
            retry_policy=NO_RETRY,
        )

        package_types = list(PackageType)
        results = await asyncio.gather(*(
            workflow.execute_activity(
                process_package_activity,
                args=[ty.value, clean],
                start_to_close_timeout=timedelta(minutes=config.PACKAGE_TIMEOUT_MINUTES),
                retry_policy=NO_RETRY,
            )
            for ty in package_types
        ), return_exceptions=True)

        aggregator = Aggregator()
        for ty, outcome in zip(package_types, results):
            if isinstance(outcome, ActivityError):
                outcome = _failed_activity_outcome(ty, outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
            aggregator.apply_outcome(outcome)
        result = aggregator.finalize()

        await workflow.execute_activity(
            write_aggregates_activity,
            result,
            start_to_close_timeout=timedelta(minutes=5),
            retry_policy=NO_RETRY,
        )

        report.modules = result.modules
        report.num_features = len(result.features)
        report.failures = result.failures
        report.status = "completed_with_failures" if result.failures else "completed"
        report.completed_at = workflow.now().isoformat()
        report.duration_sec = round((workflow.now() - started).total_seconds(), 2)

        report.log_file = await workflow.execute_activity(
            save_run_log_activity,
            report,
            start_to_close_timeout=timedelta(minutes=1),
            retry_policy=NO_RETRY,
        )
        workflow.logger.info(
            "Build %s complete: %d modules, %d failed packages",
            report.run_id, len(report.modules), len(report.failures),
        )
        return asdict(report)
