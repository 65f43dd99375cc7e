"""
FastAPI application — REST API for the leptos-icons build.

Endpoints:
  POST /build/start    — Start a library build
  GET  /build/runs     — List all build runs
  GET  /build/{run_id} — Get build run status/results
  GET  /health         — Health check
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from temporalio.client import Client

import config
from workflows.build import IconBuildWorkflow
from workflows.driver import new_run_id, run_build

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger(__name__)

temporal_client: Client | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global temporal_client
    try:
        temporal_client = await Client.connect(config.TEMPORAL_HOST, namespace=config.TEMPORAL_NAMESPACE)
        log.info("Connected to Temporal at %s", config.TEMPORAL_HOST)
    except Exception as e:
        log.warning("Could not connect to Temporal: %s (builds will run in-process)", e)
        temporal_client = None
    yield


app = FastAPI(
    title="leptos-icons build",
    description="Generates the leptos-icons crate from third-party SVG icon packages",
    version="1.0.0",
    lifespan=lifespan,
)


class BuildStartRequest(BaseModel):
    clean: bool = config.CLEAN_DOWNLOADS


class BuildStartResponse(BaseModel):
    run_id: str
    status: str
    message: str


class FailureSummary(BaseModel):
    package: str
    stage: str
    error: str


class RunSummary(BaseModel):
    run_id: str
    status: str | None = None
    started_at: str | None = None
    duration_sec: float | None = None
    modules: int = 0
    failures: list[FailureSummary] = []


# ── Health ────────────────────────────────────────────────────────────

@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": "leptos-icons-build",
        "temporal_connected": temporal_client is not None,
    }


# ── Build ─────────────────────────────────────────────────────────────

@app.post("/build/start", response_model=BuildStartResponse)
async def start_build(req: BuildStartRequest):
    """Regenerate the whole library."""
    if temporal_client:
        run_id = new_run_id()
        await temporal_client.start_workflow(
            IconBuildWorkflow.run,
            req.clean,
            id=run_id,
            task_queue=config.TEMPORAL_TASK_QUEUE,
        )
        return BuildStartResponse(
            run_id=run_id,
            status="started",
            message=f"Build started via Temporal. Workflow ID: {run_id}",
        )

    report = await run_build(clean=req.clean)
    return BuildStartResponse(
        run_id=report.run_id,
        status=report.status,
        message=f"Build ran in-process (no Temporal): {len(report.modules)} modules, "
                f"{len(report.failures)} failed packages",
    )


@app.get("/build/runs")
async def list_build_runs(limit: int = 50):
    """List recorded build runs, newest first."""
    config.BUILD_RUNS_DIR.mkdir(parents=True, exist_ok=True)
    runs = []
    for log_file in sorted(config.BUILD_RUNS_DIR.glob("*.json"), reverse=True)[:limit]:
        try:
            with open(log_file) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Skipping unreadable run log %s: %s", log_file, e)
            continue
        runs.append(_summarize(data))
    return {"runs": [r.model_dump() for r in runs]}


@app.get("/build/{run_id}")
async def get_build_run(run_id: str):
    """Get the full report of a build run."""
    log_file = config.BUILD_RUNS_DIR / f"{run_id}.json"
    if log_file.exists():
        with open(log_file) as f:
            return json.load(f)

    if temporal_client:
        try:
            handle = temporal_client.get_workflow_handle(run_id)
            desc = await handle.describe()
            result = None
            if desc.status.name == "COMPLETED":
                result = await handle.result()
            return {
                "run_id": run_id,
                "temporal_status": desc.status.name,
                "result": result,
            }
        except Exception as e:
            raise HTTPException(status_code=404, detail=f"Run not found: {run_id}") from e

    raise HTTPException(status_code=404, detail=f"Run not found: {run_id}")


def _summarize(data: dict) -> RunSummary:
    return RunSummary(
        run_id=data.get("run_id", ""),
        status=data.get("status"),
        started_at=data.get("started_at"),
        duration_sec=data.get("duration_sec"),
        modules=len(data.get("modules", [])),
        failures=[
            FailureSummary(package=f["short_name"], stage=f["stage"], error=f["error"])
            for f in data.get("failures", [])
        ],
    )
