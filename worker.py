"""
Temporal Worker — registers the build workflow and activities, then polls for tasks.

Usage:
    python worker.py
"""

from __future__ import annotations

import asyncio
import logging

from temporalio.client import Client
from temporalio.worker import Worker

import config
from workflows.build import ALL_ACTIVITIES, IconBuildWorkflow

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger(__name__)


async def main():
    log.info("Connecting to Temporal at %s", config.TEMPORAL_HOST)
    client = await Client.connect(config.TEMPORAL_HOST, namespace=config.TEMPORAL_NAMESPACE)

    log.info("Starting worker on queue: %s", config.TEMPORAL_TASK_QUEUE)
    worker = Worker(
        client,
        task_queue=config.TEMPORAL_TASK_QUEUE,
        workflows=[IconBuildWorkflow],
        activities=ALL_ACTIVITIES,
    )

    log.info("Worker ready, listening for tasks")
    await worker.run()


if __name__ == "__main__":
    asyncio.run(main())
