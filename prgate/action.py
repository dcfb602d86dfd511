"""
GitHub Action entry point.

Loads configuration and the event payload, runs the gate and reports the
outcome with workflow commands and the process exit code.
"""

import asyncio
import logging
import sys
from collections.abc import Mapping
from datetime import datetime
from typing import TextIO

from prgate.client import AsyncGitHubClient
from prgate.config import GateConfig
from prgate.event import load_event, snapshot_from_event
from prgate.exceptions import PRGateError
from prgate.gate import GateController, GateResult
from prgate.logging import configure_logging, get_logger

logger = get_logger("action")


def escape_data(value: str) -> str:
    """Escape a workflow command message the way @actions/core does."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """Emit an ``::error::`` workflow command for ``message``."""
    stream = stream or sys.stdout
    stream.write(f"::error::{escape_data(message)}\n")
    stream.flush()


def set_output(output_path: str | None, name: str, value: str) -> None:
    """Append a step output to the ``$GITHUB_OUTPUT`` file, if there is one."""
    if not output_path:
        return
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}={value}\n")


async def run_gate(config: GateConfig, client: AsyncGitHubClient | None = None) -> GateResult:
    """
    Run the gate for the pull request described by ``config.event_path``.

    Raises:
        InvalidEventError: If the payload is not a usable pull request event
        MutationError: If the final mutation fails
    """
    snapshot = snapshot_from_event(load_event(config.event_path))
    logger.info(f"Checking pull request #{snapshot.number} in {snapshot.repository.full_name}")

    if client is None:
        client = AsyncGitHubClient.from_config(config)

    async with client:
        return await GateController(client, config.rule_set).run(snapshot)


def main(environ: Mapping[str, str] | None = None) -> int:
    """Run the action and return the process exit code."""
    started = datetime.now().strftime("%H:%M:%S")

    try:
        config = GateConfig.from_env(environ)
    except PRGateError as e:
        set_failed(str(e))
        return 1

    configure_logging(level=logging.DEBUG if config.debug else logging.INFO)
    set_output(config.output_path, "time", started)

    try:
        result = asyncio.run(run_gate(config))
    except PRGateError as e:
        logger.error(f"Gate run failed: {e}")
        set_output(config.output_path, "result", "error")
        set_failed(str(e))
        return 1

    set_output(config.output_path, "result", result.outcome.value)
    if not result.passed:
        set_failed(result.message)
        return 1
    return 0
