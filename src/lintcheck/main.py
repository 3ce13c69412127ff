from __future__ import annotations

import asyncio
import os
import sys
import uuid
from typing import Optional

from .config import load_config
from .constants import FALLBACK_ERROR_MESSAGE, ExitCode
from .context import GitHubContext
from .errors import ConfigError, ContextError, LintCheckError, PublishError
from .github import GitHubClient
from .logging import LintLogger, escape_workflow_command
from .models import Verdict
from .publish import write_github_outputs, write_step_summary
from .report import load_report
from .transform import transform

ACTION_VERSION = "1.0.0"


def _set_failed(message: str) -> None:
    sys.stdout.write(f"::error::{escape_workflow_command(message)}\n")
    sys.stdout.flush()


def _failure_message(exc: BaseException) -> str:
    return str(exc) or FALLBACK_ERROR_MESSAGE


def _exit_code_from_verdict(verdict: Verdict) -> int:
    return int(ExitCode.FAILED if verdict.failed else ExitCode.SUCCESS)


def _close_failed_check_run(
    gh: GitHubClient,
    check_run_id: int,
    title: str,
    message: str,
    logger: LintLogger,
) -> None:
    """Mark an already-created check run as failed so it does not stay in progress."""
    try:
        gh.update_check_run(
            check_run_id,
            conclusion="failure",
            output={"title": title, "summary": message},
        )
    except PublishError as exc:
        logger.warning("Failed to close check run", check_run_id=check_run_id, error=str(exc))


def _publish_extras(
    verdict: Verdict,
    check_name: str,
    check_run_url: Optional[str],
    logger: LintLogger,
) -> None:
    try:
        write_step_summary(verdict, check_name, check_run_url=check_run_url)
    except OSError as exc:
        logger.warning("Failed to write step summary", error=str(exc))
    try:
        write_github_outputs(verdict, check_run_url=check_run_url)
    except OSError as exc:
        logger.warning("Failed to write action outputs", error=str(exc))


def main() -> int:
    """Main entry point."""
    return asyncio.run(async_main())


async def async_main() -> int:
    """Async main entry point."""
    run_id = str(uuid.uuid4())
    logger = LintLogger(run_id)

    try:
        config = load_config()
    except ConfigError as exc:
        _set_failed(str(exc))
        return int(exc.exit_code)

    try:
        ctx = GitHubContext.from_environment()
    except ContextError as exc:
        _set_failed(f"Failed to load GitHub context: {exc}")
        return int(exc.exit_code)

    logger.info(
        "Lint check starting",
        version=ACTION_VERSION,
        repo=ctx.repo_full_name,
        event=ctx.event_name,
        actor=ctx.actor,
        pr_number=ctx.pr_number,
        head_sha=ctx.head_sha,
        report=config.filename,
    )

    token = config.repo_token.get_secret_value() or os.environ.get("GITHUB_TOKEN", "")
    gh = GitHubClient(token=token, repo=ctx.repo_full_name)
    check_run_id: Optional[int] = None

    try:
        with logger.stage("create_check_run"):
            check_run_id = gh.create_check_run(config.check_name, ctx.head_sha)

        with logger.stage("transform"):
            report = await asyncio.to_thread(load_report, config.filename)
            verdict = transform(report, config.to_transform_options(ctx.workspace), logger)

        with logger.stage("publish"):
            check_run_url = gh.update_check_run(check_run_id, **verdict.to_output())
    except Exception as exc:
        message = _failure_message(exc)
        _set_failed(message)
        if check_run_id is not None:
            _close_failed_check_run(gh, check_run_id, config.report_name, message, logger)
        if isinstance(exc, LintCheckError):
            return int(exc.exit_code)
        return int(ExitCode.ERROR)

    logger.info(
        "Lint check complete",
        conclusion=verdict.conclusion,
        annotations=verdict.count,
        issues=len(report),
    )
    _publish_extras(verdict, config.check_name, check_run_url, logger)
    return _exit_code_from_verdict(verdict)


if __name__ == "__main__":
    sys.exit(main())
