# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command validating the REUSE compliance of a repository or a pull request

import asyncio
import subprocess
from typing import Annotated, Optional

import typer
from agithub.GitHub import GitHub
from giturlparse import parse as parse_git_url

from reuse_me.adaptors.os import write_file
from reuse_me.bom.content_providers.abstract_content_provider import ContentProvider
from reuse_me.bom.content_providers.github_content_provider import (
    GitHubContentProvider,
)
from reuse_me.bom.content_providers.local_content_provider import (
    LocalContentProvider,
)
from reuse_me.bom.file_enumerators.abstract_file_enumerator import FileEnumerator
from reuse_me.bom.file_enumerators.git_file_enumerator import GitFileEnumerator
from reuse_me.bom.file_enumerators.github_pull_request_file_enumerator import (
    GitHubPullRequestFileEnumerator,
)
from reuse_me.bom.writers.spdx_json_bom_writer import SpdxJsonBomWriter
from reuse_me.config import Config, JsonConfigParser, default_config
from reuse_me.report_generator.report_generator import ReportGenerator
from reuse_me.report_generator.writers.console_reporting_writer import (
    ConsoleReportingWriter,
)
from reuse_me.report_generator.writers.sarif_reporting_writer import (
    SarifReportingWriter,
)
from reuse_me.utils.logging import parse_log_level, setup_logging
from reuse_me.validator.validator import run_validation

SEPARATOR = "----------------------------------------"


def _github_sources(
    github_repository: str,
    pull_request: int,
    github_token: Optional[str],
    ref: Optional[str],
    config: Config,
) -> tuple[FileEnumerator, ContentProvider]:
    parsed_url = parse_git_url(github_repository)
    if not parsed_url.valid or not parsed_url.github:
        raise typer.BadParameter(
            f"{github_repository} is not a GitHub repository URL.",
            param_hint="'--github-repository'",
        )
    github_client = GitHub(token=github_token) if github_token else GitHub()
    file_enumerator = GitHubPullRequestFileEnumerator(
        github_client,
        parsed_url.owner,
        parsed_url.repo,
        pull_request,
        ref,
        config,
    )
    # contents are read at the head of the pull request, not the default branch
    return file_enumerator, GitHubContentProvider(
        github_client, parsed_url.owner, parsed_url.repo, file_enumerator.get_ref()
    )


def validate(
    path: Annotated[
        str,
        typer.Argument(help="A path inside the git repository to validate."),
    ] = ".",
    sbom_output: Annotated[
        Optional[str],
        typer.Option(
            "--sbom-output",
            "-s",
            help="Output path for the Software Bill of Materials (SPDX JSON). Only written when no issue is found.",
        ),
    ] = None,
    sarif_output: Annotated[
        Optional[str],
        typer.Option("--sarif-output", "-c", help="Output path for the SARIF file."),
    ] = None,
    config_file: Annotated[
        Optional[str],
        typer.Option("--config", help="JSON file overriding the default configuration."),
    ] = None,
    github_repository: Annotated[
        Optional[str],
        typer.Option(
            "--github-repository",
            help="Validate a pull request of this GitHub repository instead of the local working copy.",
        ),
    ] = None,
    pull_request: Annotated[
        Optional[int],
        typer.Option("--pull-request", help="Number of the pull request to validate."),
    ] = None,
    github_token: Annotated[
        Optional[str],
        typer.Option(
            envvar="GITHUB_TOKEN",
            help="GitHub token used to access the repository.",
        ),
    ] = None,
    ref: Annotated[
        Optional[str],
        typer.Option(
            "--ref",
            help="Git ref to read the pull request files from. Defaults to the head commit of the pull request.",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
) -> None:
    """
    Validate the REUSE compliance of a repository.
    """
    try:
        setup_logging(parse_log_level(log_level))
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="'--log-level'")

    if (github_repository is None) != (pull_request is None):
        raise typer.BadParameter(
            "--github-repository and --pull-request must be used together.",
            param_hint="'--github-repository'",
        )

    config = default_config
    if config_file:
        try:
            config = JsonConfigParser.load_config(config_file)
        except (OSError, ValueError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    typer.echo("📄 ReuseMe - REUSE compliance validation")
    typer.echo(SEPARATOR)
    typer.echo()

    try:
        file_enumerator: FileEnumerator
        content_provider: ContentProvider
        if github_repository is not None and pull_request is not None:
            file_enumerator, content_provider = _github_sources(
                github_repository, pull_request, github_token, ref, config
            )
        else:
            git_enumerator = GitFileEnumerator(path, config)
            content_provider = LocalContentProvider(git_enumerator.get_root_path())
            file_enumerator = git_enumerator

        bom, report = asyncio.run(
            run_validation(file_enumerator, content_provider, config)
        )
    except (subprocess.CalledProcessError, OSError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(ReportGenerator(ConsoleReportingWriter()).generate_report(report))

    if sarif_output or sbom_output:
        typer.echo(SEPARATOR)

    if sarif_output:
        typer.echo("✏️  Writing SARIF file...")
        write_file(
            sarif_output,
            ReportGenerator(SarifReportingWriter(config)).generate_report(report),
        )

    if sbom_output:
        if report.passed:
            typer.echo("✏️  Writing Software Bill of Materials file...")
            write_file(sbom_output, SpdxJsonBomWriter(config).write(bom))
        else:
            typer.echo("⚠️  Skipping Software Bill of Materials file...")

    typer.echo(SEPARATOR)
    if report.passed:
        typer.echo("✅ Found no REUSE compliance issues.")
    else:
        typer.echo(
            f"❌ Found {report.error_count} REUSE compliance issues.", err=True
        )
        raise typer.Exit(code=1)
