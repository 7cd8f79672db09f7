from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .core.config import get_settings
from .core.errors import DaylogError
from .core.logging import configure_logging
from .domain import DayLog, ProjectContext, assemble_log, create_daytalog

console = Console()


def main(argv: Optional[list[str]] = None) -> None:
    """The main entry point for the CLI.

    Args:
        argv: The command-line arguments.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    configure_logging(get_settings().level)
    try:
        args.func(args)
    except (DaylogError, ValidationError) as exc:
        console.print(f"[red]{exc}[/]")
        sys.exit(3)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI.

    Returns:
        The argument parser.
    """
    parser = argparse.ArgumentParser(description="Daylog developer CLI")
    subparsers = parser.add_subparsers(dest="command")

    summary_parser = subparsers.add_parser("summary", help="Print the selected log and project totals")
    summary_parser.add_argument("--project", required=True, help="Path to the project JSON file")
    summary_parser.add_argument(
        "--logs",
        required=True,
        nargs="+",
        help="Day-log JSON files; each holds one log or a list of logs",
    )
    summary_parser.add_argument(
        "--select",
        nargs="*",
        default=[],
        help="Log ids to select (defaults to the latest day)",
    )
    summary_parser.add_argument("--pad", type=int, choices=(1, 2, 3), default=None, help="Zero padding for days")
    summary_parser.set_defaults(func=_cmd_summary)

    clips_parser = subparsers.add_parser("clips", help="Print the merged clips of one day log")
    clips_parser.add_argument("--project", required=True, help="Path to the project JSON file")
    clips_parser.add_argument("--log", required=True, help="Path to a single day-log JSON file")
    clips_parser.add_argument("--json", action="store_true", help="Print merged clip records as JSON")
    clips_parser.set_defaults(func=_cmd_clips)
    return parser


def _cmd_summary(args: argparse.Namespace) -> None:
    """Print the selected log and totals across every log.

    Args:
        args: The command-line arguments.
    """
    project = _load_project(Path(args.project))
    logs: List[DayLog] = []
    for path in args.logs:
        logs.extend(_load_logs(Path(path)))

    daytalog = create_daytalog(project, logs, selection=args.select or None)
    current = daytalog.log
    total = daytalog.total

    console.rule(f"[bold]{daytalog.project_name or 'Untitled project'}")
    console.print(f"[bold]Log[/]: {current.id}  day {current.day(args.pad)}  {current.date()}")
    console.print(f"[bold]OCF[/]: {current.ocf.files()} files, {current.ocf.size()}, {current.ocf.duration()}")
    console.print(f"[bold]Proxy[/]: {current.proxy.files()} files, {current.proxy.size()}")
    console.print(f"[bold]Sound[/]: {current.sound.files()} files, {current.sound.size()}")

    first_day, last_day = total.day_range(args.pad)
    first_date, last_date = total.date_range()
    table = Table(title="Project totals")
    table.add_column("Days")
    table.add_column("Day range")
    table.add_column("Date range")
    table.add_column("OCF")
    table.add_column("Proxy")
    table.add_column("Sound")
    table.add_row(
        total.days(),
        f"{first_day} - {last_day}",
        f"{first_date} - {last_date}",
        f"{total.ocf.files()} / {total.ocf.size()} / {total.ocf.duration()}",
        f"{total.proxy.files()} / {total.proxy.size()}",
        f"{total.sound.files()} / {total.sound.size()}",
    )
    console.print(table)


def _cmd_clips(args: argparse.Namespace) -> None:
    """Print the merged clips of one day log.

    Args:
        args: The command-line arguments.
    """
    project = _load_project(Path(args.project))
    logs = _load_logs(Path(args.log))
    options = project.log_options(default_fps=get_settings().default_fps)

    for log in logs:
        assembled = assemble_log(log, options)
        if args.json:
            console.print_json(data={clip.name: dict(clip) for clip in assembled.clips})
            continue

        table = Table(title=f"{assembled.id} (day {assembled.day()})")
        table.add_column("Clip")
        table.add_column("Size")
        table.add_column("Duration")
        table.add_column("Proxy")
        table.add_column("Sound")
        for clip in assembled.clips:
            table.add_row(
                clip.name,
                clip.size(),
                clip.duration(),
                clip.proxy.size() if clip.proxy else "",
                ", ".join(clip.sound),
            )
        console.print(table)


def _read_json(path: Path):
    """Read a JSON file, exiting with status 2 when it does not exist.

    Args:
        path: The file to read.

    Returns:
        The decoded JSON value.
    """
    path = path.expanduser().resolve()
    if not path.exists():
        console.print(f"[red]File not found: {path}[/]")
        sys.exit(2)
    return json.loads(path.read_text())


def _load_project(path: Path) -> ProjectContext:
    return ProjectContext.model_validate(_read_json(path))


def _load_logs(path: Path) -> List[DayLog]:
    data = _read_json(path)
    if isinstance(data, list):
        return [DayLog.model_validate(item) for item in data]
    return [DayLog.model_validate(data)]


if __name__ == "__main__":
    main()
