from __future__ import annotations

import argparse
import json
import logging
import shlex
import sys
from dataclasses import dataclass
from datetime import date
from typing import Iterable, NoReturn, TextIO

from task_dashboard.analytics import priority_distribution, tasks_per_day
from task_dashboard.config import Settings
from task_dashboard.logging_setup import setup_logging
from task_dashboard.models import Priority
from task_dashboard.session import DashboardSession

logger = logging.getLogger(__name__)

QUIT_WORDS = {"quit", "exit"}


class CommandError(Exception):
    pass


class HelpRequested(Exception):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


class _ShellParser(argparse.ArgumentParser):
    """Parser that reports problems instead of terminating the process."""

    def print_help(self, file: TextIO | None = None) -> None:
        if file is None:
            raise HelpRequested(self.format_help())
        super().print_help(file)

    def error(self, message: str) -> NoReturn:
        raise CommandError(message)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            raise CommandError(message.strip())
        raise CommandError("")


@dataclass(slots=True)
class Context:
    session: DashboardSession
    settings: Settings
    out: TextIO


def iso_date(raw: str) -> date:
    return date.fromisoformat(raw)


def cmd_add(ctx: Context, args: argparse.Namespace) -> int:
    ctx.session.reset_form()
    form = ctx.session.form
    form.title = args.title
    form.subtitle = args.subtitle
    form.description = args.description
    if args.due is not None:
        form.due_date = args.due
    form.priority = Priority.parse(args.priority)

    missing = form.missing_fields()
    task = ctx.session.submit()
    if task is None:
        print(f"rejected: missing {','.join(missing)}", file=ctx.out)
        return 1
    print(f"created: {task.id}", file=ctx.out)
    return 0


def cmd_list(ctx: Context, args: argparse.Namespace) -> int:
    tasks = ctx.session.visible_tasks()
    if args.json:
        print(json.dumps([task.to_dict() for task in tasks], ensure_ascii=False, indent=2), file=ctx.out)
        return 0
    if not tasks:
        print("no tasks", file=ctx.out)
        return 0

    for task in tasks:
        due = ctx.settings.format_date(task.due_date)
        print(f"({task.priority.label}) {task.id} {task.title} - {task.subtitle} due: {due}", file=ctx.out)
        print(f"    {task.description}", file=ctx.out)
    return 0


def cmd_select(ctx: Context, args: argparse.Namespace) -> int:
    ctx.session.select_date(args.day)
    print(f"selected: {ctx.settings.format_date(args.day)}", file=ctx.out)
    return 0


def cmd_clear(ctx: Context, _args: argparse.Namespace) -> int:
    ctx.session.clear_selection()
    print("selected: all", file=ctx.out)
    return 0


def cmd_marked(ctx: Context, _args: argparse.Namespace) -> int:
    for day in sorted(ctx.session.marked_dates()):
        print(day.isoformat(), file=ctx.out)
    return 0


def cmd_stats(ctx: Context, _args: argparse.Namespace) -> int:
    tasks = ctx.session.store.all()
    distribution = priority_distribution(tasks)
    print(f"total={len(tasks)}", file=ctx.out)
    print(" ".join(f"{level.value}={count}" for level, count in distribution.items()), file=ctx.out)
    for day, count in tasks_per_day(tasks).items():
        print(f"{day.isoformat()} {count}", file=ctx.out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = _ShellParser(prog="task-dashboard", description="Task Dashboard session", add_help=False)
    sub = parser.add_subparsers(dest="command", required=True, parser_class=_ShellParser)

    add = sub.add_parser("add", help="add task")
    add.add_argument("title")
    add.add_argument("-s", "--subtitle", default="")
    add.add_argument("-d", "--description", default="")
    add.add_argument("--due", type=iso_date)
    add.add_argument("-p", "--priority", choices=[level.value for level in Priority], default=Priority.MEDIUM.value)
    add.set_defaults(handler=cmd_add)

    show = sub.add_parser("list", help="list visible tasks")
    show.add_argument("--json", action="store_true")
    show.set_defaults(handler=cmd_list)

    select = sub.add_parser("select", help="show only tasks due on a day")
    select.add_argument("day", type=iso_date)
    select.set_defaults(handler=cmd_select)

    clear = sub.add_parser("clear", help="show all tasks")
    clear.set_defaults(handler=cmd_clear)

    marked = sub.add_parser("marked", help="list days with tasks due")
    marked.set_defaults(handler=cmd_marked)

    stats = sub.add_parser("stats", help="show statistics")
    stats.set_defaults(handler=cmd_stats)

    return parser


def execute(ctx: Context, parser: argparse.ArgumentParser, line: str) -> int:
    args = parser.parse_args(shlex.split(line))
    return int(args.handler(ctx, args))


def run(
    lines: Iterable[str],
    ctx: Context,
    *,
    err: TextIO | None = None,
    prompt: str = "",
) -> int:
    """Feed command lines to one session until EOF or a quit word."""
    err = err if err is not None else sys.stderr
    parser = build_parser()
    status = 0
    if prompt:
        print(prompt, end="", file=ctx.out, flush=True)
    for raw in lines:
        line = raw.strip()
        if line and not line.startswith("#"):
            if line.split()[0] in QUIT_WORDS:
                break
            try:
                status = execute(ctx, parser, line)
            except HelpRequested as exc:
                print(exc.text, end="", file=ctx.out)
                status = 0
            except (CommandError, ValueError) as exc:
                logger.debug("Command failed line=%r error=%s", line, exc)
                if str(exc):
                    print(f"error: {exc}", file=err)
                status = 2
        if prompt:
            print(prompt, end="", file=ctx.out, flush=True)
    return status


def main() -> int:
    settings = Settings.from_env()
    setup_logging(level=settings.log_level)
    ctx = Context(session=DashboardSession(), settings=settings, out=sys.stdout)
    prompt = "> " if sys.stdin.isatty() else ""
    return run(sys.stdin, ctx, prompt=prompt)


if __name__ == "__main__":
    raise SystemExit(main())
