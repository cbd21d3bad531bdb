"""Main stanpos executable."""

# ruff: noqa: T201
from __future__ import annotations

import argparse
import sys
from typing import Any

# PYTHON_ARGCOMPLETE_OK
import argcomplete
from rich.markup import escape
from rich.table import Table
from rich_argparse import RawDescriptionRichHelpFormatter, RichHelpFormatter

from stanpos import __version__
from stanpos.api.util.tagsets import DESCRIPTIONS, TAGSETS, describe
from stanpos.core import config
from stanpos.core.console import console, err_console
from stanpos.core.engine_config import EngineConfig
from stanpos.core.invocation import build_command
from stanpos.core.log_handler import setup_logging
from stanpos.core.misc import StanposError
from stanpos.tagger import TaggedToken, Tagger


class CustomArgumentParser(argparse.ArgumentParser):
    """ArgumentParser with custom help message and better handling of misspelled commands."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize parser."""
        # Don't add default help message
        kwargs["add_help"] = False
        super().__init__(*args, **kwargs)
        self.add_argument("-h", "--help", action="help", help="Show this help message and exit")

    @staticmethod
    def _check_value(action: argparse.Action, value: Any) -> None:
        """Check if command is valid, and if not, try to guess what the user meant."""  # noqa: DOC501
        if action.choices is not None and value not in action.choices:
            # Check for possible misspelling
            import difflib  # noqa: PLC0415

            close_matches = difflib.get_close_matches(value, action.choices, n=1)
            if close_matches:
                message = f"unknown command: '{value}' - maybe you meant '{close_matches[0]}'"
            else:
                choices = ", ".join(map(repr, action.choices))
                message = f"unknown command: '{value}' (choose from {choices})"
            raise argparse.ArgumentError(action, message)


class CustomHelpFormatter(RawDescriptionRichHelpFormatter):
    """Custom help formatter for argparse, silencing subparser lists."""

    def _rich_format_action(self, action):
        if isinstance(action, argparse._SubParsersAction):
            return ""
        return super()._rich_format_action(action)


class TagCompleter:
    """Complete tag names, showing their descriptions."""

    def __call__(self, prefix: str, **_kwargs: Any) -> dict[str, str]:
        """Return dictionary of completions."""
        return {tag: desc for tag, desc in DESCRIPTIONS.items() if tag.startswith(prefix)}


class SortedCompletionFinder(argcomplete.CompletionFinder):
    """Custom CompletionFinder that sorts the completions."""

    def filter_completions(self, completions: list) -> list:
        """Sort completions and return them.

        Args:
            completions: List of completions.

        Returns:
            Sorted list of completions.
        """
        completions = super().filter_completions(completions)
        completions.sort()
        return completions


def build_parser() -> CustomArgumentParser:
    """Set up the command line arguments."""
    parser = CustomArgumentParser(
        prog="stanpos",
        description="Part-of-speech tagging with the Stanford POS tagger",
        allow_abbrev=False,
        formatter_class=CustomHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"stanpos v{__version__}",
        help="Show stanpos's version number and exit",
    )

    help = {  # noqa: A001
        "tag": "Tag sentences given as arguments, or read one sentence per line from stdin",
        "describe": "Show the description of one or more tags",
        "tags": "List known tags and their descriptions",
    }
    description = [
        "",
        f"   tag              {help['tag']}",
        f"   describe         {help['describe']}",
        f"   tags             {help['tags']}",
        "",
        "See 'stanpos <command> -h' for help with a specific command",
    ]
    subparsers = parser.add_subparsers(
        dest="command", title="commands", metavar="<command>", description="\n".join(description)
    )
    subparsers.required = True

    tag_parser = subparsers.add_parser(
        "tag", help=help["tag"], description=help["tag"], formatter_class=RichHelpFormatter
    )
    tag_parser.add_argument("sentences", nargs="*", default=[], help="Sentence(s) to tag")
    tag_parser.add_argument("-m", "--model", help="Path to the tagger model")
    tag_parser.add_argument("-t", "--tagger", help="Path to the Stanford POS tagger jar file")
    tag_parser.add_argument("-c", "--config", help="Path to a YAML config file")
    tag_parser.add_argument("--java", help="Path to the Java executable")
    tag_parser.add_argument(
        "--java-option",
        dest="java_options",
        action="append",
        metavar="OPTION",
        help="Java option, e.g. '--java-option=-mx1g' (may be repeated; default: -mx300m)",
    )
    tag_parser.add_argument("--encoding", help="Encoding of the input and output (default: utf8)")
    tag_parser.add_argument("--timeout", type=float, help="Seconds to wait for the tagger before giving up")
    tag_parser.add_argument(
        "-j", "--jobs", type=int, default=1, metavar="N", help="Number of sentences to tag in parallel"
    )
    tag_parser.add_argument("-d", "--describe", action="store_true", help="Add tag descriptions to the output")
    tag_parser.add_argument("-n", "--dry-run", action="store_true", help="Print the tagger command without running it")
    tag_parser.add_argument(
        "--log",
        metavar="LOGLEVEL",
        default="warning",
        help="Set the log level (default: 'warning')",
        choices=["debug", "info", "warning", "error"],
    )

    describe_parser = subparsers.add_parser(
        "describe", help=help["describe"], description=help["describe"], formatter_class=RichHelpFormatter
    )
    describe_parser.add_argument("tags", nargs="+", help="Tag(s) to describe").completer = TagCompleter()

    tags_parser = subparsers.add_parser(
        "tags", help=help["tags"], description=help["tags"], formatter_class=RichHelpFormatter
    )
    tags_parser.add_argument("--tagset", choices=list(TAGSETS), default="all", help="Tagset to list (default: all)")

    return parser


def main(argv: list[str] | None = None) -> bool:
    """Handle command line arguments and run the appropriate command.

    Args:
        argv: List of command line arguments. If None, the arguments are read from sys.argv.

    Returns:
        True if the command was successful, False otherwise.
    """
    parser = build_parser()

    # Handle autocompletion
    SortedCompletionFinder()(parser)

    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(argv or ["--help"])

    if args.command == "describe":
        for tag in args.tags:
            print(f"{tag}\t{describe(tag)}")
        return True

    if args.command == "tags":
        table = Table(box=None, show_header=True, header_style="b")
        table.add_column("Tag", style="cyan")
        table.add_column("Description")
        for tag, desc in sorted(TAGSETS[args.tagset].items()):
            table.add_row(tag, desc)
        console.print(table)
        return True

    setup_logging(args.log)
    try:
        return _tag(args)
    except StanposError as e:
        err_console.print(f"[red]{escape(e.message)}[/red]")
        return False


def _tag(args: argparse.Namespace) -> bool:
    """Run the 'tag' command."""
    cfg = config.load_config(
        args.config,
        {
            "tagger": {
                "model": args.model,
                "jar": args.tagger,
                "java": args.java,
                "java_options": args.java_options,
                "encoding": args.encoding,
                "timeout": args.timeout,
            }
        },
    )
    engine_config = EngineConfig.from_dict(cfg)

    if args.dry_run:
        print(" ".join(build_command(engine_config, "<textFile>")))
        return True

    sentences = args.sentences or [line.rstrip("\n") for line in sys.stdin]
    tagger = Tagger.from_config(engine_config)
    results = tagger.tag_many(sentences, max_workers=max(args.jobs, 1))
    for i, tokens in enumerate(results):
        if i:
            print()
        for token in tokens:
            print(_format_token(token, args.describe))
    return True


def _format_token(token: TaggedToken, with_description: bool) -> str:
    if with_description:
        return f"{token.word}\t{token.tag}\t{token.description}"
    return f"{token.word}\t{token.tag}"


def cli() -> None:
    """Run main function and exit with the appropriate exit code.

    This is the entry point for the CLI, called when running 'stanpos' from the command line.
    """
    sys.exit(0 if main() else 1)


if __name__ == "__main__":
    cli()
