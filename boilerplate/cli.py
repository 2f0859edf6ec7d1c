from typing import Any, List, TextIO, TypeAlias
import sys
import argparse
import logging

from boilerplate.config import BuildInfo, CheckOptions, ConfigurationError
from boilerplate.messages import error

##################################################################################################
# Main
##################################################################################################

ArgParser: TypeAlias = argparse.ArgumentParser

class Commands:
    def __init__(self, parser: ArgParser) -> None:
        self.root_parser = parser
        self.subparsers = parser.add_subparsers(dest='command')

    class Command:
        def __init__(self, commands: 'Commands', name: str, help: str | None = None) -> None:
            self.parser = commands.subparsers.add_parser(name, help=help)

        def __enter__(self) -> ArgParser:
            return self.parser

        def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
            pass

    def __call__(self, name: str, help: str | None = None) -> 'Commands.Command':
        return Commands.Command(self, name, help=help)


def make_parser() -> ArgParser:
    parser = argparse.ArgumentParser(
        prog='boilerplate',
        description="Checks that file headers match boilerplate files.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Log every file visited.")
    commands = Commands(parser)

    with commands('check', help="Checks that file headers match boilerplate files.") as cmd:
        cmd.add_argument('root', type=str, nargs='?', default='.',
                         help="The directory to scan (default: current directory).")
        cmd.add_argument('--boilerplate', type=str, default='',
                         help="The path to the required boilerplate file.")
        cmd.add_argument('--file-extension', type=str, default='',
                         help="The extension of files that should match this boilerplate.")
        cmd.add_argument('--exclude', type=str, default='',
                         help="A pattern of files to exclude from consideration.")
        cmd.add_argument('--fix', action='store_true',
                         help="Rewrite files whose headers do not match the boilerplate.")
        cmd.add_argument('--gitignore', action='store_true',
                         help="Skip files ignored by the root .gitignore.")

    with commands('version', help="Prints version information.") as cmd:
        pass

    return parser


def main(argv: List[str] | None = None, out: TextIO | None = None, build_info: BuildInfo | None = None) -> int:
    if sys.platform.lower() == "win32":
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    match args.command:
        case 'check':
            from boilerplate.tasks.check import check_main
            options = CheckOptions(
                boilerplate_file=args.boilerplate,
                file_extension=args.file_extension,
                exclude_pattern=args.exclude,
                root=args.root,
                fix=args.fix,
                gitignore=args.gitignore)
            try:
                options.prepare()
            except ConfigurationError as e:
                error(str(e))
                return 1
            summary = check_main(options, out=out)
            return 1 if summary.failed else 0

        case 'version':
            from boilerplate.tasks.version import version_main
            version_main(build_info or BuildInfo(), out=out)
            return 0

        case None:
            parser.print_help()
            return 2

        case _:
            raise ValueError(f"Unknown command: {args.command}")
