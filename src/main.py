import argparse
import logging
import sys

from utils import setup_logging
from errors import GeneratorError
from generator import GeneratorConfig, run


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # Bad flags exit 1 like every other failure
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = ArgumentParser(
        prog="vanity-pages",
        description="Generate vanity import path pages for modules hosted elsewhere",
        add_help=False,
    )
    parser.add_argument(
        "-base-url",
        "--base-url",
        dest="base_url",
        type=str,
        default=None,
        help="Base URL for your custom domain (required, or set VANITY_BASE_URL)",
    )
    parser.add_argument(
        "-modules",
        "--modules",
        dest="modules",
        type=str,
        default=None,
        help='Path to modules JSON file (default: "modules.json")',
    )
    parser.add_argument(
        "-build-dir",
        "--build-dir",
        dest="build_dir",
        type=str,
        default=None,
        help='Output directory for generated files (default: "build")',
    )
    parser.add_argument(
        "-log-file",
        "--log-file",
        dest="log_file",
        type=str,
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "-verbose", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("-h", "-help", "--help", action="help", help="Show help message")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = GeneratorConfig.from_args(args)
    try:
        setup_logging(config.log_file, logging.DEBUG if args.verbose else logging.INFO)
    except OSError as e:
        print(f"failed to open log file {config.log_file}: {e}", file=sys.stderr)
        return 1

    try:
        run(config)
    except GeneratorError as e:
        logging.debug("Generation failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
