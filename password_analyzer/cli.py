"""
Command line interface.

Usage:
  password-analyzer analyze "Example@2025"
  password-analyzer analyze --json
  password-analyzer analyze --remote --api-url http://127.0.0.1:5000/api/analyze "hunter2"
  password-analyzer batch passwords.txt --json
  password-analyzer serve --port 8080
"""

import argparse
import getpass
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .analyzer import NO_PASSWORD_LABEL, FeedbackType, PasswordAnalysis, PasswordAnalyzer
from .client import AnalyzerClient
from .common_passwords import load_common_passwords
from .config import AppConfig, configure_logging
from .tiers import tier_for_score

logger = logging.getLogger(__name__)

METER_WIDTH = 20
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def render_meter(score: int, width: int = METER_WIDTH) -> str:
    filled = round(width * score / 100)
    return "[" + "#" * filled + "." * (width - filled) + "]"


def format_meter_line(result: PasswordAnalysis) -> str:
    meter = render_meter(result.score)
    if result.strength_label == NO_PASSWORD_LABEL:
        return meter
    return f"{meter} {tier_for_score(result.score).label}"


def format_analysis(result: PasswordAnalysis) -> str:
    lines = [
        f"Score: {result.score}/100  |  Entropy: {result.entropy:.1f} bits  |  Strength: {result.strength_label}",
        format_meter_line(result),
    ]
    if result.feedback:
        lines.append("Feedback:")
        for item in result.feedback:
            marker = "[+]" if item.type is FeedbackType.SUCCESS else "[!]"
            lines.append(f"  {marker} {item.message}")
    if result.suggestions:
        lines.append("Suggestions:")
        for suggestion in result.suggestions:
            lines.append(f"  - {suggestion}")
    return "\n".join(lines)


def _build_analyzer(common_passwords_file: Optional[str]) -> PasswordAnalyzer:
    path = common_passwords_file or AppConfig.COMMON_PASSWORDS_FILE
    if path:
        return PasswordAnalyzer(load_common_passwords(path))
    return PasswordAnalyzer()


def cmd_analyze(args: argparse.Namespace) -> int:
    analyzer = _build_analyzer(args.common_passwords)
    password = args.password
    if password is None:
        password = getpass.getpass("Password to analyze: ")

    if args.remote:
        with AnalyzerClient(api_url=args.api_url, analyzer=analyzer) as client:
            result = client.analyze(password)
    else:
        result = analyzer.analyze(password)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_analysis(result))
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    analyzer = _build_analyzer(args.common_passwords)
    results = []
    with open(args.file, "r", encoding="utf-8", errors="ignore") as f:
        for line_no, line in enumerate(f, start=1):
            password = line.rstrip("\r\n")
            if not password:
                continue
            results.append((line_no, analyzer.analyze(password)))

    logger.info(f"Analyzed {len(results)} passwords from {args.file}")
    if args.json:
        print(json.dumps([{"line": n, **r.to_dict()} for n, r in results], indent=2))
    else:
        for line_no, result in results:
            print(f"line {line_no}: {result.score}/100 ({result.strength_label})")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    # Imported here so analyze/batch work without touching Flask.
    from .api import run_server

    run_server(host=args.host, port=args.port, analyzer=_build_analyzer(args.common_passwords))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="password-analyzer",
        description="Password strength analyzer (score, entropy, feedback, suggestions)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help=f"Logging level (default: {AppConfig.LOG_LEVEL})")
    parser.add_argument("--common-passwords", metavar="FILE",
                        help="Extra common password list, one per line")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_analyze = subparsers.add_parser("analyze", help="Analyze a single password")
    p_analyze.add_argument("password", nargs="?", help="Password to analyze (prompted if omitted)")
    p_analyze.add_argument("--json", action="store_true", help="Print the result as JSON")
    p_analyze.add_argument("--remote", action="store_true",
                           help="Analyze through the HTTP API, falling back to local analysis")
    p_analyze.add_argument("--api-url", default=AppConfig.API_URL,
                           help=f"Analyzer API endpoint for --remote (default: {AppConfig.API_URL})")
    p_analyze.set_defaults(func=cmd_analyze)

    p_batch = subparsers.add_parser("batch", help="Analyze a file with one password per line")
    p_batch.add_argument("file", help="Path to the password file")
    p_batch.add_argument("--json", action="store_true", help="Print the results as JSON")
    p_batch.set_defaults(func=cmd_batch)

    p_serve = subparsers.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=AppConfig.HOST, help=f"Bind address (default: {AppConfig.HOST})")
    p_serve.add_argument("--port", type=int, default=AppConfig.PORT,
                         help=f"Port (default: {AppConfig.PORT})")
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # stdout is reserved for results.
    configure_logging(level=args.log_level, stream=sys.stderr)

    try:
        return args.func(args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nExiting...", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
