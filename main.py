"""
PASSFORGE Main Entry Point
==========================
Command line front end: builds a policy from flags, generates passwords,
optionally prints their strength reports.

    python main.py --length 16 --no-symbols --report
    python main.py --count 5 --json
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from constants import CharacterSets, ExitCodes, PolicyLimits
from core.config import (
    default_policy,
    get_log_dir,
    get_log_level,
    get_log_retention_days,
    get_log_to_file,
    get_max_attempts,
    validate_config,
)
from core.logging_config import LoggingConfig
from core.models import Policy
from exceptions import ConfigurationError, GenerationExhaustedError, InvalidPolicyError
from services.facade import generate_batch
from services.password_generator import PasswordGenerator
from utils.password_utils import strength_summary
from version import APP_NAME, VERSION

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="passforge",
        description=f"{APP_NAME}: secure password generator with strength scoring",
    )
    ap.add_argument("-l", "--length", type=int, default=None,
                    help=f"password length ({PolicyLimits.MIN_LENGTH}-{PolicyLimits.MAX_LENGTH}, "
                         f"default from PASSFORGE_DEFAULT_LENGTH or {PolicyLimits.DEFAULT_LENGTH})")
    ap.add_argument("--no-upper", action="store_true", help="exclude uppercase letters")
    ap.add_argument("--no-lower", action="store_true", help="exclude lowercase letters")
    ap.add_argument("--no-digits", action="store_true", help="exclude digits")
    ap.add_argument("--no-symbols", action="store_true",
                    help=f"exclude symbols ({CharacterSets.SYMBOLS})")
    ap.add_argument("-n", "--count", type=int, default=1,
                    help="number of passwords to generate (default: 1)")
    ap.add_argument("-r", "--report", action="store_true",
                    help="print a strength line after each password")
    ap.add_argument("--json", action="store_true",
                    help="print results as a JSON array")
    ap.add_argument("--log-level", default=None, type=str.upper,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    help="console log level (default from LOG_LEVEL or WARNING)")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    return ap


def policy_from_args(args: argparse.Namespace) -> Policy:
    return Policy.from_mapping({
        "length": args.length if args.length is not None else default_policy().length,
        "upper": not args.no_upper,
        "lower": not args.no_lower,
        "digits": not args.no_digits,
        "symbols": not args.no_symbols,
    })


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1) Configuration
    try:
        validate_config()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return ExitCodes.CONFIG_ERROR

    # 2) Logging (stdout carries only passwords)
    log_to_file = get_log_to_file()
    LoggingConfig.setup_logging(
        log_level=args.log_level or get_log_level(default="WARNING"),
        log_dir=get_log_dir(),
        enable_file=log_to_file,
    )
    if log_to_file:
        LoggingConfig.cleanup_old_logs(get_log_dir(), days_to_keep=get_log_retention_days())

    if args.count < 1:
        print("--count must be at least 1", file=sys.stderr)
        return ExitCodes.INVALID_POLICY

    # 3) Generate
    policy = policy_from_args(args)
    generator = PasswordGenerator(max_attempts=get_max_attempts())
    try:
        results = generate_batch(policy, args.count, generator)
    except InvalidPolicyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return ExitCodes.INVALID_POLICY
    except GenerationExhaustedError as exc:
        logger.error(f"Generation failed: {exc}", exc_info=True)
        print(f"Internal error: {exc}", file=sys.stderr)
        return ExitCodes.GENERATION_EXHAUSTED

    # 4) Output
    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for result in results:
            print(result.password)
            if args.report:
                print(strength_summary(result.report))

    return ExitCodes.OK


if __name__ == "__main__":
    sys.exit(main())
