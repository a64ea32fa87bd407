"""semcheck - Check versions against semantic version conditions.

    Raises:
        SystemExit: Always, carrying one of the ExitCodes values.

    Returns:
        int: Exit code
"""
import csv
import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from .args import parse_args
from .cli_config import CheckSpec, ConfigError, load_checks_config
from .common.logging_utils import configure_logging, extra_context, is_debug_enabled
from .constants import Constants, ExitCodes, OutputFormats
from .versioning import Condition, ParseError, Version

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of evaluating one version against one condition."""
    condition: str
    version: Optional[str]
    satisfied: Optional[bool] = None
    error: Optional[str] = None

    def to_dict(self):
        return {
            "condition": self.condition,
            "version": self.version,
            "satisfied": self.satisfied,
            "error": self.error,
        }


def load_versions_file(file_name):
    """Loads the versions to check from a file.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        file_name (str): File path containing one version per line.

    Returns:
        list: List of version strings
    """
    try:
        with open(file_name, encoding='utf-8') as file:
            lines = [line.strip() for line in file]
    except FileNotFoundError as e:
        logging.error("File not found: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except IOError as e:
        logging.error("IO error: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    return [line for line in lines if line and not line.startswith("#")]


def build_checks(args) -> List[CheckSpec]:
    """Collect checks from the command line and the optional checks file."""
    checks: List[CheckSpec] = []
    if getattr(args, "CONFIG", None):
        try:
            checks.extend(load_checks_config(args.CONFIG))
        except ConfigError as e:
            logging.error("%s, aborting", e)
            sys.exit(ExitCodes.FILE_ERROR.value)

    if getattr(args, "CONDITION", None):
        versions = list(getattr(args, "VERSIONS", None) or [])
        for list_file in getattr(args, "LIST_FROM_FILE", None) or []:
            versions.extend(load_versions_file(list_file))
        checks.append(CheckSpec(condition=args.CONDITION, versions=versions))
    return checks


def evaluate_check(check: CheckSpec) -> List[CheckResult]:
    """Evaluate every version of a check; parse failures are recorded per pair.

    The condition is parsed even when the check lists no versions, so a bad
    condition is reported as a single result with no version.
    """
    try:
        condition = Condition.parse(check.condition)
    except ParseError as e:
        logging.error("Invalid condition '%s': %s", check.condition, e)
        error = f"condition: {e}"
        if not check.versions:
            return [CheckResult(check.condition, None, None, error)]
        return [CheckResult(check.condition, v, None, error) for v in check.versions]

    results = []
    for raw_version in check.versions:
        try:
            version = Version.parse(raw_version)
        except ParseError as e:
            logging.error("Invalid version '%s': %s", raw_version, e)
            results.append(CheckResult(check.condition, raw_version, None, f"version: {e}"))
            continue
        satisfied = condition.compare(version)
        if is_debug_enabled(logger):
            logger.debug(
                "Compared version",
                extra=extra_context(
                    event="decision",
                    component="cli",
                    action="compare",
                    outcome="match" if satisfied else "mismatch",
                    condition=str(condition),
                    version=str(version),
                ),
            )
        results.append(CheckResult(check.condition, raw_version, satisfied, None))
    return results


def evaluate_checks(checks: List[CheckSpec]) -> List[CheckResult]:
    results: List[CheckResult] = []
    for check in checks:
        results.extend(evaluate_check(check))
    return results


def export_csv(results, path):
    """Exports the check results to a CSV file.

    Args:
        results (list): List of CheckResult.
        path (str): File path to export the CSV.
    """
    rows = [Constants.CSV_HEADERS]
    for r in results:
        rows.append([
            r.condition,
            r.version or "",
            "" if r.satisfied is None else str(r.satisfied),
            r.error or "",
        ])
    try:
        with open(path, 'w', newline='', encoding='utf-8') as file:
            writer = csv.writer(file, dialect='excel', quoting=csv.QUOTE_ALL)
            writer.writerows(rows)
        logging.info("CSV file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("CSV file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def export_json(results, path):
    """Exports the check results to a JSON file.

    Args:
        results (list): List of CheckResult.
        path (str): File path to export the JSON.
    """
    data = [r.to_dict() for r in results]
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(data, file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def _resolve_output_format(args) -> str:
    fmt = getattr(args, "OUTPUT_FORMAT", None)
    if fmt:
        return fmt
    output = getattr(args, "OUTPUT", None) or ""
    if output.lower().endswith(".csv"):
        return OutputFormats.CSV.value
    return OutputFormats.JSON.value


def _setup_logging(args) -> None:
    """Configure logging based on CLI arguments."""
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def print_results(results: List[CheckResult]) -> None:
    for r in results:
        if r.error and r.version is None:
            print(f"{r.condition}: error ({r.error})")
        elif r.error:
            print(f"{r.version}: error ({r.error}) for {r.condition}")
        elif r.satisfied:
            print(f"{r.version} satisfies {r.condition}")
        else:
            print(f"{r.version} does not satisfy {r.condition}")


def exit_code_for(results: List[CheckResult], error_on_mismatch: bool) -> int:
    """Pick the process exit code for a set of results."""
    if any(r.error for r in results):
        return ExitCodes.PARSE_ERROR.value
    if error_on_mismatch and any(r.satisfied is False for r in results):
        return ExitCodes.EXIT_MISMATCH.value
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)
    logging.info("Arguments parsed.")

    results = evaluate_checks(build_checks(args))
    if not results:
        logging.warning("No versions found to check.")
        sys.exit(ExitCodes.SUCCESS.value)

    if not args.QUIET:
        print_results(results)

    if args.OUTPUT:
        if _resolve_output_format(args) == OutputFormats.CSV.value:
            export_csv(results, args.OUTPUT)
        else:
            export_json(results, args.OUTPUT)

    code = exit_code_for(results, args.ERROR_ON_MISMATCH)
    if code == ExitCodes.EXIT_MISMATCH.value:
        logging.error("One or more versions do not satisfy their condition.")
    sys.exit(code)
