"""
Shared loguru configuration for AUTOSCOPE scripts.

Library modules never configure logging themselves: the package is disabled
on import (see autoscope/__init__.py) and stays silent until a script calls
setup_logger() through its context wrapper in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from autoscope import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

# Warnings stay readable next to the analysis tables on a dark terminal
LEVEL_COLORS = {
    "SUCCESS": "<green>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route autoscope logging to a per-run file and to stderr.

    The file sink records everything down to DEBUG (per-task pattern and
    subtask details), the console only console_level and above. Console
    output goes to stderr so that --json output on stdout stays parseable.

    Args:
        context_name: Context identifier, also the log file stem ("analysis", "intake")
        log_dir: Directory for this run, created if missing
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level shown on the console

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="analysis",
            log_dir=Path("outs/logs/analyze_20251114_123456"),
            extra_provenance={"Source": "tasks.txt"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.enable("autoscope")

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def collect_provenance() -> Dict[str, object]:
    """Facts about the current run that make a log file reproducible."""
    return {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "autoscope": __version__,
    }


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """
    Write the provenance header to the configured sinks.

    Args:
        extra_context: Additional key-value pairs appended after the standard ones
    """
    logger.info("=" * 80)
    for key, value in {**collect_provenance(), **(extra_context or {})}.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
