"""
Analysis context logger.

Provides logging interface for the analysis context with automatic [analysis] prefix.
All analysis modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from loguru import logger

from autoscope.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[analysis]"


def setup_analysis_logger(log_dir: Path, source: str = "cli") -> Path:
    """
    Setup logger for the analysis context.

    Args:
        log_dir: Directory for this analysis session
        source: Where the analyzed text came from, for provenance ("cli", a file name, ...)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="analysis",
        log_dir=log_dir,
        extra_provenance={
            "Source": source,
            "Scoring overrides": os.getenv("AUTOSCOPE_SCORING_CONFIG") or "(defaults)",
        },
    )


def _log_info(message: str) -> None:
    """Log info message with [analysis] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [analysis] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [analysis] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [analysis] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_analysis_result(result) -> None:
    """
    Log a finished AnalysisResult at debug level.

    Args:
        result: AnalysisResult from AnalysisEngine.analyze_task()
    """
    preview = result.text[:50] + "..." if len(result.text) > 50 else result.text
    _log_debug(
        f"'{preview}' -> {result.pattern} ({result.label.value}, "
        f"{result.automation_potential}%, {len(result.subtasks)} subtasks, "
        f"{result.analysis_time_ms:.2f} ms)"
    )


def log_batch_summary(stats) -> None:
    """Log batch statistics at info level."""
    averages = stats.averages
    _log_success(
        f"Analyzed {stats.total_tasks} tasks "
        f"(avg potential {averages['automation_potential']}%, "
        f"avg confidence {averages['confidence']}%)"
    )
