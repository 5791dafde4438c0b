#!/usr/bin/env python3
"""
Extract the tasks from a job posting and analyze each one.

Usage:
    python scripts/analyze_posting.py postings/Buchhalter_Muster_GmbH.md
    python scripts/analyze_posting.py postings/Buchhalter_Muster_GmbH.md --tasks-only
    python scripts/analyze_posting.py postings/Buchhalter_Muster_GmbH.md --json
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from autoscope.contexts.analysis import AnalysisEngine, ScoringConfigError, load_scoring_config
from autoscope.contexts.analysis.logger import log_batch_summary, setup_analysis_logger
from autoscope.contexts.intake import derive_posting_title, extract_task_lines
from autoscope.contexts.intake.logger import setup_intake_logger
from autoscope.utils.report_formatter import format_results_report, format_stats_report
from autoscope.utils.timestamp import now

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Extract and analyze the tasks of a job posting.")


@app.command()
def main(
    posting_file: Path = typer.Argument(..., help="Posting as markdown or plain text"),
    tasks_only: bool = typer.Option(False, "--tasks-only", help="Only show the extracted task lines"),
    as_json: bool = typer.Option(False, "--json", help="Print results and statistics as JSON"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file overriding scoring weights"),
    log: bool = typer.Option(False, "--log", help="Write debug logs to LOGS_PATH/posting_TIMESTAMP"),
):
    """Analyze every task line found in POSTING_FILE."""
    if not posting_file.exists():
        typer.echo(f"ERROR: File not found: {posting_file}", err=True)
        raise typer.Exit(1)

    if log:
        # One sink per run; it receives the [intake] and [analysis] messages alike
        log_dir = LOGS_PATH / f"posting_{now()}"
        if tasks_only:
            log_file = setup_intake_logger(log_dir, posting=posting_file.name)
        else:
            log_file = setup_analysis_logger(log_dir, source=posting_file.name)
        typer.echo(f"Log file: {log_file}", err=True)

    posting_text = posting_file.read_text(encoding="utf-8")
    title = derive_posting_title(posting_text)
    tasks = extract_task_lines(posting_text)

    if tasks_only:
        typer.echo(f"=== {title or posting_file.name} ===")
        typer.echo(f"Tasks ({len(tasks)}):")
        for task in tasks:
            section = f" [{task.section}]" if task.section else ""
            typer.echo(f"  - {task.text}{section}")
        return

    if not tasks:
        typer.echo(f"ERROR: No task lines found in {posting_file}", err=True)
        raise typer.Exit(1)

    try:
        engine = AnalysisEngine(config=load_scoring_config(config))
    except (FileNotFoundError, ScoringConfigError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    results = engine.analyze_posting(posting_text)
    stats = engine.get_analysis_stats(results)
    log_batch_summary(stats)

    if as_json:
        payload = {
            "title": title,
            "results": [result.to_dict() for result in results],
            "stats": {
                "total_tasks": stats.total_tasks,
                "distribution": stats.distribution,
                "averages": stats.averages,
                "category_counts": stats.category_counts,
            },
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    typer.echo(format_results_report(results, title=title or posting_file.name))
    typer.echo()
    typer.echo(format_stats_report(stats))


if __name__ == "__main__":
    app()
