"""
AUTOSCOPE - AUTOmation Scoring and Contextual Objective Planning Engine

A rule-based system that reads task descriptions (typically bullets from job
postings) and estimates how automatable they are, then breaks each task into
templated subtasks with timing, priority and dependency information.

Architecture:
- Intake Context: Job posting ingestion and task line extraction
- Analysis Context: Pattern matching, context signals, subtask synthesis
"""

from loguru import logger

__version__ = "0.1.0"

# Library code stays quiet until a script calls autoscope.utils.logger.setup_logger()
logger.disable("autoscope")
