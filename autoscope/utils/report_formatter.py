"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for analysis reports printed by the scripts.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        """Format column header with alignment."""
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format column value with alignment, truncating text that overflows the column."""
        text = str(value)
        if len(text) > self.width:
            text = text[: max(self.width - 3, 0)] + "..."
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 100):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header framed by separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names, followed by a separator."""
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        self.lines.append("-" * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_text(self, text: str) -> "TableFormatter":
        """Add arbitrary text line."""
        self.lines.append(text)
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_percentage(value: float, decimal_places: int = 0) -> str:
    """
    Format a 0-100 value as a percentage string.

    Args:
        value: Percentage value (already on the 0-100 scale)
        decimal_places: Number of decimal places

    Returns:
        Formatted percentage string (e.g., "75%")
    """
    return f"{value:.{decimal_places}f}%"


def format_results_report(results: list, title: str = "Task Analysis") -> str:
    """
    Render one row per AnalysisResult: task text, label, potential, confidence, pattern.

    Args:
        results: AnalysisResult instances in input order
        title: Section header text

    Returns:
        Formatted report string
    """
    table = TableFormatter(
        [
            Column("#", 3, ">"),
            Column("Task", 42),
            Column("Label", 22),
            Column("Potential", 9, ">"),
            Column("Conf.", 6, ">"),
            Column("Pattern", 14),
        ],
        total_width=101,
    )
    table.add_section_header(title).add_table_header()

    for position, result in enumerate(results, start=1):
        table.add_row(
            [
                position,
                result.text.replace("\n", " "),
                result.label.value,
                format_percentage(result.automation_potential),
                format_percentage(result.confidence),
                result.pattern,
            ]
        )

    return table.render()


def format_stats_report(stats) -> str:
    """
    Render AnalysisStats as a label distribution table plus averages.

    Args:
        stats: AnalysisStats from get_analysis_stats()

    Returns:
        Formatted report string
    """
    table = TableFormatter([Column("Label", 24), Column("Share", 8, ">")], total_width=40)
    table.add_section_header(f"Statistics ({stats.total_tasks} tasks)").add_table_header()

    for label, share in stats.distribution.items():
        table.add_row([label, format_percentage(share)])

    averages = stats.averages
    table.add_blank_line()
    table.add_text(f"Avg. automation potential: {format_percentage(averages['automation_potential'])}")
    table.add_text(f"Avg. confidence:           {format_percentage(averages['confidence'])}")
    table.add_text(f"Avg. analysis time:        {averages['analysis_time_ms']} ms")

    return table.render()
