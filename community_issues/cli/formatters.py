# Output formatters for issue lists

import json

from ..models import Issue, available_transitions


def format_text(issues: list[Issue], verbose: bool = False) -> str:
    """
    Format issues as plain text.

    Returns - Formatted text string
    """
    if not issues:
        return "No issues found.\n"

    output = []
    for i, issue in enumerate(issues, 1):
        output.append(f"\n{i}. [{issue.status.value}] {issue.title}")
        output.append(f"   ID: {issue.id}")
        if verbose:
            output.append(f"   Category: {issue.category}")
            output.append(f"   Location: {issue.location}")
            if issue.contact:
                output.append(f"   Contact: {issue.contact}")
            output.append(f"   Created: {issue.created_at.isoformat()}")
            output.append(f"   Updated: {issue.updated_at.isoformat()}")
            output.append(f"   Description: {issue.description}")
            moves = ", ".join(status.value for status in available_transitions(issue.status))
            output.append(f"   Can move to: {moves}")
        output.append("")

    return "\n".join(output)


def format_json(issues: list[Issue]) -> str:
    """
    Format issues as JSON.

    Returns - JSON string
    """
    return json.dumps([issue.to_json_dict() for issue in issues], indent=2)


def format_table(issues: list[Issue], verbose: bool = False) -> str:
    """
    Format issues as a table.

    Returns - Table string
    """
    if not issues:
        return "No issues found.\n"

    if verbose:
        columns = ["#", "Title", "Status", "Category", "Location", "ID"]
    else:
        columns = ["#", "Title", "Status", "Category"]

    rows = []
    for i, issue in enumerate(issues, 1):
        row = {
            "#": str(i),
            "Title": issue.title[:50],
            "Status": issue.status.value,
            "Category": issue.category,
            "Location": issue.location[:40],
            "ID": issue.id,
        }
        rows.append(row)

    widths = {col: max([len(col)] + [len(row[col]) for row in rows]) for col in columns}

    output = []
    header = " | ".join(col.ljust(widths[col]) for col in columns)
    output.append(header)
    output.append("-" * len(header))
    for row in rows:
        output.append(" | ".join(row[col].ljust(widths[col]) for col in columns))

    return "\n".join(output) + "\n"


def format_markdown(issues: list[Issue]) -> str:
    """
    Format issues as Markdown.

    Returns - Markdown string
    """
    if not issues:
        return "No issues found.\n"

    output = []
    output.append("| # | Title | Status | Category | Location |")
    output.append("|" + "|".join(["---"] * 5) + "|")

    for i, issue in enumerate(issues, 1):
        title = issue.title.replace("|", "\\|")
        location = issue.location.replace("|", "\\|")
        output.append(
            f"| {i} | {title} | {issue.status.value} | {issue.category} | {location} |"
        )

    return "\n".join(output) + "\n"


FORMATS = ("text", "json", "table", "markdown")


def format_output(issues: list[Issue], output_format: str, verbose: bool = False) -> str:
    """Dispatch to the formatter for `output_format`."""
    output_format = output_format.lower()
    if output_format == "text":
        return format_text(issues, verbose=verbose)
    if output_format == "json":
        return format_json(issues)
    if output_format == "table":
        return format_table(issues, verbose=verbose)
    if output_format == "markdown":
        return format_markdown(issues)
    raise ValueError(f"Unsupported format: {output_format}")
