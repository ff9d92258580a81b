"""
Console Report
==============

Render a ValidationResult as the human-readable console report.
"""

import click

from .models import ValidationResult

HEADER = "🔍 Validating Unity Expansion Pack Configuration..."


def format_report(result: ValidationResult) -> str:
    """Format errors, warnings and the final verdict as a text block.

    Errors are listed before warnings; either block is omitted when
    empty. The verdict depends only on whether errors exist.
    """
    lines: list[str] = []

    if result.errors:
        lines.append("❌ CONFIGURATION ERRORS:")
        for issue in result.errors:
            lines.append(f"   • {issue.message}")
        lines.append("")

    if result.warnings:
        lines.append("⚠️  CONFIGURATION WARNINGS:")
        for issue in result.warnings:
            lines.append(f"   • {issue.message}")
        lines.append("")

    if result.success:
        lines.append("✅ Configuration validation passed!")
        lines.append("   Unity expansion pack is properly configured.")
    else:
        lines.append("❌ Configuration validation failed!")
        lines.append("   Please fix the errors above before using the expansion pack.")
    lines.append("")

    return "\n".join(lines)


def print_header() -> None:
    click.echo(f"{HEADER}\n")


def print_report(result: ValidationResult) -> None:
    click.echo(format_report(result))
