"""
Report rendering for indicator analyses.
"""

from price_insight.services.reporting.formatter import format_report, report_lines

__all__ = ["format_report", "report_lines"]
