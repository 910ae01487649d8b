"""
Text Report Formatter

Renders an AnalysisReport as the plain-text summary shown to users.
Absent indicator values render as "N/A"; the Bollinger line is dropped.
"""

from typing import Optional

from price_insight.schemas.indicators import AnalysisReport

NOT_AVAILABLE = "N/A"


def _fmt(value: Optional[float]) -> str:
    """Two-decimal number, or N/A when absent."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.2f}"


def _fmt_raw(value: Optional[float]) -> str:
    """Price level as given: 100.0 prints as 100, 100.5 as 100.5."""
    if value is None:
        return NOT_AVAILABLE
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def report_lines(report: AnalysisReport) -> list[str]:
    lines = [f"SMA ({item.period}): {_fmt(item.value)}" for item in report.sma]
    lines.append(f"RSI ({report.rsi_period}): {_fmt(report.rsi)}")
    lines.append(f"MACD: {_fmt(report.macd)}")

    bands = report.bollinger_bands
    if bands is not None:
        lines.append(
            f"Bollinger Bands: Upper {_fmt(bands.upper)}, "
            f"Middle {_fmt(bands.middle)}, Lower {_fmt(bands.lower)}"
        )

    lines.append(f"Sentiment Score: {_fmt(report.sentiment_score)}")
    lines.append(f"Sentiment Label: {report.sentiment_label.value}")
    lines.append(f"Candlestick Pattern: {report.candlestick_pattern.value}")
    lines.append(f"Support Level: {_fmt_raw(report.support)}")
    lines.append(f"Resistance Level: {_fmt_raw(report.resistance)}")
    return lines


def format_report(report: AnalysisReport) -> str:
    """Render the full multi-line report."""
    return "\n".join(report_lines(report))
