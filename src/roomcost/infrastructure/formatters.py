"""Display formatting for labels and cost reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roomcost.contracts.protocols import NumberFormatter
    from roomcost.domain.services.cost_engine import CostReport
    from roomcost.domain.value_objects import LabelPlacement

__all__ = ["CostReportFormatter", "DisplayFormatter", "LabelTextFormatter"]


class DisplayFormatter:
    """Formats numbers for on-screen display (en-US conventions).

    Lengths print as the shortest decimal ("5", "2.5"), areas with two
    decimals, and currency with a symbol, thousands separators and cents.
    """

    def __init__(self, currency_symbol: str = "$") -> None:
        self.currency_symbol = currency_symbol

    def format_length(self, value: float) -> str:
        return f"{value:.15g}"

    def format_area(self, value: float) -> str:
        return f"{value:.2f}"

    def format_currency(self, value: float) -> str:
        sign = "-" if value < 0 else ""
        return f"{sign}{self.currency_symbol}{abs(value):,.2f}"


class LabelTextFormatter:
    """Fills label templates with formatted values.

    Template fields are formatted by name: ``value`` as a length, ``area``
    as an area, ``cost`` as currency.
    """

    def __init__(self, formatter: NumberFormatter | None = None) -> None:
        self._formatter = formatter or DisplayFormatter()

    def format(self, label: LabelPlacement) -> str:
        fields: dict[str, str] = {}
        for name, number in label.values.items():
            if name == "area":
                fields[name] = self._formatter.format_area(number)
            elif name == "cost":
                fields[name] = self._formatter.format_currency(number)
            else:
                fields[name] = self._formatter.format_length(number)
        return label.template.format(**fields)


class CostReportFormatter:
    """Formats a cost report as a plain-text table."""

    def __init__(self, formatter: NumberFormatter | None = None) -> None:
        self._formatter = formatter or DisplayFormatter()

    def format(self, report: CostReport) -> str:
        fmt = self._formatter
        areas = report.areas
        lines = [
            "ROOM AREAS",
            "=" * 60,
            f"{'Walls':<20} {fmt.format_area(areas.wall_area):>12} m²",
            f"{'Floor':<20} {fmt.format_area(areas.floor_area):>12} m²",
            f"{'Ceiling':<20} {fmt.format_area(areas.ceiling_area):>12} m²",
            f"{'Total':<20} {fmt.format_area(areas.total_area):>12} m²",
            "",
            "MATERIAL COSTS",
            "=" * 60,
        ]

        if not report.entries:
            lines.append("No material layers.")
        else:
            lines.append(f"{'Layer':<24} {'Area (m²)':>12} {'Cost':>20}")
            lines.append("-" * 60)
            for entry in report.entries:
                lines.append(
                    f"{entry.name[:24]:<24} {fmt.format_area(entry.area):>12} "
                    f"{fmt.format_currency(entry.cost):>20}"
                )

        lines.append("-" * 60)
        lines.append(f"{'TOTAL':<24} {'':>12} {fmt.format_currency(report.grand_total):>20}")
        return "\n".join(lines)
