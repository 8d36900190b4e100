"""Renderers that turn a label summary into a printable document."""

from dataclasses import dataclass
from html import escape
from typing import Protocol

from nutrition_label.domain.label import LabelRow, LabelSummary
from nutrition_label.services.label import round_amount

NOT_APPLICABLE = "-"


class LabelRenderer(Protocol):
    """Interface for label output formats."""

    media_type: str

    def render(self, summary: LabelSummary) -> str:
        """Return the rendered label."""


def format_amount(value: float) -> str:
    """Format an amount with two decimals."""
    return f"{round_amount(value):.2f}"


def format_servings(value: float) -> str:
    """Format servings per container without a trailing .0."""
    return f"{value:g}"


def format_percent(percent: int | None) -> str:
    if percent is None:
        return NOT_APPLICABLE
    return f"{percent}%"


@dataclass
class PlainTextLabelRenderer(LabelRenderer):
    """Render the label as plain text lines."""

    media_type: str = "text/plain"
    indent_width: int = 2

    def render(self, summary: LabelSummary) -> str:
        lines = [
            "Nutrition Facts",
            f"{format_servings(summary.servings_per_container)} Servings Per Container",
            f"Serving Size ({format_amount(summary.total_mass_grams)}g)",
            f"Calories: {format_amount(summary.calories_per_serving)} "
            f"(Total: {format_amount(summary.calories_total)})",
        ]
        for row in summary.rows:
            if row.key == "calories":
                continue
            lines.append(self._format_row(row))
        if summary.ingredients:
            lines.append(f"Ingredients: {summary.ingredients}")
        return "\n".join(lines)

    def _format_row(self, row: LabelRow) -> str:
        prefix = " " * (self.indent_width * row.indent)
        return (
            f"{prefix}{row.name} {format_amount(row.amount_per_serving)}{row.unit} "
            f"({format_percent(row.percent_daily_value)})"
        )


@dataclass
class HtmlLabelRenderer(LabelRenderer):
    """Render the label as a standalone HTML page ready for printing."""

    media_type: str = "text/html"
    title: str = "Nutrition Facts"

    def render(self, summary: LabelSummary) -> str:
        rows = "\n".join(
            self._format_row(row) for row in summary.rows if row.key != "calories"
        )
        ingredients = ""
        if summary.ingredients:
            ingredients = (
                '<p class="ingredients"><strong>Ingredients:</strong> '
                f"{escape(summary.ingredients)}</p>"
            )
        return _HTML_TEMPLATE.format(
            title=escape(self.title),
            servings=format_servings(summary.servings_per_container),
            mass=format_amount(summary.total_mass_grams),
            calories=format_amount(summary.calories_per_serving),
            calories_total=format_amount(summary.calories_total),
            rows=rows,
            ingredients=ingredients,
        )

    @staticmethod
    def _format_row(row: LabelRow) -> str:
        css_class = "sub" if row.indent else "main"
        return (
            f'      <tr class="{css_class}"><td>{escape(row.name)}</td>'
            f"<td>{format_amount(row.amount_per_serving)}{escape(row.unit)}</td>"
            f"<td>{format_percent(row.percent_daily_value)}</td></tr>"
        )


_HTML_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <style>
      body {{ font-family: Helvetica, Arial, sans-serif; }}
      .label {{ border: 4px solid #000; padding: 0.5rem; width: 320px; }}
      h1 {{ margin: 0; border-bottom: 4px solid #000; text-align: center; }}
      .calories {{ font-size: 1.3rem; font-weight: bold; border-bottom: 4px solid; }}
      table {{ width: 100%; border-collapse: collapse; }}
      tr.main td {{ font-weight: bold; border-bottom: 1px solid #999; }}
      tr.sub td:first-child {{ padding-left: 1rem; }}
      td:last-child {{ text-align: right; }}
      @media print {{ .label {{ page-break-inside: avoid; }} }}
    </style>
  </head>
  <body>
    <div class="label">
      <h1>{title}</h1>
      <p><strong>{servings} Servings Per Container</strong></p>
      <p><strong>Serving Size ({mass}g)</strong></p>
      <p class="calories">
        Calories: {calories} <small>(Total: {calories_total})</small>
      </p>
      <table>
{rows}
      </table>
      {ingredients}
    </div>
  </body>
</html>
"""
