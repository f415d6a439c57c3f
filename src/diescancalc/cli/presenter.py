"""Rendering of calculation results as rich tables or JSON."""

import json

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models.data_models import Inputs, Results
from ..i18n.bundles import StringBundle

# (field, format, unit)
INPUT_ROWS = [
    ("width_mm", ".1f", "mm"),
    ("length_mm", ".1f", "mm"),
    ("dpi", ".1f", "dpi"),
    ("sensor_px", "d", "px"),
    ("pixel_pitch_um", ".2f", "µm"),
    ("wd_mm", ".1f", "mm"),
    ("speed_mm_s", ".1f", "mm/s"),
]

OUTPUT_ROWS = [
    ("pixel_size_obj_mm", ".4f", "mm/px"),
    ("eq_dpi", ".1f", "dpi"),
    ("px_needed_across", ".0f", "px"),
    ("px_needed_with_margin", ".0f", "px"),
    ("cams_required", "d", "pcs"),
    ("fov_per_cam_mm", ".1f", "mm"),
    ("sensor_length_mm", ".3f", "mm"),
    ("magnification", ".4f", "—"),
    ("focal_length_mm", ".1f", "mm"),
    ("line_pitch_mm", ".3f", "mm/line"),
    ("lines_needed", ".0f", "lines"),
    ("line_rate_hz", ".2f", "Hz"),
]


def render_banner(bundle: StringBundle) -> Panel:
    """Boxed title for the report."""
    return Panel(
        Text(bundle.banner, style="bold cyan", justify="center"),
        border_style="dim cyan",
        padding=1,
        expand=False,
    )


def build_inputs_table(inputs: Inputs, results: Results, bundle: StringBundle) -> Table:
    t = bundle.tables
    table = Table(header_style="bold green", border_style="grey50", box=box.SQUARE)
    table.add_column(t["parameter"], width=35)
    table.add_column(t["value"], justify="right", width=15)
    table.add_column(t["units"], width=10)

    for field, fmt, unit in INPUT_ROWS:
        value = format(getattr(inputs, field), fmt)
        table.add_row(bundle.input_labels[field], value, unit)

    table.add_row(bundle.input_labels["overlap"], f"{inputs.overlap * 100:.1f}", "%")
    table.add_row(bundle.input_labels["cameras"], str(results.cams_used), "pcs")
    return table


def build_outputs_table(results: Results, bundle: StringBundle) -> Table:
    t = bundle.tables
    table = Table(header_style="bold magenta", border_style="grey50", box=box.SQUARE)
    table.add_column(t["metric"], width=35)
    table.add_column(t["value"], justify="right", width=15)
    table.add_column(t["units"], width=15)
    table.add_column(t["notes"], width=70)

    for field, fmt, unit in OUTPUT_ROWS:
        value = format(getattr(results, field), fmt)
        table.add_row(bundle.output_labels[field], value, unit, bundle.tips[field])
    return table


def render_report(console: Console, inputs: Inputs, results: Results,
                  bundle: StringBundle) -> None:
    """
    Print the inputs and outputs tables.

    Args:
        console: Target rich console
        inputs: Inputs echoed in the first table
        results: Results for the second table
        bundle: Language bundle for labels and tips
    """
    console.print()
    console.print(bundle.tables["inputs_header"], style="bold cyan")
    console.print(build_inputs_table(inputs, results, bundle))
    console.print(bundle.tables["outputs_header"], style="bold magenta")
    console.print(build_outputs_table(results, bundle))


def format_json(inputs: Inputs, results: Results) -> str:
    """Serialize inputs and results as {"inputs": ..., "result": ...}."""
    payload = {"inputs": inputs.to_dict(), "result": results.to_dict()}
    return json.dumps(payload, indent=2, ensure_ascii=False)
