"""Command-line interface for die scan calculator package."""

import click
from click.core import ParameterSource
from rich.console import Console

from .. import __version__
from ..core.calculator import compute, review_results
from ..config.settings import Settings, DEFAULT_INPUTS, VALID_LOG_LEVELS
from ..models.data_models import Inputs
from ..i18n.bundles import BUNDLES, get_bundle
from ..exceptions.custom_exceptions import (
    DieScanCalcError, InputValidationError, PromptCancelled
)
from ..utils.validation import parse_field
from ..utils.logging_utils import (
    setup_logger, log_calculation_start, log_calculation_success,
    log_advisories, log_cancelled
)
from .presenter import render_banner, render_report, format_json
from .prompts import prompt_language, prompt_inputs

# Options that, when given on the command line, switch off interactive mode
CALCULATION_PARAMS = [
    "width_mm", "length_mm", "dpi", "sensor_px", "pixel_pitch_um",
    "wd_mm", "speed_mm_s", "overlap", "cameras", "json_output",
]


def _validate_option(ctx, param, value):
    """Run the shared field parser on a flag value."""
    try:
        return parse_field(param.name, value)
    except InputValidationError as e:
        raise click.BadParameter(BUNDLES["en"].validation[e.rule])


def _is_interactive(ctx: click.Context) -> bool:
    return all(
        ctx.get_parameter_source(name) in (ParameterSource.DEFAULT, None)
        for name in CALCULATION_PARAMS
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="die-scan-calc")
@click.option('--width-mm', type=float, default=DEFAULT_INPUTS.width_mm,
              callback=_validate_option, help='Object width to cover (mm)')
@click.option('--length-mm', type=float, default=DEFAULT_INPUTS.length_mm,
              callback=_validate_option, help='Object length along scan direction (mm)')
@click.option('--dpi', type=float, default=DEFAULT_INPUTS.dpi,
              callback=_validate_option, help='Target sampling DPI on object')
@click.option('--sensor-px', type=float, default=DEFAULT_INPUTS.sensor_px,
              callback=_validate_option, help='Sensor pixels across width')
@click.option('--pixel-pitch-um', type=float, default=DEFAULT_INPUTS.pixel_pitch_um,
              callback=_validate_option, help='Sensor pixel pitch (µm)')
@click.option('--wd-mm', type=float, default=DEFAULT_INPUTS.wd_mm,
              callback=_validate_option, help='Working distance (mm)')
@click.option('--speed-mm-s', type=float, default=DEFAULT_INPUTS.speed_mm_s,
              callback=_validate_option, help='Traverse speed (mm/s)')
@click.option('--overlap', type=float, default=DEFAULT_INPUTS.overlap,
              callback=_validate_option, help='Total overlap fraction, 0 <= x < 1')
@click.option('--cameras', type=float, default=DEFAULT_INPUTS.cameras,
              callback=_validate_option, help='Number of cameras (0 = auto-calc)')
@click.option('--json', 'json_output', is_flag=True, default=False,
              help='Print {inputs, result} as JSON instead of tables')
@click.option('--lang', type=click.Choice(sorted(BUNDLES), case_sensitive=False), default=None,
              help='Report language (asked interactively when omitted)')
@click.option('--log-level', type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False), default=None,
              help='Logging level (default from LOG_LEVEL or WARNING)')
@click.pass_context
def main(ctx, width_mm, length_mm, dpi, sensor_px, pixel_pitch_um, wd_mm,
         speed_mm_s, overlap, cameras, json_output, lang, log_level):
    """Die Scan Calc - line-scan camera count, FOV, focal length and line rate.

    Run without calculation flags for guided prompts (type q to quit).
    """
    settings = Settings()
    if log_level:
        settings.log_level = log_level.upper()
    if lang:
        settings.default_lang = lang.lower()

    logger = setup_logger('diescancalc', settings.log_level)
    interactive = _is_interactive(ctx)
    console = Console()

    try:
        settings.validate_settings()
        bundle = get_bundle(settings.default_lang)

        if interactive:
            try:
                if lang is None:
                    bundle = get_bundle(prompt_language(settings.default_lang))
                click.clear()
                console.print(render_banner(bundle))
                inputs = prompt_inputs(bundle, settings.defaults)
            except PromptCancelled:
                log_cancelled(logger)
                click.echo(click.style(f"\n\n{bundle.cancelled}", fg="red", bold=True))
                return
        else:
            inputs = Inputs(
                width_mm=width_mm,
                length_mm=length_mm,
                dpi=dpi,
                sensor_px=sensor_px,
                pixel_pitch_um=pixel_pitch_um,
                wd_mm=wd_mm,
                speed_mm_s=speed_mm_s,
                overlap=overlap,
                cameras=cameras,
            )

        log_calculation_start(logger, inputs, interactive)
        results = compute(inputs)
        log_calculation_success(logger, results)
        log_advisories(logger, review_results(inputs, results))

        if json_output:
            click.echo(format_json(inputs, results))
            return

        if interactive:
            click.clear()
        console.print(render_banner(bundle))
        render_report(console, inputs, results, bundle)

    except DieScanCalcError as e:
        logger.debug("Calculation failed", exc_info=True)
        click.echo(click.style(f"\n❌ Error: {e}", fg="red"), err=True)
        ctx.exit(1)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        click.echo(click.style(f"\n💥 UNEXPECTED ERROR: {e}", fg="red"), err=True)
        ctx.exit(1)


if __name__ == '__main__':
    main()
