"""Interactive input gathering for the calculator CLI."""

from dataclasses import fields, replace
from typing import Any, Callable

import click

from ..models.data_models import Inputs
from ..i18n.bundles import StringBundle, LANGUAGE_CHOICES, LANGUAGE_PROMPT
from ..exceptions.custom_exceptions import InputValidationError, PromptCancelled
from ..utils.validation import parse_field

QUIT_KEY = "q"


def _check_quit(raw: Any) -> str:
    text = str(raw).strip()
    if text.lower() == QUIT_KEY:
        raise PromptCancelled("Operator quit at prompt")
    return text


def _display_default(value: Any) -> str:
    """Show 1200.0 as 1200 and keep 0.12 as is."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _field_converter(field: str, bundle: StringBundle) -> Callable[[Any], Any]:
    """Build a click value_proc that re-prompts with a localized message."""

    def convert(raw: Any) -> Any:
        text = _check_quit(raw)
        try:
            return parse_field(field, text)
        except InputValidationError as e:
            raise click.BadParameter(bundle.validation[e.rule])

    return convert


def _ask(text: str, default: str, value_proc: Callable[[Any], Any]) -> Any:
    try:
        return click.prompt(text, default=default, value_proc=value_proc)
    except click.Abort:
        # Ctrl-C or end of input
        raise PromptCancelled("Prompt aborted")


def prompt_language(default: str = "en") -> str:
    """
    Ask for the report language.

    Returns:
        Language tag ('en' or 'tr')

    Raises:
        PromptCancelled: If the operator quits
    """
    labels = {tag: label for label, tag in LANGUAGE_CHOICES.items()}
    choice = click.Choice(list(LANGUAGE_CHOICES), case_sensitive=False)

    def convert(raw: Any) -> str:
        text = _check_quit(raw)
        return choice.convert(text, None, None)

    label = _ask(LANGUAGE_PROMPT + f" ({'/'.join(LANGUAGE_CHOICES)})",
                 labels.get(default, "English"), convert)
    return LANGUAGE_CHOICES[label]


def prompt_inputs(bundle: StringBundle, defaults: Inputs) -> Inputs:
    """
    Ask for every input field in order, re-prompting on invalid answers.

    Args:
        bundle: Language bundle for prompt and validation text
        defaults: Values offered when the operator just presses Enter

    Returns:
        Validated Inputs

    Raises:
        PromptCancelled: If the operator quits at any prompt
    """
    answers = {}
    for f in fields(defaults):
        answers[f.name] = _ask(
            bundle.prompts[f.name],
            _display_default(getattr(defaults, f.name)),
            _field_converter(f.name, bundle),
        )
    return replace(defaults, **answers)
