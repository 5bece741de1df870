"""CLI entry point for waylock-config."""

from __future__ import annotations

import re
import sys
from pathlib import Path

import click

from waylock_config import __version__
from waylock_config.l1_entities.config import U32_MAX

_HEX_RE = re.compile(r'(?:#|0[xX])([0-9a-fA-F]+)')
_DEC_RE = re.compile(r'[0-9]+')


class ColorParamType(click.ParamType):
    """Accepts 0xRRGGBB, #RRGGBB or a decimal integer that fits in 32 bits.

    Only bare digits are allowed: no sign, underscores or surrounding whitespace.
    """

    name = 'color'

    def convert(self, value, param, ctx):
        hex_match = None if isinstance(value, int) else _HEX_RE.fullmatch(value)
        if isinstance(value, int):
            parsed = value
        elif hex_match:
            parsed = int(hex_match.group(1), 16)
        elif _DEC_RE.fullmatch(value):
            parsed = int(value, 10)
        else:
            self.fail(f'{value!r} is not a valid color', param, ctx)
        if not 0 <= parsed <= U32_MAX:
            self.fail(f'{value!r} does not fit in 32 bits', param, ctx)
        return parsed


COLOR = ColorParamType()


def _format_color(value: int) -> str:
    width = 8 if value > 0xFFFFFF else 6
    return f'0x{value:0{width}X}'


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    help='Path to TOML config file (skips the default lookup).',
)
@click.option('--init-color', default=None, type=COLOR, help='Color shown before any input.')
@click.option('--input-color', default=None, type=COLOR, help='Color shown while typing.')
@click.option('--fail-color', default=None, type=COLOR, help='Color shown after a failed attempt.')
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Write debug logs to this file.',
)
@click.version_option(version=__version__)
def cli(config_path, init_color, input_color, fail_color, log_file):
    """waylock-config -- resolve the waylock color scheme from waylock.toml."""
    from waylock_config.l1_entities.errors import ConfigError  # noqa: PLC0415 -- deferred: not needed for --help
    from waylock_config.l3_interface_adapters.gateways.toml_config_loader import (  # noqa: PLC0415 -- deferred: not needed for --help
        TomlConfigLoader,
    )
    from waylock_config.l4_frameworks_and_drivers.color_defaults import (  # noqa: PLC0415 -- deferred: not needed for --help
        load_color_scheme,
    )

    if log_file:
        from waylock_config.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --log-file
            setup_file_logging,
        )

        setup_file_logging(Path(log_file))

    overrides = {
        'init_color': init_color,
        'input_color': input_color,
        'fail_color': fail_color,
    }
    try:
        scheme = load_color_scheme(TomlConfigLoader(), config_path, overrides)
    except ConfigError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    for name, value in scheme.model_dump().items():
        click.echo(f'{name} = {_format_color(value)}')
