#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Command Line Interface.

When the project is installed as a Python package, an `estemplate`
executable is added in the PATH and executes the `main` function of this
module, which renders YAML template files into Elasticsearch JSON.
"""
import json
import logging

import click

from estemplate import __version__  # NOQA
from estemplate.config import load_config
from estemplate.exceptions import TemplateError
from estemplate.loader import load_template
from estemplate.logger import set_logger, timed_execution

__all__ = ["main"]


def _load(template):
    try:
        return load_template(template)
    except (TemplateError, ValueError) as e:
        raise click.ClickException(click.style(str(e), fg="red")) from e


def _validate(index):
    try:
        index.validate(include_name=True)
    except TemplateError as e:
        raise click.ClickException(click.style(str(e), fg="red")) from e


def _render(index, include_name):
    try:
        return index.source(include_name)
    except TemplateError as e:
        raise click.ClickException(click.style(str(e), fg="red")) from e


# Main group
@click.group(invoke_without_command=True)
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.option("-c", "--config", type=click.Path(exists=True, dir_okay=False))
@click.option("--filebeat", is_flag=True, default=False, help="Output ECS logs")
@click.pass_context
def cli(ctx, config, filebeat):
    # print help page if no subcommands provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    ctx.ensure_object(dict)
    configuration = load_config(config)
    set_logger(
        logging.getLevelName(configuration["service"]["log_level"]), filebeat=filebeat
    )
    ctx.obj["config"] = configuration


@click.command(help="Render a YAML template as Elasticsearch JSON")
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
@click.option("--validate/--no-validate", "validate", default=None)
@click.option("--indent", type=int, default=None)
@click.pass_obj
def render(obj, template, validate, indent):
    options = obj["config"]["render"]
    if validate is None:
        validate = options["validate"]
    if indent is None:
        indent = options["indent"]

    index = _load(template)
    if validate:
        _validate(index)

    with timed_execution(f"render {template}"):
        source = _render(index, options["include_name"])
    click.echo(json.dumps(source, indent=indent, sort_keys=options["sort_keys"]))


cli.add_command(render)


@click.command(help="Check a YAML template for missing or invalid values")
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
def validate(template):
    index = _load(template)
    _validate(index)
    _render(index, True)
    click.echo(click.style(f"{template} is valid", fg="green"))


cli.add_command(validate)


def main(args=None):
    cli.main(args=args, prog_name="estemplate")


if __name__ == "__main__":
    main()
