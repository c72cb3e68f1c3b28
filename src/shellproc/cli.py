"""Click entry point — all commands."""

import sys

import click

from shellproc import __version__, config, log, search_path
from shellproc.errors import ProcessExitError, ShellProcError
from shellproc.runner import ProcessRunner

COMMAND_SETTINGS = {"ignore_unknown_options": True}


@click.group()
@click.version_option(version=__version__, prog_name="shellproc")
@click.option("--config", "config_file", default=None, help="Settings file (YAML)")
@click.pass_context
def main(ctx, config_file):
    """Run external commands with quoted arguments and exit-code checks."""
    try:
        ctx.obj = config.load_settings(config_file)
    except (ShellProcError, OSError) as e:
        log.error(str(e))
        sys.exit(1)


def _runner_options(f):
    f = click.option("--quiet-stderr", is_flag=True, help="Discard the command's stderr")(f)
    f = click.option("--cwd", default=None, help="Working directory for the command")(f)
    f = click.option("--toss", is_flag=True, help="Fail when the exit code is unexpected")(f)
    f = click.option("--expect", default=None, type=int, help="Expected exit code (default 0)")(f)
    return f


def _build_runner(settings, command, toss=False, cwd=None, quiet_stderr=False) -> ProcessRunner:
    runner = ProcessRunner(command[0] if len(command) == 1 else list(command))
    config.apply(settings, runner)
    if toss:
        runner.toss_if_unexpected()
    if quiet_stderr:
        runner.redirect_standard_error()
    if cwd is not None:
        runner.set_working_directory(cwd)
    return runner


@main.command(context_settings=COMMAND_SETTINGS)
@_runner_options
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def run(settings, expect, toss, cwd, quiet_stderr, command):
    """Run a command to completion and print its output."""
    expected = settings.expect if expect is None else expect
    try:
        runner = _build_runner(settings, command, toss, cwd, quiet_stderr)
        output = runner.execute(expected)
    except ProcessExitError as e:
        if e.output:
            click.echo(e.output)
        log.error(str(e))
        sys.exit(1)
    except ShellProcError as e:
        log.error(str(e))
        sys.exit(1)
    if output:
        click.echo(output)


@main.command(context_settings=COMMAND_SETTINGS)
@_runner_options
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def feed(settings, expect, toss, cwd, quiet_stderr, command):
    """Pipe stdin into a command and print what it wrote."""
    expected = settings.expect if expect is None else expect
    data = click.get_text_stream("stdin").read()
    try:
        runner = _build_runner(settings, command, toss, cwd, quiet_stderr)
        with runner.interactive("w", expected=expected):
            if data:
                runner.write(data)
    except ProcessExitError as e:
        click.echo(e.output, nl=False)
        log.error(str(e))
        sys.exit(1)
    except ShellProcError as e:
        log.error(str(e))
        sys.exit(1)
    click.echo(runner.output, nl=False)


@main.command(context_settings=COMMAND_SETTINGS)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.option("--quiet-stderr", is_flag=True, help="Discard the command's stderr")
@click.pass_obj
def line(settings, command, quiet_stderr):
    """Print the command line that would be run."""
    try:
        runner = ProcessRunner(command[0] if len(command) == 1 else list(command))
    except ShellProcError as e:
        log.error(str(e))
        sys.exit(1)
    if quiet_stderr or settings.redirect_stderr:
        runner.redirect_standard_error()
    click.echo(runner.command_line())


@main.command()
@click.argument("name")
@click.pass_obj
def exists(settings, name):
    """Exit 0 if NAME is a file on the search path, 1 otherwise."""
    if settings.path is not None:
        search_path.resolve_search_path(settings.path)
    if search_path.exists(name):
        log.success(f"{name} found")
        sys.exit(0)
    log.failure(f"{name} not found")
    sys.exit(1)


@main.command()
@click.pass_obj
def path(settings):
    """Print the search path, one directory per line."""
    if settings.path is not None:
        search_path.resolve_search_path(settings.path)
    for entry in search_path.search_path_entries():
        click.echo(entry)


if __name__ == "__main__":
    main()
