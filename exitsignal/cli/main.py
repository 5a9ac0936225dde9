from contextlib import ExitStack, nullcontext
from typing import Optional

import click

from exitsignal import __version__ as about
from exitsignal.cli.config import get_logger, setup_logging
from exitsignal.config import LOG_LEVEL
from exitsignal.exit import catch, exit_on_error, exit_with

# Get a logger for this module.
log = get_logger(__name__)

# Define an epilog message with examples.
EPILOG = f"""
Examples:

{click.style('• unwind three frames and exit with code 4', fg="green")}

    $ exitsignal --code 4

{click.style('• fail with a message from five frames deep', fg="green")}

    $ exitsignal --depth 5 --error "disk full"

{click.style('• see what happens when main has no catcher', fg="green")}

    $ exitsignal --code 4 --no-catch
"""


def descend(level: int, depth: int, code: int, error: Optional[str]) -> None:
    """
    Recurse to ``depth`` frames, registering one cleanup per frame.

    Each frame echoes ``cleanup <level>`` when it is left, whether it returns
    or is unwound. The deepest frame fails with ``error`` or requests ``code``.

    Parameters:
        level (int): Current frame number, starting at 1.
        depth (int): Deepest frame number.
        code (int): Exit code requested at the deepest frame; 0 returns normally.
        error (Optional[str]): Error text reported at the deepest frame.
    """
    with ExitStack() as stack:
        stack.callback(click.echo, f"cleanup {level}")
        if level < depth:
            descend(level + 1, depth, code, error)
            return
        if error is not None:
            exit_on_error(RuntimeError(error), "failed at depth %d", level)
        if code:
            exit_with(code)


@click.command(
    help=about.__description__,
    epilog=EPILOG,
)
@click.version_option(
    about.__version__,
    prog_name=about.__title__,
)
@click.option(
    "--code", "-c",
    type=click.INT,
    default=0,
    show_default=True,
    help="Exit code requested at the deepest frame",
)
@click.option(
    "--depth", "-d",
    type=click.IntRange(min=1),
    default=3,
    show_default=True,
    help="Number of nested frames with a cleanup each",
)
@click.option(
    "--error", "-e",
    metavar="<text>",
    help="Fail at the deepest frame with this error message",
)
@click.option(
    "--no-catch",
    is_flag=True,
    default=False,
    help="Run without the top-level catcher",
)
@click.option(
    "--log-level",
    default=LOG_LEVEL,
    show_default=True,
    help="Logging level",
    envvar="EXITSIGNAL_LOG_LEVEL",
)
def main(
        code: int,
        depth: int,
        error: Optional[str],
        no_catch: bool,
        log_level: str,
):
    """
    Demonstrate a graceful exit from deep inside the call stack.

    Parameters:
        code (int): Exit code requested at the deepest frame.
        depth (int): Number of nested frames.
        error (Optional[str]): Error message to fail with instead of ``code``.
        no_catch (bool): Skip the top-level catcher.
        log_level (str): Logging level.
    """
    try:
        setup_logging(level=log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level")

    # The catcher must enclose everything else so it unwinds last.
    with nullcontext() if no_catch else catch():
        log.info("Descending %d frames", depth)
        descend(1, depth, code, error)
        click.echo("done")


if __name__ == "__main__":
    main(prog_name=about.__title__)
