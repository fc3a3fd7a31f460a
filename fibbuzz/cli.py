import click

from .exceptions.errors import ArgumentCountError, FibBuzzError
from .exceptions.handlers import handle_cli_error, handle_generic_exception
from .operations.sequence import fibonacci_lines
from .operations.validation import parse_count
from .selftest import run_self_tests
from .utils.logger import get_logger

SELF_TEST_FLAG = "--test"

logger = get_logger()


class RawArgsCommand(click.Command):
    """Keeps the arguments as typed, before click drops markers such as ``--``"""

    def parse_args(self, ctx, args):
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=RawArgsCommand,
    context_settings={"ignore_unknown_options": True},
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, args):
    """Print the first COUNT Fibonacci numbers with their FizzBuzz labels"""

    raw_args = ctx.meta["raw_args"]
    try:
        if len(raw_args) != 1:
            raise ArgumentCountError(len(raw_args))

        if raw_args[0] == SELF_TEST_FLAG:
            run_self_tests()
            return

        count = parse_count(raw_args[0])
        lines = fibonacci_lines(count)
    except FibBuzzError as e:
        handle_cli_error(e)
        ctx.exit(e.exit_code)
    except Exception as e:
        handle_generic_exception(e, context="Unexpected error")
        ctx.exit(1)

    logger.debug(f"Printing {len(lines)} values")
    for line in lines:
        click.echo(line.label)


if __name__ == "__main__":
    cli()
