"""Execute command for WHILE+ CLI."""

import json
import logging
import sys

import click

from whileplus.codec import load_program, load_store
from whileplus.errors import ProgramFormatError, StepLimitExceeded
from whileplus.runtime.executor import Executor, ExecutionConfig


@click.command()
@click.argument('program', type=click.Path(exists=True, dir_okay=False))
@click.option('--store', '-s', 'store_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON store merged over the program document store')
@click.option('--max-steps', type=click.IntRange(min=1), default=None,
              help='Abort after this many executed statements')
@click.option('--json-output', '-j', 'json_output', is_flag=True, help='Output as JSON')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def execute_command(program, store_path, max_steps, json_output, verbose):
    """Execute a WHILE+ program document."""
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("whileplus").setLevel(logging.DEBUG)

    try:
        store, stmt = load_program(program)
        if store_path:
            store.update(load_store(store_path))
    except ProgramFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except RecursionError:
        print("Error: program nesting too deep to decode", file=sys.stderr)
        sys.exit(1)

    executor = Executor(ExecutionConfig(max_steps=max_steps))
    try:
        result = executor.execute(store, stmt)
    except StepLimitExceeded as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except RecursionError:
        print("Error: program nesting too deep to execute", file=sys.stderr)
        sys.exit(1)

    if json_output:
        print(json.dumps(result.to_dict(), indent=2))
        return

    sys.stdout.write(result.log)
    if result.success:
        print("✓ Execution completed")
    else:
        print(f"✗ Uncaught exception: {result.exception.show()}")
    for name, value in sorted(result.store.items()):
        print(f"  {name} = {value.show()}")
