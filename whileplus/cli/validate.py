"""Validate command for WHILE+ CLI."""

import json
import sys
from collections import Counter

import click

from whileplus.codec import load_program
from whileplus.errors import ProgramFormatError
from whileplus.runtime.syntax import iter_statements


@click.command()
@click.argument('program', type=click.Path(exists=True, dir_okay=False))
@click.option('--json-output', '-j', 'json_output', is_flag=True, help='Output as JSON')
def validate_command(program, json_output):
    """Check that a WHILE+ program document decodes, without running it."""
    try:
        store, stmt = load_program(program)
    except ProgramFormatError as e:
        output = {"valid": False, "errors": [str(e)]}
        print(json.dumps(output, indent=2), file=sys.stderr)
        sys.exit(1)
    except RecursionError:
        output = {"valid": False, "errors": ["program nesting too deep to decode"]}
        print(json.dumps(output, indent=2), file=sys.stderr)
        sys.exit(1)

    kinds = Counter(type(node).__name__ for node in iter_statements(stmt))
    output = {
        "valid": True,
        "store_size": len(store),
        "statement_count": sum(kinds.values()),
        "statement_kinds": dict(sorted(kinds.items())),
        "errors": [],
    }

    if json_output:
        print(json.dumps(output, indent=2))
    else:
        print("✓ Program valid")
        print(f"  Initial bindings: {output['store_size']}")
        print(f"  Statements: {output['statement_count']}")
