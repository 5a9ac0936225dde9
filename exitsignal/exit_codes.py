"""Process exit codes used by the error helpers and the CLI."""

SUCCESS = 0
FAILURE = 1
