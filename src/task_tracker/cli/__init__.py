"""Command parsing, dispatch and the process entrypoint."""
