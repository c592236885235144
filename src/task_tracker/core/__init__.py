"""Ports shared between the interpreter and the task subsystem."""
