"""Input/output loops that drive the command interpreter."""
