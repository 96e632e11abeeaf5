"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment when the container provides them
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)
