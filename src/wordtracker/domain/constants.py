from __future__ import annotations

"""
Domain Constants.

Application-wide defaults shared by the persistence layer, configuration
and command line interface.
"""

APP_NAME = "wordtracker"

DEFAULT_REPOSITORY_FILE = "repository.ser"
DEFAULT_LOG_LEVEL = "WARNING"

USAGE = "Usage: wordtracker <input.txt> -pf|-pl|-po [-f <output.txt>]"
