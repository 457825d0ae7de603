# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

LINSPELL_CONFIG_DIR = os.environ.get("LINSPELL_CONFIG_DIR", os.path.join(USER_HOME, ".config", "linspell"))

LINSPELL_CLIENT_CONFIG = os.environ.get("LINSPELL_CLIENT_CONFIG", os.path.join(LINSPELL_CONFIG_DIR, "linspell.json"))
LINSPELL_DICTIONARY = os.environ.get("LINSPELL_DICTIONARY")
LINSPELL_LOG_LEVEL = os.environ.get("LINSPELL_LOG_LEVEL", "INFO")
