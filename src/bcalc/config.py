'''
Settings for bcalc.

Everything but the version can be overridden from the environment, with
variables prefixed BCALC_.
'''

import os


VERSION = '1.0.0'

# What to do once a line fails: 'exit' stops reading with status 1, 'continue'
# reports it and moves on to the next line.
ON_ERROR = os.getenv('BCALC_ON_ERROR', 'exit')
ON_ERROR_POLICIES = 'exit', 'continue'

# Size of the line buffer, terminator included. Longer lines are evaluated in
# fragments of MAX_LINE - 1 characters.
# Checked by the CLI.
MAX_LINE = os.getenv('BCALC_MAX_LINE', '128')

PROMPT = os.getenv('BCALC_PROMPT', '> ')
HISTORY_FILE = os.getenv('BCALC_HISTORY_FILE', '~/.bcalc_history')

LOG_LEVEL = os.getenv('BCALC_LOG_LEVEL', 'WARNING')
