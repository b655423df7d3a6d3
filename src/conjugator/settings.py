"""
Settings and configuration for the conjugator.

Every value can be overridden through the environment.
"""

import os

VERSION = "0.3.0"

# Logging level for the API process
LOG_LEVEL = os.environ.get("CONJUGATOR_LOG_LEVEL", "INFO").upper()

# Maximum number of history entries kept in memory
HISTORY_LIMIT = int(os.environ.get("CONJUGATOR_HISTORY_LIMIT", "50"))

# Class assigned to kanji + る verbs missing from both disambiguation lists.
# "godan" is the conservative default; "ichidan" flips the bias.
UNKNOWN_KANJI_RU = os.environ.get("CONJUGATOR_UNKNOWN_KANJI_RU", "godan").lower()
if UNKNOWN_KANJI_RU not in ("godan", "ichidan"):
    raise ValueError(
        f"CONJUGATOR_UNKNOWN_KANJI_RU must be \"godan\" or \"ichidan\", got {UNKNOWN_KANJI_RU!r}"
    )

# uvicorn entry point
HOST = os.environ.get("CONJUGATOR_HOST", "0.0.0.0")
PORT = int(os.environ.get("CONJUGATOR_PORT", "8000"))
