from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)

LOG_LEVEL = os.getenv("ICONRENAME_LOG_LEVEL", "WARNING")
