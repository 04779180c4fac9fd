from __future__ import annotations

import os

LOG_LEVEL = os.getenv("ORDER_RESULT_LOG_LEVEL", "INFO").upper()
FIRST_ORDER_ID = int(os.getenv("ORDER_RESULT_FIRST_ORDER_ID", "1"))
