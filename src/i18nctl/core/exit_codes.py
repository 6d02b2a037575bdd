from __future__ import annotations

OK = 0
ERR_FAIL = 1
ERR_USAGE = 2
ERR_CONFIG = 10
ERR_WRITE = 11
ERR_INTERNAL = 99
