"""Document store status and sub-status codes.

Only the codes the read path reacts to are listed here; everything else is
treated as fatal by the error classifier.
"""

from __future__ import annotations

# HTTP status codes
REQUEST_TIMEOUT = 408
GONE = 410
TOO_MANY_REQUESTS = 429

# Sub-status codes that accompany GONE
PARTITION_KEY_RANGE_GONE = 1002
COMPLETING_SPLIT = 1007

SPLIT_SUB_STATUS_CODES = frozenset({PARTITION_KEY_RANGE_GONE, COMPLETING_SPLIT})

# Response headers
REQUEST_CHARGE_HEADER = "x-ms-request-charge"
SUB_STATUS_HEADER = "x-ms-substatus"
RETRY_AFTER_MS_HEADER = "x-ms-retry-after-ms"
PARTITION_KEY_RANGE_ID_HEADER = "x-ms-documentdb-partitionkeyrangeid"
SCRIPT_LOGGING_HEADER = "x-ms-documentdb-script-enable-logging"

# Completion code reported by the bulk read stored procedure once a
# partition is drained for the current request shape
READ_COMPLETE = 1
