"""
Defaults for labeled decoding.

A text payload without a charset label is US-ASCII (RFC 2046, 4.1.2).
Labels are never guessed from the bytes.
"""

import os

DEFAULT_CHARSET = os.getenv("IANACHARSET_DEFAULT_CHARSET", "US-ASCII")
MAX_UPLOAD_BYTES = int(os.getenv("IANACHARSET_MAX_UPLOAD_BYTES", str(1 << 20)))
