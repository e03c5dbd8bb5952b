"""Thresholds and formats used by the workflow validators."""

import re

# Recommended workflow code format; other codes only get a warning
CODE_PATTERN = re.compile(r"[a-z0-9_]+")

# Decision nodes branch into exactly this many transitions (yes/no)
DECISION_BRANCH_COUNT = 2

MIN_APPROVAL_TIMEOUT_HOURS = 1

# Scheme plus separator, so values like "httpbin" or "http:foo" are rejected
WEBHOOK_URL_PREFIXES = ("http://", "https://")
