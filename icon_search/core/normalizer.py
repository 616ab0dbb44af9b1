"""Text normalization utilities for consistent token processing."""

import re
from typing import List, Optional

# Anything outside ASCII lowercase letters and digits separates tokens
_TOKEN_REGEX = re.compile(r"[a-z0-9]+")


def tokenize(text: Optional[str]) -> List[str]:
    """
    Tokenize text into lowercase alphanumeric runs.

    Args:
        text: Input text; ``None`` is treated as empty

    Returns:
        List of tokens in input order, duplicates kept
    """
    if not text:
        return []

    return _TOKEN_REGEX.findall(text.lower())
