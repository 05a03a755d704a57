"""Operation safety classification used for MCP tool annotations."""

from enum import Enum


class OperationSafety(str, Enum):
    """Classification of operation safety levels."""

    SAFE = "safe"  # Read-only operations (list, logs, stats)
    MODERATE = "moderate"  # State-changing but reversible (start, stop, exec)
    DESTRUCTIVE = "destructive"  # Permanent changes (rm, rmi)
