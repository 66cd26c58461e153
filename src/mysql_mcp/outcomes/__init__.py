"""Outcome system: fault codes, envelopes, and rendering."""

from mysql_mcp.outcomes.codes import FaultCode
from mysql_mcp.outcomes.types import Envelope, Fault, Outcome, Tier

__all__ = [
    "Envelope",
    "Fault",
    "FaultCode",
    "Outcome",
    "Tier",
]
