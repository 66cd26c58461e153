"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from mysql_mcp.outcomes import Envelope, Fault
from mysql_mcp.outcomes.render import render_json


def render_fault_text(fault: Fault) -> str:
    lines = [f"error[{fault.code}]: {fault.message}"]
    for note in fault.notes:
        lines.append(f"  = note: {note}")
    return "\n".join(lines)


def format_outcome(outcome: Envelope | Fault, *, output_format: str = "json") -> str:
    if output_format == "json":
        return json.dumps(render_json(outcome), indent=2)
    if isinstance(outcome, Fault):
        return render_fault_text(outcome)
    return outcome.text
