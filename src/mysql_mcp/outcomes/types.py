"""Outcome values for a tool call.

A call ends in exactly one of two values. A ``Fault`` means the request
itself was rejected before the database was touched; the transport reports
it as a JSON-RPC error. An ``Envelope`` means the call went through as a
protocol exchange, even if the database refused the statement; that case
is an envelope with ``is_error`` set, not a fault.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from mysql_mcp.outcomes.codes import FaultCode


class Tier(enum.Enum):
    PROTOCOL = "protocol"
    EXECUTION = "execution"


@dataclass
class Fault:
    code: FaultCode
    message: str
    notes: list[str] = field(default_factory=list)

    @classmethod
    def of(cls, code: FaultCode, message: str) -> Fault:
        return cls(code=code, message=message)

    def note(self, note: str) -> Fault:
        self.notes.append(note)
        return self

    @property
    def tier(self) -> Tier:
        return Tier.PROTOCOL

    @property
    def rpc_code(self) -> int:
        return self.code.rpc_code


@dataclass(frozen=True)
class Envelope:
    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> Envelope:
        return cls(text=text, is_error=False)

    @classmethod
    def error(cls, text: str) -> Envelope:
        return cls(text=text, is_error=True)

    @property
    def tier(self) -> Tier:
        return Tier.EXECUTION


Outcome = Envelope | Fault
