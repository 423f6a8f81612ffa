from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import json
from hashlib import sha256
from typing import Dict, List, Optional


class ChronicleKind(Enum):
    GAME_STARTED = "GAME_STARTED"
    GAME_RESET = "GAME_RESET"
    DAY_ADVANCED = "DAY_ADVANCED"
    LEVEL_COMPLETE = "LEVEL_COMPLETE"
    GAME_OVER = "GAME_OVER"
    EVENT_QUEUED = "EVENT_QUEUED"
    EVENT_RESOLVED = "EVENT_RESOLVED"
    INVESTMENT = "INVESTMENT"
    FOOD_DISTRIBUTED = "FOOD_DISTRIBUTED"
    TRADE = "TRADE"
    COMMAND_REJECTED = "COMMAND_REJECTED"
    HARMONY_WARNING = "HARMONY_WARNING"


@dataclass(slots=True)
class ChronicleEntry:
    entry_id: str
    day: int
    level: int
    kind: ChronicleKind
    payload: Dict[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class ChronicleLog:
    max_len: int
    entries: List[ChronicleEntry] = field(default_factory=list)
    next_seq: int = 0
    base_seq: int = 0

    def append(self, entry: ChronicleEntry) -> None:
        if not entry.entry_id:
            entry.entry_id = f"chr:{entry.level}:{entry.day}:{self.next_seq}"
        self.entries.append(entry)
        self.next_seq += 1

        if self.max_len > 0 and len(self.entries) > self.max_len:
            overflow = len(self.entries) - self.max_len
            del self.entries[:overflow]
            self.base_seq += overflow

    def record(self, kind: ChronicleKind, *, day: int, level: int, **payload: object) -> ChronicleEntry:
        entry = ChronicleEntry(entry_id="", day=day, level=level, kind=kind, payload=dict(payload))
        self.append(entry)
        return entry

    def since(self, cursor_seq: int) -> List[ChronicleEntry]:
        if cursor_seq < self.base_seq:
            cursor_seq = self.base_seq
        offset = max(0, cursor_seq - self.base_seq)
        return list(self.entries[offset:])

    def tail(self, n: int = 10) -> List[ChronicleEntry]:
        if n <= 0:
            return []
        return list(self.entries[-int(n) :])

    def last(self, kind: Optional[ChronicleKind] = None) -> Optional[ChronicleEntry]:
        for entry in reversed(self.entries):
            if kind is None or entry.kind is kind:
                return entry
        return None

    def signature(self) -> str:
        canonical = {
            "base_seq": self.base_seq,
            "next_seq": self.next_seq,
            "entries": [
                {
                    "entry_id": e.entry_id,
                    "day": e.day,
                    "level": e.level,
                    "kind": e.kind.value,
                    "payload": {k: e.payload[k] for k in sorted(e.payload)},
                }
                for e in self.entries
            ],
        }
        payload = json.dumps(canonical, sort_keys=True, separators=(",", ":"), default=str)
        return sha256(payload.encode("utf-8")).hexdigest()


__all__ = [
    "ChronicleEntry",
    "ChronicleKind",
    "ChronicleLog",
]
