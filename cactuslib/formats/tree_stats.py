# cactuslib/formats/tree_stats.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Union

# =====================================
# Public record structure
# =====================================

@dataclass
class TreeStatsRecord:
    net_name: str
    total_p: float
    total_q: float
    relative_entropy: float

    @classmethod
    def from_report(cls, net_name: str, report) -> "TreeStatsRecord":
        return cls(
            net_name=net_name,
            total_p=report.total_p,
            total_q=report.total_q,
            relative_entropy=report.entropy,
        )

HEADER = "#net_name\ttotal_p\ttotal_q\trelative_entropy"

# =====================================
# Unified API: decode / encode
# =====================================

Source = Union[str, TextIO, Sequence[str]]   # path | text blob | file-like | sequence of lines
Sink   = Optional[Union[str, TextIO]]        # path | file-like | None (return string)

def _lines(source: Source) -> Iterator[str]:
    import io, os
    if isinstance(source, str):
        if os.path.exists(source) and os.path.isfile(source):
            with open(source, "r", encoding="utf-8") as f:
                yield from f
        else:
            yield from io.StringIO(source)
    elif hasattr(source, "read"):
        yield from source  # type: ignore[misc]
    else:
        yield from source

def decode(source: Source) -> Iterator[TreeStatsRecord]:
    """
    Parse tab-separated tree stats. Comment lines ('#') and blanks are skipped.
    """
    for lineno, raw in enumerate(_lines(source), start=1):
        line = raw.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        cols = line.split("\t")
        if len(cols) != 4:
            raise ValueError(f"tree stats line {lineno}: expected 4 columns, got {len(cols)}")
        yield TreeStatsRecord(
            net_name=cols[0],
            total_p=float(cols[1]),
            total_q=float(cols[2]),
            relative_entropy=float(cols[3]),
        )

def _format_record(rec: TreeStatsRecord) -> str:
    name = rec.net_name
    if any(c in name for c in "\t\r\n") or name.startswith("#"):
        raise ValueError(f"net name {name!r} cannot be written as a tree stats column")
    # repr keeps every bit of the float
    return "\t".join((name, repr(rec.total_p), repr(rec.total_q), repr(rec.relative_entropy)))

def encode(records: Iterable[TreeStatsRecord], *, sink: Sink = None) -> str:
    lines = [HEADER + "\n"]
    for rec in records:
        if not isinstance(rec, TreeStatsRecord):
            raise TypeError("encode() items must be TreeStatsRecord")
        lines.append(_format_record(rec) + "\n")
    text = "".join(lines)

    if sink is None:
        return text
    if isinstance(sink, str):
        with open(sink, "w", encoding="utf-8") as fp:
            fp.write(text)
        return text
    if not hasattr(sink, "write"):
        raise TypeError("sink must be a path string, a file-like with .write, or None")
    sink.write(text)  # type: ignore[attr-defined]
    return text
