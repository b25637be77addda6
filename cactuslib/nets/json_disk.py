# cactuslib/nets/json_disk.py
"""
Read-only net disk loaded from a JSON document.

Layout (a file, or a directory holding `netDisk.json`):

  {
    "nets": [
      {"name": "root",
       "ends": [{"name": "e1", "atom_end": false, "instances": ["i1", "i2"]}],
       "adjacency_components": [1, 2],          # arena indices of nested nets
       "atoms": [{"length": 10, "instance_number": 2}]},
      ...
    ],
    "instances": [
      {"id": "i1", "coordinate": 0, "strand": true, "side": false,
       "orientation": true, "adjacency": "i2"},
      ...
    ]
  }

Booleans default to strand=true, side=false, orientation=true, atom_end=false.
Values must be real JSON types: booleans are true/false, integers are not
floats or strings; anything else raises ValueError.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Union

from ..models.net import AdjacencyComponent, Atom, End, EndInstance, Net
from .base import ArenaNetDisk

__all__ = ["NET_DISK_FILENAME", "open_net_disk", "net_disk_from_dict"]

logger = logging.getLogger(__name__)

NET_DISK_FILENAME = "netDisk.json"


# JSON values are taken as-is: no "false" strings, no 1.5 coordinates

def _obj(x: Any, what: str) -> Dict[str, Any]:
    if not isinstance(x, dict):
        raise ValueError(f"{what} must be an object, got {type(x).__name__}")
    return x

def _list(x: Any, what: str) -> list:
    if not isinstance(x, list):
        raise ValueError(f"{what} must be a list, got {type(x).__name__}")
    return x

def _bool(d: Dict[str, Any], key: str, default: bool) -> bool:
    v = d.get(key, default)
    if not isinstance(v, bool):
        raise ValueError(f"{key!r} must be true or false, got {v!r}")
    return v

def _int(v: Any, what: str) -> int:
    # bool is an int subclass
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"{what} must be an integer, got {v!r}")
    return v


def _net(d: Any) -> Net:
    d = _obj(d, "net")
    ends = []
    for e in _list(d.get("ends", []), "ends"):
        e = _obj(e, "end")
        ends.append(End(
            name=str(e.get("name", "")),
            atom_end=_bool(e, "atom_end", False),
            instances=tuple(str(i) for i in _list(e.get("instances", []), "end instances")),
        ))
    atoms = []
    for a in _list(d.get("atoms", []), "atoms"):
        a = _obj(a, "atom")
        atoms.append(Atom(
            length=_int(a["length"], "atom length"),
            instance_number=_int(a["instance_number"], "atom instance_number"),
        ))
    return Net(
        name=str(d["name"]),
        ends=tuple(ends),
        adjacency_components=tuple(
            AdjacencyComponent(nested_net=_int(i, "adjacency component"))
            for i in _list(d.get("adjacency_components", []), "adjacency_components")
        ),
        atoms=tuple(atoms),
    )


def _instance(d: Any) -> EndInstance:
    d = _obj(d, "end instance")
    adj = d.get("adjacency")
    return EndInstance(
        instance_id=str(d["id"]),
        coordinate=_int(d["coordinate"], "coordinate"),
        strand=_bool(d, "strand", True),
        side=_bool(d, "side", False),
        orientation=_bool(d, "orientation", True),
        adjacency=str(adj) if adj is not None else None,
    )


def net_disk_from_dict(doc: Dict[str, Any]) -> ArenaNetDisk:
    if not isinstance(doc, dict) or "nets" not in doc:
        raise ValueError("net disk document must be an object with a 'nets' list")
    try:
        nets = [_net(n) for n in _list(doc["nets"], "nets")]
        instances = [_instance(i) for i in _list(doc.get("instances", []), "instances")]
    except KeyError as e:
        raise ValueError(f"malformed net disk document: missing {e}") from e
    return ArenaNetDisk(nets=nets, end_instances=instances)


def open_net_disk(path: Union[str, os.PathLike]) -> ArenaNetDisk:
    path = os.fspath(path)
    if os.path.isdir(path):
        path = os.path.join(path, NET_DISK_FILENAME)
    if not os.path.isfile(path):
        raise FileNotFoundError(f"net disk not found: {path}")
    with open(path, "r", encoding="utf-8") as fh:
        doc = json.load(fh)
    disk = net_disk_from_dict(doc)
    logger.debug(f"Loaded {len(disk.nets)} nets from {path}")
    return disk
