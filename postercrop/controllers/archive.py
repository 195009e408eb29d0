from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import List, Sequence, Set, Tuple

from postercrop.models.results import BatchResult

log = logging.getLogger("postercrop.batch")

MULTI_ARCHIVE_NAME = "poster_exports.zip"


def _unique(name: str, taken: Set[str]) -> str:
    out = name
    i = 1
    while out in taken:
        out = f"{name}_{i}"
        i += 1
    taken.add(out)
    return out


def archive_entries(results: Sequence[BatchResult]) -> List[Tuple[str, bytes]]:
    """
    Archive layout as (path, data) pairs.

    A single result goes at the root. Several results get one folder each,
    named after the result; repeated names become name_1, name_2, ...
    """
    entries: List[Tuple[str, bytes]] = []
    if len(results) == 1:
        taken: Set[str] = set()
        for f in results[0].files:
            entries.append((_unique(f.name, taken), f.data))
        return entries

    folders: Set[str] = set()
    for result in results:
        folder = _unique(result.original_base_name, folders)
        taken = set()
        for f in result.files:
            entries.append((f"{folder}/{_unique(f.name, taken)}", f.data))
    return entries


def build_archive(results: Sequence[BatchResult]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for path, data in archive_entries(results):
            zf.writestr(path, data)
    return buf.getvalue()


def archive_filename(results: Sequence[BatchResult]) -> str:
    if len(results) == 1:
        return f"{results[0].original_base_name}_exports.zip"
    return MULTI_ARCHIVE_NAME


def write_archive(results: Sequence[BatchResult], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = build_archive(results)
    path.write_bytes(data)
    log.info("Wrote %s (%d file(s), %d bytes)", path, sum(len(r.files) for r in results), len(data))
    return path
