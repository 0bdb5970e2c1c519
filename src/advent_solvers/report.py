from __future__ import annotations

import hashlib
import json
import platform
import sys
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

from .registry import PuzzleResult


def input_hash(text: str) -> str:
    return "sha256:" + hashlib.sha256(text.encode("utf-8")).hexdigest()


def result_to_dict(result: PuzzleResult) -> Dict[str, object]:
    return asdict(result)


def render_text(result: PuzzleResult) -> str:
    """Render answers the way each puzzle prints them.

    Dive! shows the full position per part; every other day prints one
    ``Part N: <answer>`` line per part.
    """
    if result.day == 2:
        blocks = []
        for part in result.parts:
            blocks.append(
                f"Part {part.part} --->\n"
                f"Horizontal: {part.details['horizontal']}, "
                f"Depth: {part.details['depth']}, "
                f"Answer: {part.answer}"
            )
        return "\n\n".join(blocks)
    return "\n".join(f"Part {part.part}: {part.answer}" for part in result.parts)


def render_json(result: PuzzleResult) -> str:
    return json.dumps(result_to_dict(result), ensure_ascii=True, sort_keys=True, indent=2)


def render(result: PuzzleResult, output_format: str) -> str:
    if output_format == "text":
        return render_text(result)
    if output_format == "json":
        return render_json(result)
    raise ValueError(f"Unsupported output format: {output_format}")


def ensure_parent(path: Path, *, mkdirs: bool) -> None:
    parent = path.parent
    if not parent.exists() and mkdirs:
        parent.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, data: object, *, mkdirs: bool, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(
            f"Refusing to overwrite existing file without --force: {path}"
        )
    ensure_parent(path, mkdirs=mkdirs)
    text = json.dumps(data, ensure_ascii=True, sort_keys=True, indent=2)
    path.write_text(text + "\n", encoding="utf-8")


def build_run_meta(*, app_version: str, input_text: str) -> Dict[str, object]:
    return {
        "app_version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": sys.version.split()[0],
        "platform": platform.system().lower(),
        "input_hash": input_hash(input_text),
        "hash_algorithm": "sha256",
    }


def emit_report_json(
    path: Path,
    *,
    result: PuzzleResult,
    run_meta: Dict[str, object],
    mkdirs: bool = True,
    overwrite: bool = False,
) -> None:
    data = {"run_meta": run_meta, "result": result_to_dict(result)}
    write_json(path, data, mkdirs=mkdirs, overwrite=overwrite)
