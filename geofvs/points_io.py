"""Plain-text point files: one ``x y`` pair per line."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .geometry import as_point
from .model import InputError, Point

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _parse_number(token: str) -> float:
    try:
        return int(token)
    except ValueError:
        return float(token)


def parse_points(text: str) -> List[Point]:
    """Parse whitespace or comma separated coordinates; ``#`` starts a comment."""

    points: List[Point] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].replace(",", " ").strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 2:
            raise InputError(f"line {lineno}: expected 'x y', got {raw.strip()!r}")
        try:
            coords = (_parse_number(parts[0]), _parse_number(parts[1]))
        except ValueError as exc:
            raise InputError(f"line {lineno}: {exc}") from exc
        try:
            points.append(as_point(coords))
        except InputError as exc:
            raise InputError(f"line {lineno}: {exc}") from exc
    return points


def format_points(points: Iterable[Point]) -> str:
    lines = [f"{x} {y}" for x, y in points]
    return "\n".join(lines) + ("\n" if lines else "")


def read_points(path: PathLike) -> List[Point]:
    points = parse_points(Path(path).read_text(encoding="utf-8"))
    logger.info("Read %d point(s) from %s", len(points), path)
    return points


def write_points(path: PathLike, points: Iterable[Point]) -> None:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(format_points(points), encoding="utf-8")
    logger.info("Wrote points to %s", output)


__all__ = ["format_points", "parse_points", "read_points", "write_points"]
