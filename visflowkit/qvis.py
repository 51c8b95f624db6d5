"""Reader for QVis volume descriptions (.dat files with raw voxel data)."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

import numpy as np

from visflowkit.volume import Volume

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_BYTE_FORMATS = {"char", "uchar", "byte"}


class QVisFileError(Exception):
    """A QVis file cannot be read or is malformed."""


def parse_dat_line(line: str) -> tuple[str, str]:
    """Split a 'Key: value' line into a lower-case, trimmed key and value.

    A line without a colon yields two empty strings.
    """
    key, colon, value = line.partition(":")
    if not colon:
        return "", ""
    return key.strip().lower(), value.strip().lower()


def _leading_number(token: str, pattern: re.Pattern, convert):
    match = pattern.match(token)
    if match is None:
        raise ValueError(f"invalid number {token!r}")
    return convert(match.group())


def _three_tokens(value: str, tag: str) -> list[str]:
    tokens = value.split()
    if len(tokens) != 3:
        raise QVisFileError(f"invalid {tag} tag")
    return tokens


def load_qvis(filename: str | PathLike) -> Volume:
    """Load the volume described by a QVis .dat file."""
    path = Path(filename)
    try:
        text = path.read_text(encoding="latin-1")
    except OSError as exc:
        raise QVisFileError(f"Unable to read file {filename}") from exc

    volume = Volume()
    needs_conversion = False
    raw_filename = ""

    for line in text.splitlines():
        key, value = parse_dat_line(line)
        if key == "objectfilename":
            parent = str(path.parent) if str(Path(filename).parent) != "." else ""
            raw_filename = f"{parent}/{value}" if parent else value
        elif key == "resolution":
            tokens = _three_tokens(value, "resolution")
            try:
                sizes = [_leading_number(t, _INT_PREFIX, int) for t in tokens]
            except ValueError as exc:
                raise QVisFileError("invalid resolution tag") from exc
            if min(sizes) < 0:
                raise QVisFileError("invalid resolution tag")
            volume.width, volume.height, volume.depth = sizes
        elif key == "slicethickness":
            tokens = _three_tokens(value, "slicethickness")
            try:
                volume.scale = np.array(
                    [_leading_number(t, _FLOAT_PREFIX, float) for t in tokens]
                )
                volume.normalize_scale()
            except ValueError as exc:
                raise QVisFileError("invalid slicethickness tag") from exc
        elif key == "format":
            if value not in _BYTE_FORMATS:
                needs_conversion = True
        elif key == "endianess":
            if value != "little":
                raise QVisFileError(
                    "only little endian data supported by this mini-reader"
                )

    if not raw_filename:
        raise QVisFileError("object filename not found")

    try:
        raw = Path(raw_filename).read_bytes()
    except OSError as exc:
        raise QVisFileError(f"Unable to read file {raw_filename}") from exc

    if needs_conversion:
        # anything other than 8 bit is taken to be 16 bit
        count = volume.voxel_count
        if count == 0:
            raise QVisFileError("volume has no voxels")
        raw = raw[: count * 2].ljust(count * 2, b"\0")
        values = np.frombuffer(raw, dtype="<u2").astype(np.int64)
        low, high = int(values.min()), int(values.max())
        volume.data = (((values - low) * 255) // (1 + high - low)).astype(np.uint8)
    else:
        volume.data = np.frombuffer(raw, dtype=np.uint8).copy()

    try:
        volume.compute_normals()
    except ValueError as exc:
        raise QVisFileError(str(exc)) from exc
    return volume