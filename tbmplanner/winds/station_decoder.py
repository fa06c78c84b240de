# tbmplanner/winds/station_decoder.py
"""
Decoder for the NOAA FB winds-aloft station bulletin.

The bulletin is a fixed-column table: a header row of altitude labels and one
row per three-letter station. Each cell is right-aligned under its label and
holds DDSS (direction tens, speed) optionally followed by a temperature, e.g.
`2714`, `2725+03`, `2356-28` or the packed high-altitude form `247043`.
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from .constants import WindConstants
from .data_models import WindProfile, WindSample
from .exceptions import WindParseError

_ENTRY_RE = re.compile(r'^(\d{2})(\d{2})([+-]\d{1,2}|\d{1,2})?$')
_PACKED_RE = re.compile(r'^(\d{2})(\d{2})(\d{2})$')
_TOKEN_RE = re.compile(r'\S+')
_STATION_RE = re.compile(r'^([A-Z0-9]{3})(?:\s|$)')
_HEADER_PREFIXES = ('FT', 'STN', 'STATION')
_MISSING = ('', '-', '--', '----')

# (altitude ft, end column) for each header label
Label = Tuple[int, int]

def decode_wind_entry(entry: str, altitude_ft: Optional[float] = None) -> Optional[WindSample]:
    """
    Decodes a single bulletin cell. Returns None for a blank or missing cell.

    Raises:
        WindParseError: if the cell is not a recognisable wind group.
    """
    clean = re.sub(r'\s', '', entry or '')
    if clean in _MISSING:
        return None

    packed = _PACKED_RE.match(clean)
    if packed:
        dir_pair, speed, temp = int(packed.group(1)), int(packed.group(2)), -float(packed.group(3))
    else:
        match = _ENTRY_RE.match(clean)
        if not match:
            raise WindParseError(f"Unrecognised wind group '{entry}'")
        dir_pair, speed = int(match.group(1)), int(match.group(2))
        temp = _parse_temperature(match.group(3), altitude_ft)

    if f"{dir_pair:02d}{speed:02d}" == WindConstants.LIGHT_AND_VARIABLE:
        return WindSample(0.0, 0.0, temp, altitude_ft)

    if dir_pair >= 51:
        dir_pair -= WindConstants.HIGH_SPEED_DIRECTION_OFFSET
        speed += WindConstants.HIGH_SPEED_SPEED_BONUS
    if dir_pair > 36:
        raise WindParseError(f"Direction out of range in '{entry}'")

    return WindSample(float((dir_pair * 10) % 360), float(speed), temp, altitude_ft)

def _parse_temperature(text: Optional[str], altitude_ft: Optional[float]) -> Optional[float]:
    if not text:
        return None
    temp = int(text)
    if altitude_ft is not None and altitude_ft >= WindConstants.NEGATIVE_TEMP_ALTITUDE_FT and temp > 0:
        temp = -temp
    return float(temp)

def _tokens(line: str) -> List[Tuple[str, int, int]]:
    return [(m.group(), m.start(), m.end()) for m in _TOKEN_RE.finditer(line)]

def parse_header(line: str) -> Optional[List[Label]]:
    """Returns the altitude labels of a header row, or None if the line is not one."""
    tokens = _tokens(line)
    if not tokens:
        return None
    has_prefix = tokens[0][0].upper() in _HEADER_PREFIXES
    numeric = [t for t in tokens if t[0].isdigit()]
    if not has_prefix and (len(numeric) < 2 or len(numeric) != len(tokens)):
        return None

    labels = []
    for text, _, end in numeric:
        value = int(text)
        # FL-style labels (180, 240, ...)
        if value < 1000:
            value *= 100
        labels.append((value, end))
    return labels or None

def _cells_fixed(line: str, labels: List[Label], start_col: int) -> Dict[int, str]:
    cells = {}
    prev_end = start_col
    for altitude, end in labels:
        cells[altitude] = line[prev_end:end].strip()
        prev_end = end
    return cells

def _cells_nearest(tokens: List[Tuple[str, int, int]], labels: List[Label]) -> Dict[int, str]:
    cells: Dict[int, str] = {}
    errors: Dict[int, int] = {}
    for text, _, end in tokens:
        altitude, label_end = min(labels, key=lambda lbl: abs(lbl[1] - end))
        error = abs(label_end - end)
        if error > WindConstants.MAX_COLUMN_ERROR:
            logging.debug(f"Rejecting bulletin token '{text}' at column {end}: no label within tolerance")
            continue
        if altitude not in errors or error < errors[altitude]:
            cells[altitude] = text
            errors[altitude] = error
    return cells

def parse_bulletin(text: str, column_mode: str = "auto") -> Dict[str, WindProfile]:
    """
    Parses a full bulletin into one WindProfile per station.

    Args:
        text: Raw bulletin text, possibly with several header blocks.
        column_mode: "fixed" slices cells between label columns, "nearest"
            assigns whitespace tokens to the nearest label, "auto" uses fixed
            slicing for rows whose tokens all end on a label column and nearest
            matching for any other row.

    Raises:
        WindParseError: if no header row or no station rows are found.
    """
    if column_mode not in ("auto", "fixed", "nearest"):
        raise ValueError(f"Unknown column mode '{column_mode}'")

    labels: Optional[List[Label]] = None
    station_cells: Dict[str, Dict[int, WindSample]] = {}
    rejected = 0

    for line in (text or '').splitlines():
        header = parse_header(line)
        if header:
            labels = header
            continue
        station = _STATION_RE.match(line)
        if not station or labels is None:
            continue

        ident = station.group(1)
        data_tokens = _tokens(line)[1:]
        label_ends = {end for _, end in labels}
        aligned = all(end in label_ends for _, _, end in data_tokens)

        if column_mode == "fixed" or (column_mode == "auto" and aligned):
            cells = _cells_fixed(line, labels, station.end(1))
        else:
            cells = _cells_nearest(data_tokens, labels)

        decoded = station_cells.setdefault(ident, {})
        for altitude, cell in cells.items():
            try:
                sample = decode_wind_entry(cell, altitude)
            except WindParseError as e:
                rejected += 1
                logging.debug(f"{ident} {altitude} ft: {e}")
                continue
            if sample is not None:
                decoded[altitude] = sample

    if labels is None:
        raise WindParseError("No altitude header found in winds bulletin")

    profiles = {
        ident: WindProfile(tuple(samples[a] for a in sorted(samples)), source="station", ident=ident)
        for ident, samples in station_cells.items() if samples
    }
    if not profiles:
        raise WindParseError("Winds bulletin contained no decodable station rows")

    logging.info(f"Decoded winds bulletin: {len(profiles)} stations, {rejected} rejected cells.")
    return profiles
