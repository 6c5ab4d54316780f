import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)

# =============================
# Listing schema
# =============================
@dataclass(frozen=True)
class Field:
    name: str
    description: str
    numeric: bool = False


SCHEMA = (
    Field("bike_name", "The name and model of the bike"),
    Field("price", "The price of the bike (in INR).", numeric=True),
    Field("city", "The city where the bike is located."),
    Field("kms_driven", "The total kilometers the bike has been driven.", numeric=True),
    Field("owner", "The number of previous owners (e.g., First Owner)."),
    Field("age", "The age of the bike (in years).", numeric=True),
    Field("power", "The engine power (in cc).", numeric=True),
    Field("brand", "The brand of bike (e.g., Royal Enfield)."),
)
FIELD_NAMES = tuple(f.name for f in SCHEMA)
NUMERIC_FIELDS = tuple(f.name for f in SCHEMA if f.numeric)

MALFORMED_POLICIES = ("skip", "pad", "raise")

# Substituted when the listings file cannot be read at all.
FALLBACK_ROWS = [
    ("Royal Enfield Classic 350cc", "119900", "Delhi", "24000", "First Owner", "4", "350", "Royal Enfield"),
    ("Bajaj Pulsar 150cc", "42000", "Mumbai", "31000", "First Owner", "6", "150", "Bajaj"),
    ("Hero Splendor Plus 100cc", "28000", "Delhi", "45000", "Second Owner", "8", "100", "Hero"),
    ("Honda CB Shine 125cc", "39000", "Bangalore", "18000", "First Owner", "5", "125", "Honda"),
    ("TVS Apache RTR 160cc", "61000", "Pune", "12000", "First Owner", "3", "160", "TVS"),
    ("KTM Duke 200cc", "95000", "Bangalore", "15000", "First Owner", "4", "200", "KTM"),
]


# =============================
# Errors
# =============================
class RecordError(Exception):
    """Base class for listing data problems."""


class SchemaError(RecordError):
    """The header line is missing, empty or does not describe the listing schema."""


class MalformedRowError(RecordError):
    """A data line whose field count does not match the header."""

    def __init__(self, line_number: int, expected: int, found: int):
        super().__init__(line_number, expected, found)
        self.line_number = line_number
        self.expected = expected
        self.found = found

    def __str__(self):
        return (f"line {self.line_number}: expected {self.expected} fields, "
                f"found {self.found}")


@dataclass
class ParseResult:
    records: pd.DataFrame
    errors: List[MalformedRowError] = field(default_factory=list)
    is_fallback: bool = False

    @property
    def malformed_lines(self) -> List[int]:
        return [e.line_number for e in self.errors]


# =============================
# Parsing
# =============================
def to_frame(rows: List[Dict[str, Optional[str]]]) -> pd.DataFrame:
    data = [[row.get(name) for name in FIELD_NAMES] for row in rows]
    return pd.DataFrame(data, columns=list(FIELD_NAMES), dtype=object)


def _read_header(line: str) -> List[str]:
    headers = [h.strip() for h in line.split(",")]
    if any(not h for h in headers):
        raise SchemaError(f"empty column name in header: {line!r}")
    dupes = sorted({h for h in headers if headers.count(h) > 1})
    if dupes:
        raise SchemaError(f"duplicate columns in header: {dupes}")
    if not any(h in FIELD_NAMES for h in headers):
        raise SchemaError(f"header has no listing fields: {headers}")
    unknown = [h for h in headers if h not in FIELD_NAMES]
    if unknown:
        logger.warning("Ignoring columns outside the listing schema: %s", unknown)
    return headers


def parse_records(text: str, on_malformed: str = "pad") -> ParseResult:
    """
    Split comma-separated text into listing records.

    The first non-blank line names the columns; each later line is matched
    to it by position. Values stay strings (empty ones become None). Lines
    with the wrong number of fields are handled by ``on_malformed``:
      - pad:   keep the row, fill missing fields with None, drop extras
      - skip:  drop the row
      - raise: raise the first MalformedRowError
    Under pad and skip every mismatch is still listed in ``errors``.
    """
    if on_malformed not in MALFORMED_POLICIES:
        raise ValueError(f"on_malformed must be one of {MALFORMED_POLICIES}, got {on_malformed!r}")

    # Spreadsheet exports often start with a byte-order mark.
    if text.startswith("\ufeff"):
        text = text[1:]

    lines = [(no, line.rstrip("\r")) for no, line in enumerate(text.split("\n"), start=1)]
    lines = [(no, line) for no, line in lines if line.strip()]
    if not lines:
        raise SchemaError("no header line found")

    headers = _read_header(lines[0][1])
    width = len(headers)

    rows, errors = [], []
    for line_no, line in lines[1:]:
        values = [v.strip() for v in line.split(",")]
        if len(values) != width:
            err = MalformedRowError(line_no, width, len(values))
            if on_malformed == "raise":
                raise err
            errors.append(err)
            if on_malformed == "skip":
                continue
            values = (values + [None] * width)[:width]
        rows.append({h: (v or None) for h, v in zip(headers, values)})

    return ParseResult(records=to_frame(rows), errors=errors)


def fallback_records() -> pd.DataFrame:
    return to_frame([dict(zip(FIELD_NAMES, row)) for row in FALLBACK_ROWS])


# =============================
# Loading
# =============================
def load_records(path: str, on_malformed: str = "pad") -> ParseResult:
    """Read and parse the listings file, falling back to the built-in sample on failure."""
    try:
        with open(path, encoding="utf-8-sig") as fh:
            text = fh.read()
        result = parse_records(text, on_malformed=on_malformed)
    except (OSError, UnicodeDecodeError, RecordError) as exc:
        logger.warning("Could not load listings from %s (%s); using fallback sample", path, exc)
        return ParseResult(records=fallback_records(), is_fallback=True)

    for err in result.errors:
        logger.warning("Malformed row in %s, %s", path, err)
    logger.info("Loaded %d listings from %s", len(result.records), path)
    return result
