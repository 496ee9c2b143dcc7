"""CSV export of normalized project rows.

Two styles are available. ``strip`` removes commas and ``#`` from scalar
cells instead of quoting them; this is what spreadsheets that open the
exported data URI directly have always received. ``rfc4180`` quotes cells
with the :mod:`csv` module and keeps their text intact.
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from tap_github_projects.normalize import FIXED_COLUMNS

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

CSV_STYLES = ("strip", "rfc4180")
DATA_URI_PREFIX = "data:text/csv;charset=utf-8,"
LIST_SEPARATOR = "; "

# Characters left untouched by a browser's encodeURI.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def header_columns(custom_fields: Sequence[str]) -> list[str]:
    return [*FIXED_COLUMNS, *custom_fields]


def format_cell(value: Any, strip: bool = True) -> str:
    """Render one cell; lists are joined, scalars optionally stripped."""
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(str(v) for v in value)
    text = "" if value is None else str(value)
    if strip:
        text = text.replace(",", "").replace("#", "")
    return text


def encode_csv(
    rows: Iterable[dict[str, Any]],
    custom_fields: Sequence[str],
    style: str = "strip",
) -> str:
    """Serialize rows under a header of fixed then custom columns.

    Cells are taken in each row's key order, which normalization keeps
    identical to the header order.
    """
    if style == "strip":
        lines = [",".join(header_columns(custom_fields))]
        lines.extend(
            ",".join(format_cell(value) for value in row.values()) for row in rows
        )
        return "\n".join(lines)

    if style == "rfc4180":
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(header_columns(custom_fields))
        for row in rows:
            writer.writerow([format_cell(value, strip=False) for value in row.values()])
        return buffer.getvalue().rstrip("\n")

    raise ValueError(f"Unknown CSV style '{style}', expected one of {CSV_STYLES}")


def to_data_uri(csv_text: str) -> str:
    """Wrap CSV text in a data URI a browser can open or download."""
    return quote(DATA_URI_PREFIX + csv_text, safe=_URI_SAFE)
