"""CSV Import: parse, validate and transform uploaded campsite rows.

Invariants:
    - Blank lines are skipped; the first non-blank line is the header
    - Row numbers are data-row position + 2 (header is row 1), blank lines not counted
    - validate_row() reports the FIRST failing check only, in a fixed order
    - transform_row() is only called on rows that passed validate_row()
    - Rows are independent: one bad row never affects another
    - Pure functions (no IO, no DB); insertion happens in the service layer
    - Unparseable CSV (e.g. a field over the csv module limit) raises
      CampsiteValidationError on field "csv"
"""

import csv
import io
import math
import re
from dataclasses import dataclass

from campfinder.core.errors import CampsiteValidationError
from campfinder.core.label_mapping import map_activity, map_facility

CSV_COLUMNS: tuple[str, ...] = (
    "name_ja", "name_en",
    "address_ja", "address_en",
    "lat", "lng",
    "price",
    "nearest_station_ja", "nearest_station_en",
    "access_time_ja", "access_time_en",
    "description_ja", "description_en",
    "amenities", "activities",
)

_COLUMN_ALIASES = {"facilities": "amenities"}
_LABEL_SEPARATORS = re.compile(r"[・、]")
FIRST_DATA_ROW = 2


@dataclass(frozen=True)
class RowError:
    """One rejected row: row number in the uploaded file plus reason."""
    row: int
    message: str


@dataclass(frozen=True)
class PreparedRow:
    """A row that passed validation, transformed to storage fields."""
    row: int
    data: dict


def parse_csv(text: str) -> list[dict[str, str]]:
    """Parse CSV text into header-keyed dicts with trimmed values."""
    text = text.lstrip("\ufeff")
    try:
        records = [
            cells for cells in csv.reader(io.StringIO(text))
            if any(cell.strip() for cell in cells)
        ]
    except csv.Error as e:
        raise CampsiteValidationError(
            "CSVファイルの形式が正しくありません", field="csv",
        ) from e
    if not records:
        return []
    headers = [
        _COLUMN_ALIASES.get(h.strip(), h.strip()) for h in records[0]
    ]
    rows = []
    for cells in records[1:]:
        row = {}
        for index, header in enumerate(headers):
            row[header] = cells[index].strip() if index < len(cells) else ""
        rows.append(row)
    return rows


def _is_number(value: str) -> bool:
    try:
        return math.isfinite(float(value))
    except ValueError:
        return False


def validate_row(row: dict[str, str]) -> str | None:
    """Return the first validation message for row, or None when valid."""
    if not row.get("name_ja"):
        return "名前（日本語）が必要です"
    if not row.get("address_ja"):
        return "住所（日本語）が必要です"
    if not row.get("lat") or not _is_number(row["lat"]):
        return "緯度が無効です"
    if not row.get("lng") or not _is_number(row["lng"]):
        return "経度が無効です"
    if not row.get("price") or not _is_number(row["price"]):
        return "料金が無効です"
    if not row.get("nearest_station_ja"):
        return "最寄り駅が必要です"
    if not row.get("access_time_ja"):
        return "アクセス時間が必要です"
    return None


def split_labels(value: str | None) -> list[str]:
    """Split "トイレ・シャワー、売店" into trimmed, non-empty labels."""
    if not value:
        return []
    return [part.strip() for part in _LABEL_SEPARATORS.split(value) if part.strip()]


def format_price(amount: float) -> str:
    """3000 -> "¥3,000/泊" """
    if amount.is_integer():
        return f"¥{int(amount):,}/泊"
    return f"¥{amount:,}/泊"


def transform_row(row: dict[str, str]) -> dict:
    """Map a validated CSV row to flat storage fields."""
    amount = float(row["price"])
    return {
        "name_ja": row["name_ja"],
        "name_en": row.get("name_en") or row["name_ja"],
        "address_ja": row["address_ja"],
        "address_en": row.get("address_en") or row["address_ja"],
        "lat": float(row["lat"]),
        "lng": float(row["lng"]),
        "price": format_price(amount),
        "price_min": int(amount),
        "price_max": int(amount),
        "nearest_station_ja": row["nearest_station_ja"],
        "nearest_station_en": row.get("nearest_station_en") or row["nearest_station_ja"],
        "access_time_ja": row["access_time_ja"],
        "access_time_en": row.get("access_time_en") or row["access_time_ja"],
        "description_ja": row.get("description_ja") or "",
        "description_en": row.get("description_en") or row.get("description_ja") or "",
        "phone": "",
        "website": "",
        "facilities": [map_facility(label) for label in split_labels(row.get("amenities"))],
        "activities": [map_activity(label) for label in split_labels(row.get("activities"))],
    }


def prepare_import(text: str) -> tuple[list[PreparedRow], list[RowError]]:
    """Split uploaded CSV into transformed valid rows and per-row errors."""
    prepared: list[PreparedRow] = []
    errors: list[RowError] = []
    for index, row in enumerate(parse_csv(text)):
        row_number = index + FIRST_DATA_ROW
        message = validate_row(row)
        if message:
            errors.append(RowError(row_number, message))
            continue
        prepared.append(PreparedRow(row_number, transform_row(row)))
    return prepared, errors


def build_template_csv() -> str:
    """Header row plus one example row for the admin download."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    writer.writerow([
        "高尾の森キャンプ場", "Takao Forest Campsite",
        "東京都八王子市川町55", "55 Kawamachi, Hachioji, Tokyo",
        "35.6328", "139.2644",
        "3000",
        "JR高尾駅", "JR Takao Station",
        "バス15分", "15 min by bus",
        "高尾山の麓にある自然豊かなキャンプ場です。",
        "A nature-rich campsite at the foot of Mt. Takao.",
        "トイレ・シャワー・炊事場", "ハイキング・バーベキュー",
    ])
    return buffer.getvalue()
