from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from pubsuffix.errors import PubSuffixError
from pubsuffix.host.idna_codec import IDNAOption
from pubsuffix.models.public_suffix import PublicSuffix, Section, from_section

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "value",
    "public_suffix",
    "ascii",
    "unicode",
    "section",
    "label_count",
    "is_known",
    "is_icann",
    "is_private",
    "is_resolvable",
    "is_transitional_different",
    "error",
]


@dataclass
class BatchResult:
    row_count: int
    error_count: int
    report_csv_path: Path


def describe_suffix(suffix: PublicSuffix) -> dict[str, Any]:
    return {
        "public_suffix": suffix.to_json(),
        "ascii": suffix.to_ascii().to_json(),
        "unicode": suffix.to_unicode().to_json(),
        "section": suffix.section.value,
        "label_count": suffix.label_count(),
        "is_known": suffix.is_known(),
        "is_icann": suffix.is_icann(),
        "is_private": suffix.is_private(),
        "is_resolvable": suffix.is_resolvable(),
        "is_transitional_different": suffix.is_transitional_different,
    }


def inspect_suffix(
    value: Any,
    section: Section | str = Section.UNKNOWN,
    ascii_option: int = IDNAOption.DEFAULT,
    unicode_option: int = IDNAOption.DEFAULT,
) -> dict[str, Any]:
    row: dict[str, Any] = {name: None for name in REPORT_COLUMNS}
    row["value"] = value
    try:
        suffix = from_section(value, section, ascii_option, unicode_option)
        description = describe_suffix(suffix)
    except (PubSuffixError, TypeError) as exc:
        row["error"] = str(exc)
        return row
    row.update(description)
    return row


def inspect_suffixes(
    values: Iterable[Any],
    section: Section | str = Section.UNKNOWN,
    ascii_option: int = IDNAOption.DEFAULT,
    unicode_option: int = IDNAOption.DEFAULT,
) -> pd.DataFrame:
    rows = [inspect_suffix(value, section, ascii_option, unicode_option) for value in values]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def read_values(path: Path, column: str | None = None) -> list[str]:
    if column is not None:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"Column {column!r} not found in {path}")
        return df[column].tolist()
    values: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("//"):
            continue
        values.append(line)
    return values


def inspect_file(
    input_path: Path,
    output_csv: Path,
    section: Section | str = Section.UNKNOWN,
    column: str | None = None,
    ascii_option: int = IDNAOption.DEFAULT,
    unicode_option: int = IDNAOption.DEFAULT,
) -> BatchResult:
    values = read_values(input_path, column=column)
    df = inspect_suffixes(values, section, ascii_option, unicode_option)
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_csv, index=False)
    error_count = int(df["error"].notna().sum())
    logger.info("Wrote %s rows to %s", len(df), output_csv)
    if error_count:
        logger.warning("%s of %s values could not be parsed as public suffixes", error_count, len(df))
    return BatchResult(row_count=len(df), error_count=error_count, report_csv_path=output_csv)
