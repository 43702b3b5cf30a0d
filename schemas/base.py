"""
Shared validation for rows read from USDA source tables
"""

import math
from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, field_validator

_DATE_FORMATS = ("%m/%d/%Y", "%m/%d/%Y %H:%M:%S", "%Y%m%d")


def parse_source_date(value: Any) -> Optional[date]:
    """
    Parse the date forms found across FNDDS releases.

    Access sources hand back datetime values, the ASCII distribution uses
    MM/DD/YYYY, and re-exported copies usually carry ISO strings.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date: {value!r}")


SourceDate = Annotated[Optional[date], BeforeValidator(parse_source_date)]


class SourceRow(BaseModel):
    """
    Base schema for one source row.

    Ensures:
    - Unknown source columns are ignored (tables drift between releases)
    - Blank strings and NaN read as missing values
    - Text is stripped; numeric codes stored in text columns are accepted
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        if isinstance(v, float) and math.isnan(v):
            return None
        return v


class DatedRow(SourceRow):
    """Rows carrying the FNDDS validity window"""

    start_date: SourceDate = None
    end_date: SourceDate = None
