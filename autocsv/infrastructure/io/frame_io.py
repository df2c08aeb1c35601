from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from .exceptions import DataParseError

if TYPE_CHECKING:
    from collections.abc import Iterator


class FrameAdapter:
    """Row sequences <-> pandas DataFrames of string cells."""

    def rows_to_frame(self, rows: list[list[str]]) -> pd.DataFrame:
        if not rows:
            raise DataParseError("Cannot build a DataFrame without a header row")
        header, *data = rows
        return pd.DataFrame(data, columns=header, dtype="string")

    def frame_to_rows(self, frame: pd.DataFrame) -> Iterator[list[str]]:
        if frame.shape[1] == 0:
            raise DataParseError("DataFrame has no columns")
        yield [str(column) for column in frame.columns]
        cells = frame.astype("string").fillna("")
        for values in cells.itertuples(index=False, name=None):
            yield [str(value) for value in values]
