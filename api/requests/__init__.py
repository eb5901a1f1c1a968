from __future__ import annotations

from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, StrictFloat, StrictInt

Number = Union[StrictInt, StrictFloat]


class SeriesRequest(BaseModel):
    # legacy dashboard clients post the series under "data"
    sequence: List[Number] = Field(validation_alias=AliasChoices("sequence", "data"))


class AnalyzeSeriesRequest(SeriesRequest):
    window_size: Optional[StrictInt] = Field(
        default=None, validation_alias=AliasChoices("windowSize", "window_size")
    )
    threshold: Optional[Number] = None


class SeasonalityRequest(SeriesRequest):
    max_lag: Optional[StrictInt] = Field(
        default=None, validation_alias=AliasChoices("maxLag", "max_lag")
    )


class AnomalyRequest(SeriesRequest):
    threshold: Optional[Number] = None


class ForecastRequest(SeriesRequest):
    window_size: Optional[StrictInt] = Field(
        default=None, validation_alias=AliasChoices("windowSize", "window_size")
    )
