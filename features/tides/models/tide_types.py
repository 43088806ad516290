from enum import Enum
from typing import List
from pydantic import BaseModel, Field

class TideType(str, Enum):
    HIGH = "H"
    LOW = "L"

class TidePrediction(BaseModel):
    """Individual high/low tide prediction"""
    time: str = Field(..., description="Local station time, e.g. 2024-06-01 05:00")
    height: float = Field(..., description="Height of tide in feet above MLLW")
    type: TideType = Field(..., description="H for high tide, L for low tide")

class TideStationPredictions(BaseModel):
    """Tide station with predictions"""
    id: str = Field(..., description="Station identifier")
    begin_date: str = Field(..., description="First day of the window, YYYYMMDD")
    end_date: str = Field(..., description="Last day of the window, YYYYMMDD")
    predictions: List[TidePrediction] = Field(..., description="Chronological tide predictions")
