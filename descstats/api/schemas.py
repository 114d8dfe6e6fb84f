from typing import List, Optional
from pydantic import BaseModel

# Input schema for summarize()
class Sample(BaseModel):
    numbers: List[float]  # Values to summarize; may be empty

    model_config = {"extra": "forbid"}  # Forbid extra fields in input

# Output schema for numeric analysis. None marks an undefined statistic.
class NumericSummary(BaseModel):
    count: int                # Sample size
    mean: Optional[float]     # 0.0 for an empty sample
    stddev: Optional[float]   # Population standard deviation, None if empty
    median: Optional[float]   # None if empty
    l2: Optional[float]       # Euclidean norm, 0.0 for an empty sample

    model_config = {"extra": "forbid", "frozen": True}
