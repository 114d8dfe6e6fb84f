import logging
from typing import Iterable

from descstats.services.numeric import numeric_summary
from descstats.api.schemas import Sample, NumericSummary

logger = logging.getLogger(__name__)

def summarize(numbers: Iterable[float]) -> NumericSummary:
    """
    Compute every statistic for ``numbers`` and return them as one record.
    Values that cannot be read as floats raise pydantic.ValidationError
    (a ValueError). An empty sample is valid input.
    """
    sample = Sample(numbers=list(numbers))
    logger.debug("summarizing sample of %d values", len(sample.numbers))
    return NumericSummary(count=len(sample.numbers), **numeric_summary(sample.numbers))
