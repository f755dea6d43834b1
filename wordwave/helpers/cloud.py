import math
from typing import Iterable, List

from ..data import CloudWord, WordRecord
from ..utils import BadParameter


def weigh(
    records: Iterable[WordRecord], min_size: float = 12, max_size: float = 64
) -> List[CloudWord]:
    """Scales each word's font size linearly with its count, biggest first."""
    if not (math.isfinite(min_size) and math.isfinite(max_size)):
        raise BadParameter("min_size and max_size must be finite numbers")
    if min_size > max_size:
        raise BadParameter("min_size must not exceed max_size")
    records = sorted(records, key=lambda x: (-x.count, x.id))
    if not records:
        return []
    highest = records[0].count
    lowest = records[-1].count
    spread = highest - lowest
    cloud = []
    for record in records:
        if spread == 0:
            size = max_size
        else:
            size = min_size + (record.count - lowest) / spread * (max_size - min_size)
        cloud.append(CloudWord(word=record.id, count=record.count, size=round(size, 2)))
    return cloud
