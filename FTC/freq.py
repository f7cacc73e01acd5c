from collections import Counter
from typing import Dict, Hashable, Iterable, List, Tuple

Unit = Hashable
FrequencyEntry = Tuple[Unit, int]


def unit_frequencies(units: Iterable[Unit]) -> Dict[Unit, int]:
    # Counter keeps first-seen order
    return dict(Counter(units))


def sort_frequencies(freqs: Dict[Unit, int]) -> List[FrequencyEntry]:
    """Highest count first; equal counts stay in first-seen order (sorted is stable)."""
    return sorted(freqs.items(), key=lambda kv: kv[1], reverse=True)


def frequency_table(units: Iterable[Unit]) -> List[FrequencyEntry]:
    return sort_frequencies(unit_frequencies(units))
