from collections.abc import Callable, Iterable

# (longest baseline length, max expansion ratio); short strings grow the most
EXPANSION_STEPS: tuple[tuple[int, float], ...] = (
    (10, 3.0),
    (20, 2.0),
    (30, 1.8),
    (50, 1.6),
    (70, 1.5),
)
LONG_TEXT_RATIO = 1.3


def max_expansion_ratio(base_length: int) -> float:
    for limit, ratio in EXPANSION_STEPS:
        if base_length <= limit:
            return ratio
    return LONG_TEXT_RATIO


def has_inconsistent_length(
    texts: Iterable[str],
    base_length: int | None,
    ratio_limit: Callable[[int], float] = max_expansion_ratio,
) -> bool:
    if not base_length:
        return False
    limit = ratio_limit(base_length)
    return any(len(text) / base_length > limit for text in texts)
