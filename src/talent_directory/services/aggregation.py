"""Read-only statistics over already-loaded subscriber lists.

Every function here is pure: callers fetch the subscribers first and
pass them in, so the same helpers serve the tenant dashboard and a
single talent pool's member subset.
"""

from collections import Counter
from datetime import date, timedelta
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from talent_directory.core.config import settings
from talent_directory.schemas.stats import DashboardStats, FrequencyBucket, PoolStats
from talent_directory.schemas.subscriber import SubscriberResponse
from .membership_service import pool_members

NOT_SPECIFIED = "Not specified"

Selector = Union[str, Callable[[Any], Any]]


def _resolve(selector: Selector) -> Callable[[Any], Any]:
    if callable(selector):
        return selector
    return lambda item: getattr(item, selector, None)


def count_total(subscribers: Sequence[SubscriberResponse]) -> int:
    return len(subscribers)


def count_recent(
    subscribers: Iterable[SubscriberResponse],
    window_days: int,
    today: Optional[date] = None
) -> int:
    """Count signups within the trailing ``window_days`` days, today included.
    
    ``today`` defaults to the wall-clock date at call time.
    """
    today = today or date.today()
    cutoff = today - timedelta(days=window_days - 1)
    return sum(1 for sub in subscribers if sub.signup_date >= cutoff)


def count_with_field(items: Iterable[Any], selector: Selector) -> int:
    """Count items whose selected field is present and non-empty."""
    get = _resolve(selector)
    return sum(1 for item in items if get(item))


def top_by_frequency(
    items: Iterable[Any],
    selector: Selector,
    default: Optional[str] = None
) -> Optional[FrequencyBucket]:
    """Return the most frequent selected value and its count.
    
    List-valued fields are flattened so each element counts once. Empty
    values are skipped unless ``default`` names a bucket for them. Ties go
    to the value seen first. Returns None when nothing was counted.
    """
    get = _resolve(selector)
    counts: Counter = Counter()
    for item in items:
        value = get(item)
        values = value if isinstance(value, (list, tuple, set)) else [value]
        for v in values:
            if not v:
                if default is None:
                    continue
                v = default
            counts[v] += 1
    
    if not counts:
        return None
    # most_common keeps insertion order among equal counts
    name, count = counts.most_common(1)[0]
    return FrequencyBucket(name=name, count=count)


def dashboard_stats(
    subscribers: Sequence[SubscriberResponse],
    window_days: Optional[int] = None,
    today: Optional[date] = None
) -> DashboardStats:
    """Tenant-wide figures shown on the recruiter dashboard."""
    window_days = settings.recent_window_days if window_days is None else window_days
    return DashboardStats(
        total_subscribers=count_total(subscribers),
        recent_signups=count_recent(subscribers, window_days, today),
        linkedin_profiles=count_with_field(subscribers, "linkedin_url"),
        top_department=top_by_frequency(subscribers, "departments"),
    )


def pool_stats(
    subscribers: Iterable[SubscriberResponse],
    pool_id: str,
    window_days: Optional[int] = None,
    today: Optional[date] = None
) -> PoolStats:
    """Figures for the members of one talent pool."""
    window_days = settings.recent_window_days if window_days is None else window_days
    members = pool_members(subscribers, pool_id)
    return PoolStats(
        total_candidates=count_total(members),
        recent_joins=count_recent(members, window_days, today),
        linkedin_profiles=count_with_field(members, "linkedin_url"),
        with_motivation=count_with_field(members, "motivation"),
        top_location=top_by_frequency(members, "current_location", default=NOT_SPECIFIED),
    )
