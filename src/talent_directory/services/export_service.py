"""CSV rendering for subscriber and talent pool exports."""

import csv
import io
import re
from typing import Any, Iterable, List, Optional, Sequence

from talent_directory.core.config import settings
from talent_directory.schemas.subscriber import SubscriberResponse
from talent_directory.schemas.talent_pool import TalentPoolResponse
from .membership_service import pool_members

LIST_SEPARATOR = "; "

SUBSCRIBER_HEADER = ["Email", "Departments", "LinkedIn URL", "Signup Date"]
POOL_CANDIDATE_HEADER = [
    "Email",
    "Job Title",
    "Departments",
    "Current Location",
    "Preferred Location",
    "LinkedIn URL",
    "Motivation",
    "Signup Date",
]
POOL_SUMMARY_HEADER = ["Pool Name", "Candidate Count", "Departments", "Created Date"]


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(str(v) for v in value)
    return str(value)


def to_csv(
    header: Sequence[str],
    rows: Iterable[Sequence[Any]],
    quote_fields: Optional[bool] = None
) -> str:
    """Render a header and rows as CSV text.
    
    Lines are separated by a single newline with no trailing newline.
    List values are joined with ``"; "`` into one cell. With
    ``quote_fields`` a cell containing a comma, quote or line break is
    quoted; without it cells are written raw and such a cell shifts the
    columns of its row. In quoted mode a row whose only cell is empty is
    written as ``""`` so it stays distinct from a blank line; in raw mode
    it is an empty line.
    """
    quote_fields = settings.csv_quote_fields if quote_fields is None else quote_fields
    lines = [list(header)] + [[_cell(value) for value in row] for row in rows]
    
    if not quote_fields:
        return "\n".join(",".join(line) for line in lines)
    
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerows(lines)
    return buffer.getvalue()[:-1]


def subscribers_csv(subscribers: Iterable[SubscriberResponse], **kwargs) -> str:
    rows = [
        [sub.email, sub.departments, sub.linkedin_url, sub.signup_date.isoformat()]
        for sub in subscribers
    ]
    return to_csv(SUBSCRIBER_HEADER, rows, **kwargs)


def pool_candidates_csv(subscribers: Iterable[SubscriberResponse], **kwargs) -> str:
    rows = [
        [
            sub.email,
            sub.job_title,
            sub.departments,
            sub.current_location,
            sub.preferred_location,
            sub.linkedin_url,
            sub.motivation,
            sub.signup_date.isoformat(),
        ]
        for sub in subscribers
    ]
    return to_csv(POOL_CANDIDATE_HEADER, rows, **kwargs)


def pool_summary_csv(
    pools: Iterable[TalentPoolResponse],
    subscribers: Sequence[SubscriberResponse],
    **kwargs
) -> str:
    """One row per pool with its current member count."""
    rows = [
        [
            pool.title,
            len(pool_members(subscribers, pool.id)),
            pool.departments,
            pool.created_date.isoformat(),
        ]
        for pool in pools
    ]
    return to_csv(POOL_SUMMARY_HEADER, rows, **kwargs)


def export_filename(name: str, suffix: str) -> str:
    """Download name such as ``Acme_Corp_subscribers.csv``."""
    stem = re.sub(r"\s+", "_", name.strip())
    return f"{stem}_{suffix}.csv"
