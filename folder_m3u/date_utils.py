from __future__ import annotations

from datetime import datetime
from typing import Optional

RUN_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


def format_run_timestamp(moment: Optional[datetime] = None) -> str:
    """Local-time stamp used in generated file names, e.g. 20240615-103045."""
    if moment is None:
        moment = datetime.now()
    return moment.strftime(RUN_TIMESTAMP_FORMAT)
