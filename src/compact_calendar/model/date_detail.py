# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, TypedDict


class DateDetail(TypedDict):
    description: str
    color: Optional[str]


class DateRange(TypedDict):
    start: datetime.date
    end: datetime.date
    color: str
    description: Optional[str]
