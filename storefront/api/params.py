# storefront/api/params.py
from typing import Annotated

from fastapi import Path

from storefront.repos import MIN_ID, MAX_ID

# user ids are written into rows, so out-of-range values are rejected up front
UserId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID)]
