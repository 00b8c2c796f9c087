"""Type aliases used across the BillMatch package."""

from __future__ import annotations

from typing import Optional, Sequence

RawCell = Optional[str]
RawColumn = Sequence[RawCell]
