from pathlib import Path
from typing import Optional
from pydantic import BaseModel


class ResolvedLocation(BaseModel):
    path: Path
    offset: Optional[int] = None
    via_history: bool = False
    note: Optional[str] = None
