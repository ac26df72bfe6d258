from pydantic import BaseModel
from typing import Optional

class EnrichRequest(BaseModel):
    # JSON-encoded string; decoded defensively by the enrichment service
    body: Optional[str] = None
