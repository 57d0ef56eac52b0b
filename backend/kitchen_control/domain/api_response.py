"""
Uniform API envelope

Author: TM3
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

SUCCESS_CODE = 1000


class ApiResponse(BaseModel):
    """
    Envelope used for error bodies

    code: 1000 for success, the HTTP status for errors
    message: human-readable text
    result: payload, omitted from the JSON when absent
    """

    code: int = Field(SUCCESS_CODE, description="Result code")
    message: Optional[str] = Field(None, description="Human-readable message")
    result: Optional[Any] = Field(None, description="Payload")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize without null fields"""
        return self.model_dump(exclude_none=True)
