from typing import List, Optional

from pydantic import BaseModel, Field


class MessageInfo(BaseModel):
    action: str
    profile: str
    request: str
    response: str
    request_schema: Optional[str] = None
    response_schema: Optional[str] = None


class ValidationReport(BaseModel):
    action: str
    direction: str
    valid: bool
    errors: List[str] = Field(default_factory=list)


class ComparisonReport(BaseModel):
    action: str
    direction: str
    builder_valid: bool
    schema_valid: bool
    agrees: bool
    builder_errors: List[str] = Field(default_factory=list)
    schema_errors: List[str] = Field(default_factory=list)
