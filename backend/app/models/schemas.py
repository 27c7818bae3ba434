from pydantic import BaseModel, Field
from typing import Any, Optional, Dict, List


class CaseInfo(BaseModel):
    id: str
    series: int
    code: int
    kind: str
    description: str


class RunPayload(BaseModel):
    series: List[int] = Field(default_factory=list)
    options: Dict[str, bool] = Field(default_factory=dict)


class CaseResult(BaseModel):
    series: int
    id: str
    kind: str
    description: str
    status: str
    message: str
    details: Optional[Dict[str, Any]] = None


class RunSummary(BaseModel):
    total: int = 0
    passed: int = Field(0, alias="pass")
    failed: int = Field(0, alias="fail")
    skipped: int = Field(0, alias="skip")


class GigsReport(BaseModel):
    generated: str
    summary: RunSummary
    tests: List[CaseResult]
