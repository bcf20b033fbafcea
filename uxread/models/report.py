from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import List, Literal

from uxread.core.config import GRADE_LEVEL_TARGET

SuggestionType = Literal["grade-level", "passive-voice", "long-sentences", "jargon"]


class _Camel(BaseModel):
    # JSON keys are camelCase (gradeLevel, totalIssues, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Suggestion(_Camel):
    type: SuggestionType
    issue: str
    suggestion: str


class AnalysisReport(_Camel):
    grade_level: float = Field(ge=0)
    passive_voice: List[str]
    long_sentences: List[str]
    jargon: List[str]
    suggestions: List[Suggestion]
    total_issues: int

    @model_validator(mode="after")
    def _check_total(self):
        grade_issue = 1 if self.grade_level > GRADE_LEVEL_TARGET else 0
        expected = len(self.passive_voice) + len(self.long_sentences) + len(self.jargon) + grade_issue
        if self.total_issues != expected:
            raise ValueError(f"total_issues={self.total_issues} but detections add up to {expected}")
        return self


class ImageResult(AnalysisReport):
    filename: str
    extracted_text: str


class ImageError(_Camel):
    filename: str
    error: str


class BatchSummary(_Camel):
    total_images: int
    average_grade_level: float
    total_issues: int
    failed_images: int = 0


class BatchReport(_Camel):
    summary: BatchSummary
    results: List[ImageResult]
    errors: List[ImageError] = []


class AnalyzeRequest(BaseModel):
    text: str


class BatchAnalyzeRequest(BaseModel):
    texts: List[str]
