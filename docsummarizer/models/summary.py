"""Summarization request/response Pydantic models."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SummaryRequest(BaseModel):
    """Document text to summarize."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Plain document text")
    file_name: str = Field(..., alias="fileName", description="Original file name")


class ParsedInsightSet(BaseModel):
    """Structured content recovered from a raw model response."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    key_insights: List[str] = Field(default_factory=list, alias="keyInsights")


class WordCount(BaseModel):
    """Word counts before and after summarization."""

    original: int = Field(..., ge=0)
    summary: int = Field(..., ge=0)
    reduction: int = Field(..., description="Percentage decrease in word count")


class SummaryResult(BaseModel):
    """Final summarization result."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    key_insights: List[str] = Field(default_factory=list, alias="keyInsights")
    word_count: WordCount = Field(..., alias="wordCount")
    processing_time_ms: int = Field(..., alias="processingTime", ge=0)


class ExtractedText(BaseModel):
    """Text extracted from an uploaded document."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    file_name: str = Field(..., alias="fileName")
    file_type: str = Field(..., alias="fileType")
    word_count: int = Field(..., alias="wordCount", ge=0)
