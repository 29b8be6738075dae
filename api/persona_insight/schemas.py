from typing import Literal, Optional

from pydantic import BaseModel, Field

from .config import MAX_TEXT_CHARS


class AnalyzeRequest(BaseModel):
    text: str = Field(default="", max_length=MAX_TEXT_CHARS)
    strategy: Optional[Literal["corpus", "lexicon"]] = None


class TraitOut(BaseModel):
    name: str
    value: float
    description: str


class SimilarProfileOut(BaseModel):
    category: str
    description: str


class PersonalityResultResponse(BaseModel):
    summary: str
    traits: list[TraitOut]
    evidenceQuotes: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    similarProfiles: list[SimilarProfileOut] = Field(default_factory=list)


class CorpusProfileOut(BaseModel):
    category: str
    description: str
    traits: dict[str, float]
