from pydantic import BaseModel, ConfigDict


class CodeEntry(BaseModel):
    """One row of the CDT reference table."""

    code: str
    description: str
    category: str | None = None

    model_config = ConfigDict(frozen=True, from_attributes=True)


class ScoredMatch(BaseModel):
    """A reference entry with the number of query keywords found in its description."""

    code: str
    description: str
    score: int

    model_config = ConfigDict(frozen=True)
