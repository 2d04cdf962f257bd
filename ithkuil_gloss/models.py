"""
Pydantic models for ithkuil_gloss results.

These models give decoded words a serializable shape for JSON output and
for callers wrapping the decoder in a web API:
- One ``GlossResult`` per word, holding either a gloss or an error
- A ``BatchResult`` for several words decoded with the same settings

Usage:
    from ithkuil_gloss.models import GlossResult, BatchResult

    result = GlossResult.from_outcome("khe", ithkuil_gloss.decode("khe"))
    print(result.model_dump_json())
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ithkuil_gloss.glosses import Error, GlossOutcome


class GlossResult(BaseModel):
    """
    Pydantic model for a single decoded word.

    Exactly one of ``gloss`` and ``error`` is set.
    """
    word: str = Field(..., description="Word as it was given")
    gloss: Optional[str] = Field(None, description="Rendered gloss (e.g., 'Obv/DET-ABS')")
    error: Optional[str] = Field(None, description="Why the word could not be decoded")
    word_type: Optional[str] = Field(None, description="Word type (e.g., 'formative')")
    stress: Optional[str] = Field(None, description="Stress position (e.g., 'penultimate')")

    class Config:
        from_attributes = True

    @classmethod
    def from_outcome(
        cls,
        word: str,
        outcome: GlossOutcome,
        precision: int = 1,
        ignore_defaults: bool = True,
    ) -> "GlossResult":
        """
        Create a GlossResult from a decode outcome.

        Args:
            word: The word that was decoded.
            outcome: Gloss or Error returned by the decoder.
            precision: Rendering precision for the gloss.
            ignore_defaults: Hide default category values.
        """
        if isinstance(outcome, Error):
            return cls(word=word, error=outcome.message)

        return cls(
            word=word,
            gloss=outcome.to_string(precision, ignore_defaults),
            word_type=outcome.word_type.value if outcome.word_type is not None else None,
            stress=outcome.stress.value if outcome.stress is not None else None,
        )

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return self.gloss if self.ok else f"Error: {self.error}"


class BatchResult(BaseModel):
    """Several words decoded with the same rendering settings."""
    results: List[GlossResult] = Field(..., description="One result per word, in input order")
    precision: int = Field(1, description="Rendering precision used")
    ignore_defaults: bool = Field(True, description="Whether default values were hidden")

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    @property
    def count(self) -> int:
        return len(self.results)
