"""Pydantic models for shuffle options.

Pydantic validates shape (types, separator format); the shuffle functions
validate index bounds themselves.
"""

from pydantic import BaseModel, Field, field_validator

from wordmix.tokenizer import resolve_separators


class ShuffleOptions(BaseModel):
    """Options shared by the statement and document shufflers."""

    only_vowels: bool = Field(default=False, description="Shuffle vowels only")
    separators: str = Field(default=" ", description="Word separator characters")
    seed: int | None = Field(default=None, description="Random seed (None = random)")

    @field_validator("separators", mode="before")
    @classmethod
    def validate_separators(cls, v: object) -> str:
        """Accept a string or a list of single characters; drop duplicates."""
        if v is None:
            return " "
        try:
            chars = list(v)
        except TypeError:
            raise ValueError(f"Separators must be a string or a list of characters, got {v!r}")
        for item in chars:
            if not isinstance(item, str) or len(item) != 1:
                raise ValueError(f"Separators must be single characters, got {item!r}")
        unique = "".join(dict.fromkeys(chars))
        return unique or " "

    @property
    def separator_set(self) -> frozenset[str]:
        return resolve_separators(self.separators)

    model_config = {"frozen": True}
