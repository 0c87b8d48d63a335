"""Catalog entry models."""
from enum import Enum
from typing import Callable, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .console import Console


class Category(str, Enum):
    """Pattern category enumeration."""
    BEHAVIORAL = "behavioral"
    STRUCTURAL = "structural"
    CREATIONAL = "creational"
    SOLID = "solid"

    @property
    def heading(self) -> str:
        if self is Category.SOLID:
            return "SOLID Principles"
        return f"{self.value.capitalize()} Patterns"


class PatternEntry(BaseModel):
    """One documentation unit registered in the catalog."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str = Field(..., description="Kebab-case identifier, e.g. 'command'")
    name: str
    category: Category
    summary: str
    explanation: str = ""
    diagram: str = ""
    module: str
    demo: Callable[[Console], None] = Field(exclude=True)

    @field_validator("key")
    @classmethod
    def validate_key(cls, value: str) -> str:
        if not value or value != value.lower() or " " in value or "_" in value:
            raise ValueError(f"Pattern key must be lower kebab-case, got '{value}'")
        return value

    def to_summary(self) -> dict:
        """Serializable view used by the CLI."""
        return {
            "key": self.key,
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
        }


class DemoResult(BaseModel):
    """Lines printed by one demo run."""
    key: str
    name: str
    category: Category
    lines: List[str] = Field(default_factory=list)
