"""Result types shared by the classifier and its callers."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Category(str, Enum):
    BREAKOUT = "BREAKOUT"
    COOLDOWN = "COOLDOWN"
    STABLE = "STABLE"
    LOW = "LOW"
    # Caller-side "nothing predicted yet"; the classifier never returns it.
    NONE = "NONE"


@dataclass(frozen=True)
class CategoryProfile:
    """Display metadata for a category. Style fields are opaque tokens."""
    range_label: str
    label: str
    color_class: str
    border_color_class: str
    text_color_class: str


@dataclass(frozen=True)
class PredictionResult:
    category: Category
    profile: CategoryProfile
    reason: str

    @property
    def range_label(self) -> str:
        return self.profile.range_label

    @property
    def label(self) -> str:
        return self.profile.label

    @classmethod
    def empty(cls) -> "PredictionResult":
        """Sentinel result for callers that have not classified anything."""
        from aviator.models.profiles import get_profile

        return cls(Category.NONE, get_profile(Category.NONE), "NO_PREDICTION")

    def to_dict(self) -> Dict[str, str]:
        return {
            "category": self.category.value,
            "range_label": self.profile.range_label,
            "label": self.profile.label,
            "reason": self.reason,
            "color_class": self.profile.color_class,
            "border_color_class": self.profile.border_color_class,
            "text_color_class": self.profile.text_color_class,
        }
