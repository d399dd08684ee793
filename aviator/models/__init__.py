"""Classification models."""

from aviator.models.results import Category, CategoryProfile, PredictionResult
from aviator.models.profiles import CATEGORY_PROFILES, get_profile
from aviator.models.classifier import RULES, Rule, classify

__all__ = [
    "Category",
    "CategoryProfile",
    "PredictionResult",
    "CATEGORY_PROFILES",
    "get_profile",
    "RULES",
    "Rule",
    "classify",
]
