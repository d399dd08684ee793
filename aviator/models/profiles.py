"""Static display profiles for each category."""

from types import MappingProxyType
from typing import Mapping

from aviator.models.results import Category, CategoryProfile


CATEGORY_PROFILES: Mapping[Category, CategoryProfile] = MappingProxyType({
    Category.BREAKOUT: CategoryProfile(
        range_label="3.00x – 8.00x",
        label="High Multiplier Potential",
        color_class="bg-green-900/40",
        border_color_class="border-green-500",
        text_color_class="text-green-300",
    ),
    Category.COOLDOWN: CategoryProfile(
        range_label="1.00x – 1.50x",
        label="Cooldown Expected",
        color_class="bg-red-900/40",
        border_color_class="border-red-500",
        text_color_class="text-red-300",
    ),
    Category.STABLE: CategoryProfile(
        range_label="2.00x – 3.00x",
        label="Stable Range",
        color_class="bg-sky-900/40",
        border_color_class="border-sky-500",
        text_color_class="text-sky-300",
    ),
    Category.LOW: CategoryProfile(
        range_label="1.20x – 2.00x",
        label="Low Multiplier Likely",
        color_class="bg-amber-900/40",
        border_color_class="border-amber-500",
        text_color_class="text-amber-300",
    ),
    Category.NONE: CategoryProfile(
        range_label="N/A",
        label="No Prediction",
        color_class="bg-slate-800",
        border_color_class="border-slate-700",
        text_color_class="text-slate-300",
    ),
})


def get_profile(category: Category) -> CategoryProfile:
    return CATEGORY_PROFILES[Category(category)]
