from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    IMPORTANT = "Important"
    URGENT = "Urgent"
    SOMEDAY = "Someday"
    GOALS = "Goals"

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]


CATEGORY_ICONS = {
    Category.IMPORTANT: "app_ic_type_i",
    Category.URGENT: "app_ic_type_u",
    Category.SOMEDAY: "app_ic_type_s",
    Category.GOALS: "app_ic_type_g",
}


class RouteKind(StrEnum):
    LOADING = "loading"
    ONBOARDING = "onboarding"
    LIST = "list"
    SETTINGS = "settings"
    ADD = "add"
    EDIT = "edit"
    DETAILS = "details"


class TrackingStatus(StrEnum):
    NOT_DETERMINED = "notDetermined"
    AUTHORIZED = "authorized"
    DENIED = "denied"
