from __future__ import annotations

APP_URL = "https://apps.apple.com/app/id6753189302"
TERMS_OF_USE_URL = (
    "https://docs.google.com/document/d/e/"
    "2PACX-1vQqPT9ipVFGML5SGpU0oObIhwWf4wnnTsmKvkfNObcUdzIXMyp1uoKITWSh5wxiiKaOJpuDbshLewEN/pub"
)
PRIVACY_POLICY_URL = TERMS_OF_USE_URL

REMOTE_URL_KEY = "goalx"


def share_message() -> str:
    return (
        "Stay organized and achieve your goals!\n"
        "Add tasks, mark them as completed, and sort them into categories: "
        "Important, Urgent, Someday, or Goals.\n"
        "Manage everything with simple swipes and drag & drop.\n"
        "Download the app now:\n"
        f"{APP_URL}"
    )


def share_items() -> tuple[str, str]:
    return share_message(), APP_URL
