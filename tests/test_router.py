from __future__ import annotations

from goalx.domain.entities import TaskRecord
from goalx.domain.enums import Category, RouteKind
from goalx.domain.routes import Route
from goalx.services.router import ONBOARDING_SEEN_KEY, AppRouter

from fakes import FakePreferences


def test_initial_route_is_loading() -> None:
    assert AppRouter(FakePreferences()).route == Route.loading()


def test_start_without_flag_goes_to_onboarding() -> None:
    router = AppRouter(FakePreferences())

    router.start()

    assert router.route.kind == RouteKind.ONBOARDING


def test_start_with_flag_goes_to_list() -> None:
    router = AppRouter(FakePreferences({ONBOARDING_SEEN_KEY: "true"}))

    router.start()

    assert router.route.kind == RouteKind.LIST


def test_complete_onboarding_persists_flag_for_next_launch(prefs) -> None:
    router = AppRouter(prefs)
    router.start()

    router.complete_onboarding()

    assert router.route.kind == RouteKind.LIST
    assert prefs.get(ONBOARDING_SEEN_KEY) == "true"

    fresh = AppRouter(prefs)
    fresh.start()
    assert fresh.route.kind == RouteKind.LIST


def test_any_route_can_follow_any_other() -> None:
    router = AppRouter(FakePreferences())
    task = TaskRecord(name="Plan trip", note="", category=Category.GOALS)
    seen: list[Route] = []
    router.subscribe(seen.append)

    router.open_task_details(task)
    router.open_settings()
    router.open_edit_task(task)
    router.open_add_task()
    router.open_menu()

    assert [route.kind for route in seen] == [
        RouteKind.DETAILS,
        RouteKind.SETTINGS,
        RouteKind.EDIT,
        RouteKind.ADD,
        RouteKind.LIST,
    ]
    assert seen[0].task == task
    assert seen[0].key == f"details-{task.id}"
    assert router.route == Route.task_list()
