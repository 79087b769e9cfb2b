"""Tests for perch.testing — RecordingView and mount assertions."""

import pytest

from perch.router import Router
from perch.testing import RecordingView, assert_mounted, assert_nothing_mounted
from perch.views.view import View


@pytest.fixture(autouse=True)
def _reset_views() -> None:
    RecordingView.reset()


class TestRecordingView:
    def test_records_lifecycle(self) -> None:
        router = Router()
        router.add("/a", view_factory=RecordingView)
        router.add("/b", lambda loc: None)
        router.start()

        router.navigate("/a")
        router.navigate("/a", force=True)
        router.navigate("/b")

        [view] = RecordingView.instances
        assert view.hooks == ["route", "attached", "route", "detached", "disposed"]
        assert [loc.path for loc in view.routes] == ["/a", "/a"]
        assert view.dispose_count == 1

    def test_reset(self) -> None:
        RecordingView()
        RecordingView.reset()
        assert RecordingView.instances == []


class TestAssertions:
    def test_assert_mounted_returns_view(self) -> None:
        router = Router()
        router.add("/a", view_factory=RecordingView)
        router.start()
        router.navigate("/a")

        assert assert_mounted(router, RecordingView) is RecordingView.instances[0]

    def test_assert_mounted_wrong_type(self) -> None:
        class Other(View):
            pass

        router = Router()
        router.add("/a", view_factory=RecordingView)
        router.start()
        router.navigate("/a")

        with pytest.raises(AssertionError, match="Expected a Other"):
            assert_mounted(router, Other)

    def test_assert_mounted_empty(self) -> None:
        with pytest.raises(AssertionError, match="Expected one mounted view"):
            assert_mounted(Router())

    def test_assert_nothing_mounted(self) -> None:
        router = Router()
        router.add("/a", view_factory=RecordingView)
        assert_nothing_mounted(router)
        router.start()
        router.navigate("/a")
        with pytest.raises(AssertionError):
            assert_nothing_mounted(router)
