"""Tests for perch.host and perch.locators."""

from perch.host import HASHCHANGE, POPSTATE, Host
from perch.location import RedirectEvent
from perch.locators import LOCATORS, REDIRECT, HashLocator, HTML5Locator


def _record(locator: HashLocator | HTML5Locator) -> list[RedirectEvent]:
    events: list[RedirectEvent] = []
    locator.on(REDIRECT, events.append)
    return events


class TestHost:
    def test_initial(self) -> None:
        host = Host("/app?x=1#/list")
        assert host.path == "/app?x=1"
        assert host.hash == "/list"
        assert host.history == ("/app?x=1#/list",)

    def test_push_state_is_silent(self) -> None:
        host = Host()
        fired: list[str] = []
        host.add_listener(POPSTATE, lambda: fired.append("pop"))
        host.push_state("/a")
        assert host.url == "/a"
        assert fired == []

    def test_push_drops_forward_entries(self) -> None:
        host = Host()
        host.push_state("/a")
        host.push_state("/b")
        host.back()
        host.push_state("/c")
        assert host.history == ("/", "/a", "/c")

    def test_replace_state(self) -> None:
        host = Host()
        host.replace_state("/x")
        assert host.history == ("/x",)

    def test_set_hash_fires_once(self) -> None:
        host = Host("/app")
        fired: list[str] = []
        host.add_listener(HASHCHANGE, lambda: fired.append(host.hash))
        host.set_hash("#/a")
        host.set_hash("/a")
        assert fired == ["/a"]
        assert host.url == "/app#/a"

    def test_back_forward_events(self) -> None:
        host = Host("/")
        events: list[str] = []
        host.add_listener(POPSTATE, lambda: events.append("pop"))
        host.add_listener(HASHCHANGE, lambda: events.append("hash"))
        host.push_state("/a")
        host.set_hash("/x")
        events.clear()

        host.back()
        assert host.url == "/a"
        assert events == ["pop", "hash"]

        events.clear()
        host.back()
        assert host.url == "/"
        assert events == ["pop"]

        events.clear()
        host.forward()
        assert host.url == "/a"
        assert events == ["pop"]

    def test_go_out_of_range_ignored(self) -> None:
        host = Host()
        fired: list[str] = []
        host.add_listener(POPSTATE, lambda: fired.append("pop"))
        host.back()
        host.go(5)
        assert fired == []

    def test_remove_listener(self) -> None:
        host = Host()
        fired: list[str] = []

        def listener() -> None:
            fired.append("hash")

        host.add_listener(HASHCHANGE, listener)
        host.remove_listener(HASHCHANGE, listener)
        host.remove_listener(HASHCHANGE, listener)
        host.set_hash("/a")
        assert fired == []


class TestHashLocator:
    def test_reads_hash(self) -> None:
        assert HashLocator(Host("/app#/list/shoes")).current == "/list/shoes"
        assert HashLocator(Host("/app")).current == "/"

    def test_redirect_writes_hash_and_fires(self) -> None:
        host = Host("/app")
        locator = HashLocator(host)
        events = _record(locator)
        locator.start()

        locator.redirect("/list/shoes")

        assert host.url == "/app#/list/shoes"
        assert events == [RedirectEvent(url="/list/shoes", referrer="/")]

    def test_unchanged_redirect_is_silent(self) -> None:
        locator = HashLocator(Host("/#/a"))
        events = _record(locator)
        locator.redirect("/a")
        assert events == []

    def test_force_and_silent(self) -> None:
        locator = HashLocator(Host("/#/a"))
        events = _record(locator)
        locator.redirect("/b", silent=True)
        assert events == []
        assert locator.current == "/b"

        locator.redirect("/b", force=True)
        assert events == [RedirectEvent(url="/b", referrer="/a")]

    def test_reload_keeps_referrer(self) -> None:
        locator = HashLocator(Host())
        locator.redirect("/a")
        locator.redirect("/b")
        events = _record(locator)

        locator.reload()

        assert events == [RedirectEvent(url="/b", referrer="/a")]

    def test_reload_does_not_rewrite_location(self) -> None:
        host = Host("/app#list/shoes")
        locator = HashLocator(host)
        events = _record(locator)

        locator.reload()
        locator.reload()

        assert events == [RedirectEvent(url="list/shoes")] * 2
        assert host.history == ("/app#list/shoes",)

    def test_external_hash_change(self) -> None:
        host = Host()
        locator = HashLocator(host)
        events = _record(locator)
        locator.start()

        host.set_hash("/typed")

        assert events == [RedirectEvent(url="/typed", referrer="/")]

    def test_stopped_ignores_host(self) -> None:
        host = Host()
        locator = HashLocator(host)
        events = _record(locator)
        locator.start()
        locator.stop()

        host.set_hash("/typed")

        assert events == []

    def test_start_rereads_host(self) -> None:
        host = Host()
        locator = HashLocator(host)
        host.set_hash("/moved")
        locator.start()
        assert locator.current == "/moved"

    def test_un_removes_all(self) -> None:
        locator = HashLocator(Host())
        events: list[RedirectEvent] = []
        locator.on(REDIRECT, events.append)
        locator.on(REDIRECT, events.append)
        locator.un(REDIRECT, events.append)
        locator.reload()
        assert events == []


class TestHTML5Locator:
    def test_reads_path(self) -> None:
        assert HTML5Locator(Host("/list/shoes?x=1#top")).current == "/list/shoes?x=1"

    def test_redirect_pushes_state(self) -> None:
        host = Host("/")
        locator = HTML5Locator(host)
        events = _record(locator)
        locator.start()

        locator.redirect("/list/shoes")

        assert host.history == ("/", "/list/shoes")
        assert events == [RedirectEvent(url="/list/shoes", referrer="/")]

    def test_popstate(self) -> None:
        host = Host("/")
        locator = HTML5Locator(host)
        locator.start()
        locator.redirect("/a")
        events = _record(locator)

        host.back()

        assert events == [RedirectEvent(url="/", referrer="/a")]


class TestRegistry:
    def test_modes(self) -> None:
        assert LOCATORS == {"hash": HashLocator, "html5": HTML5Locator}
