from __future__ import annotations

import pytest

from storefront import create_app
from storefront.extensions import db
from storefront.layout.editor import LayoutEditor
from storefront.layout.storage import MemoryStorage
from storefront.layout.store import LayoutStore


class FakeTimer:
    """Stands in for threading.Timer; fires only when the test says so."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False
        self.finished = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if self.cancelled or self.finished:
            return
        self.finished = True
        self.function(*self.args, **self.kwargs)


class TimerFactory:
    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args=args, kwargs=kwargs)
        self.timers.append(timer)
        return timer

    @property
    def live(self) -> list[FakeTimer]:
        return [t for t in self.timers if not (t.cancelled or t.finished)]


@pytest.fixture()
def timer_factory() -> TimerFactory:
    return TimerFactory()


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def store(storage) -> LayoutStore:
    return LayoutStore(storage)


@pytest.fixture()
def editor(store, timer_factory) -> LayoutEditor:
    return LayoutEditor(store, autosave_delay=1.0, timer_factory=timer_factory)


@pytest.fixture()
def make_section():
    def factory(section_id, section_type="text", order=0, **extra):
        section = {
            "id": section_id,
            "type": section_type,
            "title": extra.pop("title", section_id.title()),
            "enabled": extra.pop("enabled", True),
            "order": order,
            "settings": extra.pop("settings", {"title": f"{section_id} heading"}),
            "animations": extra.pop(
                "animations", {"entrance": "fadeIn", "duration": 600, "delay": 0}
            ),
        }
        section.update(extra)
        return section

    return factory


@pytest.fixture()
def three_sections(store, make_section):
    store.replace_all([
        make_section("one", "hero", 0),
        make_section("two", "featured", 1),
        make_section("three", "categories", 2),
    ])
    return store


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store_headers():
    return {"X-Store-ID": "demo-store"}
