import json
from typing import List, Tuple

import docthread.common
from docthread.common import MessageBus
from docthread.needle import L, Needle
from docthread.test_utils import SpyBus


class ListRenderer:
    def __init__(self):
        self.lines: List[Tuple[str, str]] = []

    def render(self, message: str, level: str) -> None:
        self.lines.append((level, message))


def _make_bus(tmp_path, templates):
    catalog = tmp_path / "needle" / "en" / "messages.json"
    catalog.parent.mkdir(parents=True)
    catalog.write_text(json.dumps(templates), encoding="utf-8")

    renderer = ListRenderer()
    bus = MessageBus(Needle(roots=[tmp_path]))
    bus.set_renderer(renderer)
    return bus, renderer


def test_bus_formats_and_forwards_to_renderer(tmp_path):
    bus, renderer = _make_bus(tmp_path, {"greeting": "Hello {name}"})

    bus.success(L.greeting, name="World")
    bus.error(L.greeting, name="Docs")

    assert renderer.lines == [("success", "Hello World"), ("error", "Hello Docs")]


def test_bus_identity_fallback(tmp_path):
    bus, renderer = _make_bus(tmp_path, {})
    bus.debug(L.nonexistent.key)
    assert renderer.lines == [("debug", "nonexistent.key")]


def test_bus_reports_formatting_errors(tmp_path):
    bus, renderer = _make_bus(tmp_path, {"greeting": "Hello {name}"})
    bus.success(L.greeting)
    assert renderer.lines == [("success", "<formatting_error for 'greeting'>")]


def test_bus_without_renderer_is_silent(tmp_path):
    MessageBus(Needle(roots=[tmp_path])).error("some.id")


def test_global_bus_uses_packaged_catalog():
    renderer = ListRenderer()
    bus = MessageBus(docthread.common.bus.catalog)
    bus.set_renderer(renderer)

    bus.error(L.cli.error.format, format="xml")

    assert renderer.lines == [
        ("error", "Unknown output format 'xml'. Use 'yaml' or 'json'.")
    ]


def test_spy_bus_captures_intent(monkeypatch):
    spy_bus = SpyBus()

    with spy_bus.patch(monkeypatch):
        docthread.common.bus.success(L.cli.strip.done, path="a.js", output="b.js")
        docthread.common.bus.debug(L.cli.links.summary, count=0, path="b.md")

    assert spy_bus.get_messages() == [
        {
            "level": "success",
            "id": "cli.strip.done",
            "params": {"path": "a.js", "output": "b.js"},
        },
        {"level": "debug", "id": "cli.links.summary", "params": {"count": 0, "path": "b.md"}},
    ]
    spy_bus.assert_id_called(L.cli.strip.done, level="success")
    spy_bus.assert_id_not_called(L.cli.parse.summary)
