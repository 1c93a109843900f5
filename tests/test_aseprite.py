import json
import queue

import pytest

from reactui.aseprite import AsepriteComponent, AsepriteRenderer
from reactui.render import Component, ComponentTypeError


def drain(renderer):
    out = []
    while True:
        try:
            out.append(renderer.outbox.get_nowait())
        except queue.Empty:
            return out


class Foreign(Component):
    def name(self):
        return "button"

    def attributes(self):
        return {}

    def set_attribute(self, key, val):
        pass

    def children(self):
        return []


def test_new_component_ids_are_unique_and_increasing():
    renderer = AsepriteRenderer()
    a = renderer.new_component("button")
    b = renderer.new_component("button")
    assert b.id > a.id
    assert a.name() == "button"
    assert a.children() == []
    assert a.attributes() == {}


def test_dialog_sends_create_then_show():
    renderer = AsepriteRenderer()
    dialog = renderer.new_component("dialog")
    dialog.set_attribute("title", "Tools")
    renderer.render(dialog)
    create, show = drain(renderer)
    assert create == (
        f'{{"method":"create","id":{dialog.id},"type":"dialog",'
        f'"data":{{"notitlebar":false,"title":"Tools"}}}}'
    )
    assert show == (
        f'{{"method":"action","id":{dialog.id},"type":"dialog",'
        f'"data":null,"action":"show"}}'
    )


def test_button_create_message_and_click_registration():
    renderer = AsepriteRenderer()
    clicks = []
    button = renderer.new_component("button")
    button.set_attribute("text", "Go")
    button.set_attribute("on:click", lambda: clicks.append(1))
    renderer.render(button)
    (msg,) = drain(renderer)
    assert msg == (
        f'{{"method":"create","id":{button.id},"type":"button",'
        f'"data":{{"dialogId":1,"label":null,"text":"Go"}}}}'
    )
    assert renderer.handle_message(json.dumps({"id": button.id, "event": "click"}))
    assert clicks == [1]


def test_children_are_created_after_parent():
    renderer = AsepriteRenderer()
    dialog = renderer.new_component("dialog")
    button = renderer.new_component("button")
    renderer.append(dialog, button)
    renderer.render(dialog)
    messages = [json.loads(m) for m in drain(renderer)]
    assert [(m["method"], m["id"]) for m in messages] == [
        ("create", dialog.id),
        ("action", dialog.id),
        ("create", button.id),
    ]
    assert button.renderer is renderer


def test_set_attribute_before_render_sends_nothing():
    renderer = AsepriteRenderer()
    button = renderer.new_component("button")
    button.set_attribute("text", "a")
    assert drain(renderer) == []
    assert button.attributes() == {"text": "a"}


def test_set_attribute_after_render_sends_update_for_buttons():
    renderer = AsepriteRenderer()
    button = renderer.new_component("button")
    renderer.render(button)
    drain(renderer)
    button.set_attribute("text", "b")
    (msg,) = drain(renderer)
    assert json.loads(msg) == {
        "method": "update",
        "id": button.id,
        "type": "button",
        "data": {"text": "b"},
    }


def test_set_attribute_on_dialog_after_render_sends_nothing():
    renderer = AsepriteRenderer()
    dialog = renderer.new_component("dialog")
    renderer.render(dialog)
    drain(renderer)
    dialog.set_attribute("title", "New")
    assert drain(renderer) == []
    assert dialog.attributes()["title"] == "New"


def test_html_characters_are_escaped():
    renderer = AsepriteRenderer()
    dialog = renderer.new_component("dialog")
    dialog.set_attribute("title", "<a&b>")
    renderer.render(dialog)
    create = drain(renderer)[0]
    assert "\\u003ca\\u0026b\\u003e" in create
    assert json.loads(create)["data"]["title"] == "<a&b>"


def test_unsupported_component_raises():
    renderer = AsepriteRenderer()
    with pytest.raises(ValueError):
        renderer.render(renderer.new_component("slider"))


def test_non_callable_click_handler_raises():
    renderer = AsepriteRenderer()
    button = renderer.new_component("button")
    button.set_attribute("on:click", "nope")
    with pytest.raises(TypeError):
        renderer.render(button)


def test_foreign_components_are_rejected():
    renderer = AsepriteRenderer()
    with pytest.raises(ComponentTypeError):
        renderer.render(Foreign())
    own = renderer.new_component("dialog")
    with pytest.raises(ComponentTypeError):
        renderer.append(own, Foreign())
    with pytest.raises(ComponentTypeError):
        renderer.append(Foreign(), own)


def test_handle_message_ignores_bad_and_unknown_events():
    renderer = AsepriteRenderer()
    assert renderer.handle_message("not json") is False
    assert renderer.handle_message("[1, 2]") is False
    assert renderer.handle_message('{"id": -1, "event": "click"}') is False
    assert renderer.handle_message('{"id": 99999, "event": "click"}') is False


def test_handle_message_accepts_bytes():
    renderer = AsepriteRenderer()
    calls = []
    comp = AsepriteComponent("button", 7)
    comp.set_attribute("on:click", lambda: calls.append("hit"))
    renderer.render(comp)
    assert renderer.handle_message(b'{"id": 7, "event": "click", "data": {"x": 1}}')
    assert calls == ["hit"]