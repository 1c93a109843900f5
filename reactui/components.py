"""A counter with increment and decrement buttons, and a growing list."""

from __future__ import annotations

from typing import Any

from .render import Renderer
from .signal import Signal


def incrementer(renderer: Renderer, counter: Signal[int]) -> None:
    """Render two buttons that change ``counter`` and a label showing it."""
    inc_btn = renderer.new_component("button")
    inc_btn.set_attribute(
        "class",
        "px-2 py-1 rounded-sm active:bg-sky-600 bg-sky-500 text-white cursor-pointer",
    )
    inc_btn.set_attribute("innerText", "increment")
    inc_btn.set_attribute("on:click", lambda: counter.set(counter.value() + 1))
    renderer.render(inc_btn)

    dec_btn = renderer.new_component("button")
    dec_btn.set_attribute(
        "class",
        "px-2 py-1 rounded-sm active:bg-rose-600 bg-rose-500 text-white cursor-pointer",
    )
    dec_btn.set_attribute("innerText", "decrement")
    dec_btn.set_attribute("on:click", lambda: counter.set(counter.value() - 1))
    renderer.render(dec_btn)

    label = renderer.new_component("span")
    label.set_attribute("innerText", 0)
    counter.effect(lambda: label.set_attribute("innerText", counter.value()))
    renderer.render(label)

    renderer.render(renderer.new_component("br"))


def my_amazing_list(renderer: Renderer, counter: Signal[int]) -> None:
    """Render a text input bound to a label, and a button adding its text to a list."""
    items: Signal[list[str]] = Signal([])
    text: Signal[str] = Signal("")

    label = renderer.new_component("span")
    text.effect(lambda: label.set_attribute("innerText", text.value()))
    renderer.render(label)

    text_input = renderer.new_component("input")
    text_input.set_attribute("type", "text")
    text.effect(lambda: text_input.set_attribute("value", text.value()))

    def bind_value(val: Any) -> None:
        if not isinstance(val, str):
            raise TypeError("not a string")
        text.set(val)

    text_input.set_attribute("bind:value", bind_value)
    counter.effect(lambda: text_input.set_attribute("value", counter.value()))
    renderer.render(text_input)

    def add_item() -> None:
        current = text_input.attributes().get("value", "")
        items.set([*items.value(), str(current)])
        text.set("Placeholder")

    add_btn = renderer.new_component("button")
    add_btn.set_attribute("innerText", "add item")
    add_btn.set_attribute("on:click", add_item)
    renderer.render(add_btn)

    item_list = renderer.new_component("ul")

    def show_last_item() -> None:
        item = renderer.new_component("li")
        item.set_attribute("innerText", items.value()[-1])
        renderer.append(item_list, item)

    items.effect(show_last_item)
    renderer.render(item_list)