"""A renderer that drives a remote dialog host over a WebSocket."""

from __future__ import annotations

import asyncio
import contextlib
import itertools
import json
import logging
import queue
import threading
from typing import Any, Callable

import websockets
from websockets.exceptions import ConnectionClosed

from .render import Component, ComponentTypeError, Renderer

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8081

_ids = itertools.count(1)
_ids_lock = threading.Lock()


def _next_id() -> int:
    with _ids_lock:
        return next(_ids)


def _encode(message: dict[str, Any]) -> str:
    """Encode compactly, with sorted data keys and HTML-safe escapes."""
    data = message.get("data")
    if isinstance(data, dict):
        message = {**message, "data": dict(sorted(data.items()))}
    text = json.dumps(message, separators=(",", ":"), ensure_ascii=False)
    for char, escape in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escape)
    return text


class AsepriteComponent(Component):
    """A dialog or widget shown by the remote host."""

    def __init__(self, name: str, component_id: int) -> None:
        self._name = name
        self.id = component_id
        self._comps: list[Component] = []
        self._attrs: dict[str, Any] = {}
        self.renderer: AsepriteRenderer | None = None

    def set_attribute(self, key: str, val: Any) -> None:
        self._attrs[key] = val
        if self.renderer is not None:
            self.renderer._set_attribute(self, key, val)

    def name(self) -> str:
        return self._name

    def children(self) -> list[Component]:
        return self._comps

    def attributes(self) -> dict[str, Any]:
        return self._attrs


class AsepriteRenderer(Renderer):
    """Turns components into JSON messages queued in ``outbox``.

    ``serve`` delivers the queued messages to the connected host and feeds
    its events back through ``handle_message``.
    """

    def __init__(self) -> None:
        self.outbox: queue.SimpleQueue[str] = queue.SimpleQueue()
        self.events: dict[str, Callable[[], object]] = {}
        self.connected = threading.Event()
        self._wakeup: Callable[[], object] | None = None

    def _send(self, message: dict[str, Any]) -> None:
        self.outbox.put(_encode(message))
        wakeup = self._wakeup
        if wakeup is not None:
            wakeup()

    def new_component(self, name: str) -> AsepriteComponent:
        return AsepriteComponent(name, _next_id())

    def render(self, *args: Component) -> None:
        for comp in args:
            if not isinstance(comp, AsepriteComponent):
                raise ComponentTypeError("invalid comp type")
            self._create_element(comp)

    def _create_element(self, comp: AsepriteComponent) -> None:
        attrs = comp.attributes()
        if comp.name() == "dialog":
            self._send(
                {
                    "method": "create",
                    "id": comp.id,
                    "type": comp.name(),
                    "data": {"title": attrs.get("title"), "notitlebar": False},
                }
            )
            self._send(
                {
                    "method": "action",
                    "id": comp.id,
                    "type": comp.name(),
                    "data": None,
                    "action": "show",
                }
            )
        elif comp.name() == "button":
            if "on:click" in attrs:
                handler = attrs["on:click"]
                if not callable(handler):
                    raise TypeError("only func allowed for eventlisteners")
                self.events[f"{comp.id}:click"] = handler
            self._send(
                {
                    "method": "create",
                    "id": comp.id,
                    "type": comp.name(),
                    "data": {
                        "dialogId": 1,
                        "text": attrs.get("text"),
                        "label": attrs.get("label"),
                    },
                }
            )
        else:
            raise ValueError(f"unsupported component type: {comp.name()}")

        for child in comp.children():
            if not isinstance(child, AsepriteComponent):
                raise ComponentTypeError("invalid comp type")
            self._create_element(child)

        comp.renderer = self

    def _set_attribute(self, comp: AsepriteComponent, key: str, val: Any) -> None:
        if comp.name() == "button":
            self._send(
                {"method": "update", "id": comp.id, "type": comp.name(), "data": {key: val}}
            )

    def append(self, parent: Component, child: Component) -> None:
        if not isinstance(parent, AsepriteComponent):
            raise ComponentTypeError("invalid parent comp type")
        if not isinstance(child, AsepriteComponent):
            raise ComponentTypeError("invalid child comp type")
        parent.children().append(child)

    def handle_message(self, raw: str | bytes) -> bool:
        """Dispatch an event from the host; return whether a handler ran."""
        logger.debug("received %r", raw)
        try:
            event = json.loads(raw)
        except (ValueError, TypeError) as exc:
            logger.warning("malformed event: %s", exc)
            return False
        if not isinstance(event, dict):
            logger.warning("malformed event: not an object")
            return False
        event_id = event.get("id")
        name = event.get("event")
        event_id = 0 if event_id is None else event_id
        name = "" if name is None else name
        if (
            not isinstance(event_id, int)
            or isinstance(event_id, bool)
            or not 0 <= event_id < 2**32
            or not isinstance(name, str)
        ):
            logger.warning("malformed event: bad id or event name")
            return False
        handler = self.events.get(f"{event_id}:{name}")
        if handler is None:
            return False
        handler()
        return True


async def _handle_connection(renderer: AsepriteRenderer, websocket: Any) -> None:
    loop = asyncio.get_running_loop()
    wake = asyncio.Event()
    renderer._wakeup = lambda: loop.call_soon_threadsafe(wake.set)
    logger.info("connected")
    renderer.connected.set()

    async def writer() -> None:
        while True:
            wake.clear()
            while True:
                try:
                    message = renderer.outbox.get_nowait()
                except queue.Empty:
                    break
                logger.debug("writing %s", message)
                try:
                    await websocket.send(message)
                except ConnectionClosed as exc:
                    logger.info("write failed: %s", exc)
                    return
            await wake.wait()

    task = asyncio.create_task(writer())
    try:
        async for message in websocket:
            renderer.handle_message(message)
    except ConnectionClosed as exc:
        logger.info("connection closed: %s", exc)
    finally:
        renderer._wakeup = None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task


async def serve(
    renderer: AsepriteRenderer, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> None:
    """Accept host connections and keep serving until cancelled."""

    async def handler(websocket: Any) -> None:
        await _handle_connection(renderer, websocket)

    logger.info("running")
    async with websockets.serve(handler, host, port):
        await asyncio.Future()