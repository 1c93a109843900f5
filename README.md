# reactui

A small reactive UI toolkit. State is held in `Signal` objects, and effects run each
time a signal is set. Components are created through a `Renderer`, and the renderer
decides how they are shown.

## Installation

```
pip install reactui
```

To install the test dependencies as well:

```
pip install "reactui[test]"
```

## Signals (`reactui.signal`)

```python
from reactui.signal import Signal

counter = Signal(0)
counter.effect(lambda: print("counter is now", counter.value()))
counter.set(counter.value() + 1)   # prints "counter is now 1"
```

- `Signal(value)` holds a value. `value()` returns it.
- `set(val)` stores the new value. It then calls `update(val)` on every dependency, in
  the order the dependencies were added. This happens on every set, even when the
  value has not changed.
- `effect(f)` registers a callback that takes no arguments. It runs after every set.
- `add_dependency(dep)` registers any `Dependency`, which is an object with an
  `update(val)` method. A `Signal` is itself a `Dependency`, and its `update` calls
  `set`. One signal can therefore feed another.
- `EffectFunc(func)` is the dependency that `effect` creates. Its `update` calls
  `func()` and ignores the value.

## Renderers and components (`reactui.render`)

`reactui.render` defines two abstract interfaces:

- `Component`, with `name()`, `attributes()`, `children()` and
  `set_attribute(key, val)`.
- `Renderer`, with `new_component(name)`, `render(*components)` and
  `append(parent, child)`.

A renderer raises `ComponentTypeError`, a subclass of `TypeError`, when it is given a
component that it did not create. By convention, an attribute whose key starts with
`on:` holds an event handler that takes no arguments, such as `on:click`. An attribute
whose key starts with `bind:` holds a callback that receives a new value.

## The Aseprite renderer (`reactui.aseprite`)

`AsepriteRenderer` turns components into compact JSON messages and places them in its
`outbox` queue.

- Only `dialog` and `button` components can be rendered. Any other name raises
  `ValueError`.
- Rendering a `dialog` queues a `create` message that carries the `title` attribute.
  It then queues an `action` message with `"action": "show"`.
- Rendering a `button` queues a `create` message that carries `dialogId` 1 and the
  `text` and `label` attributes. If the button has an `on:click` attribute, the
  handler is registered for click events. A handler that is not callable raises
  `TypeError`.
- Children added with `append` are created right after their parent, when the parent
  is rendered.
- Once a button has been rendered, each `set_attribute` call on it queues an `update`
  message. Setting an attribute on a dialog after it has been rendered only changes
  the stored value.
- `handle_message(raw)` reads an event object such as `{"id": 3, "event": "click"}`.
  It runs the matching handler and returns `True`, or returns `False` when the event
  is malformed or has no handler.
- Component ids are shared across all renderers and count up from 1.

`serve(renderer, host="127.0.0.1", port=8081)` is a coroutine. It runs a websocket
server until it is cancelled. When a client connects, it sets `renderer.connected`,
a `threading.Event`. It sends the client every queued message, including messages
queued before the client connected, and passes each incoming message to
`handle_message`. Components can be rendered from another thread while the server
runs.

```python
import asyncio
import threading

from reactui.aseprite import AsepriteRenderer, serve

renderer = AsepriteRenderer()

def build_ui():
    renderer.connected.wait()
    dialog = renderer.new_component("dialog")
    dialog.set_attribute("title", "Hello")
    button = renderer.new_component("button")
    button.set_attribute("text", "Click me")
    button.set_attribute("on:click", lambda: print("clicked"))
    renderer.append(dialog, button)
    renderer.render(dialog)

threading.Thread(target=build_ui, daemon=True).start()
asyncio.run(serve(renderer))
```

## Example components (`reactui.components`)

These functions are written against the `Renderer` interface:

- `incrementer(renderer, counter)` renders an "increment" button and a "decrement"
  button that change `counter`. It also renders a `span` that shows the counter's
  value, and a `br`.
- `my_amazing_list(renderer, counter)` renders the following:
  - a `span` that shows the text signal;
  - an `input` bound to the text signal through `bind:value`, which also follows
    `counter`;
  - an "add item" button;
  - a `ul`.

  Clicking the button appends the input's current `value` attribute to the list as a
  new `li` and sets the text to `"Placeholder"`.

## What this package does not include

The package has no command-line program. It also has no renderer for `span`, `input`,
`ul`, `li` or `br` elements, such as a browser DOM renderer. `AsepriteRenderer`
rejects those names with `ValueError`. To display the example components, you need a
`Renderer` of your own that supports them.