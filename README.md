# patterndemos

Small, self-contained demonstrations of two classic object-oriented design
patterns:

- **Factory Method**, shown twice:
  - dialogs that build their own kind of button (window or HTML), in
    `patterndemos.dialogs`;
  - a generic creator/product skeleton, in `patterndemos.creators`.
- **Singleton**, guarded by a lock so that only one instance is ever created,
  in `patterndemos.singleton`.

Each object writes one line for every step it takes to a text stream. You can
pass that stream in, or leave it out to write to standard output. This lets
you watch the pattern at work, or capture the narration and inspect it.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and then run pytest:

```
pip install ".[test]"
pytest
```

## The command

The package installs one command:

```
patterndemos [dialog|factory|singleton|all] [--log PATH]
```

- The positional argument picks the demonstration to run. It defaults to
  `all`, which runs the dialog, factory and singleton demonstrations in that
  order.
- `--log PATH` names the file the narration is written to. It defaults to
  `logs/output.log`. The file is overwritten.

Nothing is printed to standard output. If the log file cannot be opened (for
example, because the `logs` directory does not exist), the command prints
`failed to open output log file.` to standard error and exits with status 1.
The command does not create missing directories.

## Using it from Python

You can run each demonstration against any writable text stream:

```python
import io

from patterndemos.demos import run_dialog_demo, run_factory_demo, run_singleton_demo

out = io.StringIO()
run_factory_demo(out)
print(out.getvalue())
```

You can also use the building blocks directly:

```python
import io

from patterndemos.creators import create_creator_client
from patterndemos.dialogs import DialogType, create_dialog_client
from patterndemos.singleton import Singleton

out = io.StringIO()

create_creator_client(1, out).action()        # Creator1 makes a Product1
create_dialog_client(DialogType.HTML, out).action()

first = Singleton.get_instance("client1", out)
second = Singleton.get_instance("client2", out)
assert first is second and first.value == "client1"
first.do_some_task()

Singleton.reset()
```

### What each module provides

- `patterndemos.dialogs`: `Button`, `WindowButton`, `HTMLButton`; `Dialog`,
  `WindowDialog`, `HTMLDialog`; the `DialogType` enum (`WINDOW`, `HTML`, `END`);
  `DialogClient` and `create_dialog_client(kind, out=None)`.
  `create_dialog_client` raises `ValueError` for `DialogType.END`, or for
  anything else that has no dialog. A plain `Dialog` creates no button, so
  `Dialog.render()` raises `RuntimeError`.
- `patterndemos.creators`: `Product`, `Product1`, `Product2`; `Creator`,
  `Creator1`, `Creator2`; `CreatorClient` and
  `create_creator_client(kind, out=None)`, which accepts `1` or `2` and raises
  `ValueError` for any other value. `Creator.do_something()` and
  `CreatorClient.action()` return the product they used. A plain `Creator` makes
  no product, so `do_something()` raises `RuntimeError`.
- `patterndemos.singleton`: `Singleton` and `SingletonClient`. Get the
  instance with `Singleton.get_instance(value, out=None)`; calling
  `Singleton(...)` directly, or copying the instance, raises `TypeError`.
  `Singleton.reset()` drops the shared instance, so the next call to
  `get_instance` creates a new one. It is mainly useful in tests.
  `run_singleton_demo` calls it before it starts.
- `patterndemos.demos`: `run_dialog_demo`, `run_factory_demo`,
  `run_singleton_demo` and `main(argv=None)`, the function behind the command.