# cookbook

A set of small, independent building blocks:

- **Work queues**: `cookbook.conveyor` has `WorkQueue`, a thread-safe FIFO
  of tasks, and `run_conveyor()`, which passes packets through three queues
  (decode, compress, send), each run on its own thread. `run_in_threads()`
  does the same work on two threads that each handle every stage.
- **Containers**: `StaticVector` (fixed capacity, raises `CapacityError`
  when full), `BiMap` (unique left keys, shared right keys), `PersonIndex`
  (people looked up by name or id, listed by name, id, height or weight),
  `SList` (a singly linked list whose node references stay valid) and
  `FlatSet` (a set kept as a sorted list, with `lower_bound()` and `find()`
  that return indices).
- **Text**: `iequals()` for case-insensitive comparison, erase and replace
  helpers in `cookbook.string_algo`, `%N%` positional formatting in
  `cookbook.formatting`, and `between()`.
- **Sequences**: `stringize()` joins the text form of every element;
  `get_arithmetics()` and `get_nonarithmetics()` split a sequence into
  numbers and everything else.
- **Utilities**: directory listing and link creation, built-in greeters, a
  trading simulation that reports the call stack at bankruptcy, a resumable
  `CoroutineTask`, finding a marker byte in a file by memory map or by
  chunks, random numbers from the system's entropy source, float input
  checks, and image negation with Pillow and NumPy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from cookbook.conveyor import WorkQueue, run_conveyor

assert run_conveyor(100) == 100

queue = WorkQueue()
results = []
queue.push_task(lambda: results.append(2 + 2))
queue.stop()     # no new tasks; run() returns once the queue is empty
queue.run()
assert results == [4]
```

```python
from cookbook.case_compare import iequals
from cookbook.between import between
from cookbook.string_algo import erase_all, replace_first

assert iequals("Thanks for reading me!", "Thanks for reading ME!")
assert between("Getting expression (between brackets)", "(", ")") == "between brackets"
assert erase_all("Hello, hello, dear Reader.", ",") == "Hello hello dear Reader."
assert replace_first("Hello, hello, dear Reader.", ",", "!") == "Hello! hello, dear Reader."
```

```python
from cookbook.formatting import Internals, TooFewArgsError

assert Internals().to_string("%2%") == "Reader"
try:
    Internals().to_string("%1% %2% %3% %4%")
except TooFewArgsError:
    pass
```

```python
from cookbook.bimap import BiMap

names = BiMap()
names.insert("John Snow", 1)
names.insert("Vasya Pupkin", 2)
assert names.find_left("John Snow") == 1
assert names.find_right(2) == "Vasya Pupkin"
```

```python
from cookbook.stringize import Cat, stringize, get_arithmetics

assert stringize((Cat(), 0, "_0")) == "Meow! 0_0"
assert get_arithmetics((8, None, None, 0.0)) == (8, 0.0)
```

```python
from cookbook.coroutine import CoroutineTask

task = CoroutineTask()
assert len(task.run(10)) == 10
assert len(task.run(5)) == 15
```

## Commands

| Command | What it does |
| --- | --- |
| `cookbook-listing [PATH] [--make-link]` | Lists a directory with entry kinds and owner write permission; `--make-link` first creates `dir/subdir/file.txt` and a `symlink` to it |
| `cookbook-greet PLUGIN` | Greets "Sally Sparrow" with the greeter `plugin_hello` or `plugin_do_not` (a library-style path such as `libplugin_hello.so` also works) |
| `cookbook-trading [--money N]` | Runs the trading simulation until it goes bankrupt and prints the call stack |
| `cookbook-file-reading MODE [--file F] [--size N]` | `c` creates the test file; `m` finds its marker byte with a memory map; `r` and `a` find it by reading chunks |
| `cookbook-negate PATH` | Writes `negate_<name>` as the negative of an 8-bit gray, 16-bit gray or RGB image |

## What it does not do

The package has no event loop, timer or signal-driven task scheduler: the
only task running it offers is the `WorkQueue` in `cookbook.conveyor`. It
has no networking (no TCP client or listener), no interactive regular
expression tool, no sentence splitter, no graph type and no hashed string
type.