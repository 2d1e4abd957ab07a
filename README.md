# workbench

A handful of small, self-contained programs collected in one package. It has
no dependencies beyond the standard library.

- `workbench.sorting`: bubble, selection, insertion, quick and merge sort,
  each sorting a mutable sequence in place.
- `workbench.minigrep`: print the lines of a file that contain a query.
- `workbench.samples`: tiny printing and formatting helpers.
- `workbench.threadpool`: a fixed-size pool of worker threads.
- `workbench.protocol`, `workbench.serializer`, `workbench.service`,
  `workbench.server_handler`, `workbench.server`: a minimal HTTP server that
  answers JSON requests on that thread pool.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sorting

```python
from workbench.sorting import Sorters

sorter = Sorters.QUICK_SORT.new()
items = [2, 3, 1]
sorter.sort(items)
assert items == [1, 2, 3]
```

Each member of `Sorters` (`BUBBLE_SORT`, `SELECTION_SORT`, `INSERTION_SORT`,
`QUICK_SORT`, `MERGE_SORT`) returns a shared `Sorter` from `new()`. The
sorter classes (`BubbleSorter`, `SelectionSorter`, `InsertionSorter`,
`QuickSorter`, `MergeSorter`) can also be used directly. `MergeSorter` is
stable. `swap(items, i, j)` exchanges two elements in place.

## minigrep

```
workbench-minigrep QUERY FILE
```

Prints the search being made and the whole file, then `The grep result:`
followed by every line that contains `QUERY`. With fewer than two arguments
it prints `args length < 3` and exits with status 1. If the file cannot be
read it reports the error on standard error and exits with status 1.

From Python:

```python
from workbench.minigrep import Config, grep, run

grep("duct", "Rust:\nsafe, fast, productive.\nPick three.")
# ['safe, fast, productive.']

Config.from_args(["minigrep", "duct", "poem.txt"])
# Config(query='duct', file_name='poem.txt')
```

`run(args)` takes a full argument list whose first item is the program name
and returns the matching lines; it raises `ValueError` when there are too few
arguments.

## Samples

```
workbench-hello
workbench-show
```

`workbench-hello` prints a short series of greetings (`say_hello`,
`say_hello_2`, `say_ok`, `say_mod32`); `workbench-show` prints
`Hello, world!` and then `show: Ok` and `show: 99`. Each helper also returns
what it printed.

`format_list([1, 2, 3])` returns `"[ 1, 2, 3 ]"`, and
`str(TestData(1, "Hello"))` is `"(1, Hello)"`.

## Thread pool

```python
from workbench.threadpool import ThreadPool

with ThreadPool(4) as pool:
    pool.execute(lambda: print("job"))
```

Jobs run in submission order on the free workers. A job that raises is
reported on standard error and the worker carries on. `shutdown()` (called on
leaving the `with` block) lets queued jobs finish and joins the workers;
`execute` after that raises `RuntimeError`.

## Web server

```
workbench-server [--host HOST] [--port PORT]
```

Listens on `localhost:8080` by default. The body of each HTTP request (what
follows the first blank line) is read as JSON of the form `{"name": "..."}`;
an empty body means `{"name": "World"}`. The reply is a `200 OK` with a
`Content-Length` header and the body `{"welcome": "Hello, <name>!"}`:

```
$ curl -d '{"name": "Alice"}' http://localhost:8080/
{"welcome":"Hello, Alice!"}
```

If the body is not valid UTF-8 or not a JSON object with a string `name`, the
connection is closed without a reply. If the address cannot be bound the
command prints `Server error: ...` and exits with status 1.

The pieces can be put together by hand:

```python
from workbench.protocol import HttpProtocol
from workbench.serializer import JsonSerializer
from workbench.server import WebServer
from workbench.server_handler import WebServerHandler
from workbench.service import MyRequestHandler

handler = WebServerHandler(HttpProtocol(), JsonSerializer(), MyRequestHandler())
with WebServer("localhost", 8080, handler, pool_size=4, max_accepts=6) as server:
    server.start()
```

`JsonSerializer().serialize(value)` writes compact JSON from a dataclass or
plain data; `deserialize(text, cls)` builds a dataclass from JSON, checking
field presence and basic types, and raises `ValueError` on bad input.

### What the server does not do

It serves a fixed number of connections (six by default) and then stops. It
does not look at the request method, path or headers, sends no status other
than `200 OK`, sets no `Content-Type`, and handles one request per connection.