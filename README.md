# labworks

Small, self-contained exercises in how programs meet the machine: linked
lists with cycle detection, a vector that grows on demand, matrix
multiplication in every loop ordering, naive and cache-blocked
transposition, plain, unrolled and lane-wise summation, vector addition and
dot products split across threads, a 24-bit BMP reader/writer, and helpers
for parsing HTTP/1.0 request lines and writing responses.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Linked lists (`labworks.llist`)

`Node` holds a `value` and a `next` link. `append_node(head, value)` and
`reverse_list(head)` return the (possibly new) head, `list_size(head)`
counts the nodes, and `has_cycle(head)` runs the tortoise-and-hare check.

```python
from labworks.llist import append_node, reverse_list, list_size

head = None
for value in range(1, 4):
    head = append_node(head, value)
head = reverse_list(head)
head.value        # 3
list_size(head)   # 3
```

### Vector (`labworks.vector`)

`Vector` starts with a single zero component; reading past its size gives 0
and setting past it grows the storage. Negative locations raise
`IndexError`.

```python
from labworks.vector import Vector

v = Vector()
v.set(500, 3)
v.get(500)   # 3
v.get(501)   # 0
```

### Matrices (`labworks.matmul`, `labworks.transpose`)

`mult_mat(n, a, b, c, order)` returns `c + a·b` for column-major flat lists,
looping in one of the orders in `ORDERINGS` (`"ijk"`, `"ikj"`, `"jik"`,
`"jki"`, `"kij"`, `"kji"`). `benchmark_orderings(n, seed)` times all six and
returns `OrderingTiming` records with Gflop/s.

`transpose_naive(n, blocksize, src)` and `transpose_blocking(n, blocksize, src)`
return the transpose of a flat `n`×`n` list; the blocked version walks it in
square tiles and does not need `n` to be a multiple of `blocksize`.
`benchmark(n, blocksize, transpose, description)` checks a transpose function
on random data and returns the elapsed milliseconds, raising `RuntimeError`
if the answer is wrong.

### Sums (`labworks.sums`)

`sum_plain`, `sum_unrolled`, `sum_simd` and `sum_simd_unrolled` all add up
the elements that are at least 128, `iterations` times over, and must agree.

### Threaded vector work (`labworks.vadd`, `labworks.dotp`)

`v_add_naive`, `v_add_optimized_adjacent` and `v_add_optimized_chunks` add
two lists using a given number of threads; `verify` compares any of them
with a plain element-wise sum. `parallel_hello(threads)` returns one greeting
per thread.

`dotp_naive`, `dotp_manual_optimized` and `dotp_reduction_optimized` compute
dot products with a lock per product, a lock per thread, and a final
reduction respectively. `compute_dotp(arr_size, repeat, max_threads)`
returns a text timing report and stops with `Incorrect result!` if a variant
differs from the serial sum by more than 0.001.

### BMP images (`labworks.bmp`)

`BmpImage.read(path)` loads a 24-bit uncompressed BMP and `write(path)` saves
one; `BmpImage.new(width, height)` makes a black image. `BmpHeader` packs and
unpacks the header, `BmpPixel` holds `red`, `green`, `blue`, and
`get_padding(width)` gives the padding bytes after each row. Bad or
truncated files raise `BmpError`.

```python
from labworks.bmp import BmpImage

image = BmpImage.read("picture.bmp")
image.write("copy.bmp")
```

### HTTP helpers (`labworks.http`)

```python
from labworks.http import mime_type, parse_request, response_message

mime_type("photo.bmp")                      # "image/bmp"
response_message(404)                       # "Error 404: Not Found"
parse_request(b"GET /index.html HTTP/1.0\r\n").path   # "/index.html"
```

`parse_request` raises `HttpParseError` for a malformed request line.
`start_response`, `send_header`, `end_headers`, `send_string` and
`send_data` write a response to any binary stream.

## Commands

| Command | What it does |
| --- | --- |
| `labworks-greetings eccentric [--v0 N --v1 N --v2 N --v3 N]` | Prints the eccentrics report for the four values (each defaults to 3). |
| `labworks-greetings hello` | Prints the farewell message. |
| `labworks-greetings interactive` | Reads a name from standard input and greets it. |
| `labworks-greetings ex2` | Prints the sum of `fun` over the built-in numbers. |
| `labworks-matmul [-n N] [--seed S]` | Times the six loop orderings and reports Gflop/s (n defaults to 1000). |
| `labworks-transpose <n> <blocksize>` | Times naive and blocked transposition of an n×n matrix and checks the result. |
| `labworks-sums [--iterations N] [--seed S]` | Runs the four summation variants on a random array and reports any mismatch. |
| `labworks-vadd [--size N] [--repeat N] [--max-threads N] [--seed S] [--hello]` | Times vector addition across thread counts and verifies it; `--hello` only greets from each thread. |
| `labworks-dotp [--size N] [--repeat N] [--max-threads N]` | Prints the dot-product timing report. |

## What this package does not do

It has no single-bit get/set/flip helpers and no shift-register generator.
It reads and writes BMP files but does not run an edge-detection filter over
them. The HTTP module only parses request lines and writes responses to a
stream you provide: there is no server that listens on a port or serves
files.