# coursekit

A small collection of classic data structures, each paired with a short
program that shows it at work. Nothing beyond the standard library is needed.

## Modules

- `coursekit.stack`: `Stack(capacity=100)`, a bounded LIFO stack with
  `push`, `pop`, `peek`, `is_full`, `is_empty`, `clear` and `len()`.
  Pushing onto a full stack raises `StackFullError` (an `OverflowError`);
  popping or peeking an empty one raises `StackEmptyError` (an `IndexError`).
- `coursekit.alist`: `AList(capacity=5)`, an ordered list with an explicit
  `capacity` (never below 2) that grows by half whenever an insert finds it
  full. It offers `insert_front`, `insert_back`, `insert_at`, and the
  `remove_*`, `retrieve_*` and `update_*` families for the front, back, an
  index or a matching value, plus `smallest`, `display`, `clear`,
  `is_empty` and `is_full`. Bad indexes and empty lists raise `IndexError`;
  values that are not found raise `ValueError`.
- `coursekit.linked_list`: `SortedLinkedList`, kept in ascending order, with
  `insert`, `remove`, `retrieve`, `front`, `rear`, `is_empty` and `display`
  (items joined by `" -> "`).
- `coursekit.queue_list`: `Queue`, an unbounded FIFO queue with `enqueue`,
  `dequeue`, `front`, `rear` and `is_empty`; reading an empty queue raises
  `QueueEmptyError`.
- `coursekit.dllist`: `DLList`, a list kept in order by `insert`, which can
  also be edited with `insert_front`, `insert_rear`, `insert_after`,
  `insert_before`, `remove_front` and `remove_rear`, and walked both ways
  with `iter()` and `reversed()`.
- `coursekit.dyad`: `Dyad(first=0, second=0)`, a pair with `values()` and
  `swap()`.
- `coursekit.messages`: `format_message(msg, symbol, num)` frames a message
  with `num` copies of a one-character symbol on each side.
- `coursekit.maximum`: `find_max(a, b)` and `describe_max(type_name, a, b, largest)`.
- `coursekit.rpn`: `evaluate(tokens)`, `split_expressions(text)`,
  `evaluate_text(text)` and `format_trace(evaluation)` evaluate integer
  Reverse Polish Notation expressions ending in `;`. Operators are
  `+ - * / %`; division and remainder truncate toward zero. Each result is
  an `Evaluation` with `tokens`, `steps`, `result`, `error`, `terminated`
  and `valid`.
- `coursekit.palindromes`: `classify(phrase)` returns a `Verdict` with the
  lower-cased `letters`, `is_palindrome` and a `kind` (3 if the phrase had
  punctuation, 2 if it had spaces, 1 otherwise); `split_phrases(text)`
  splits on `#`, and `format_verdict(verdict)` lays out one report line.
- `coursekit.student`: `Student`, a record compared by its `id` (also
  against plain ints), with `row()` for a fixed-column line, and
  `parse_students(text)` to read a record file.
- `coursekit.roster`: `Roster(students, stdin, stdout, stderr)` runs the
  interactive student menu with `run()`; `load_students(path)` and
  `format_table(title, width, students)` support it.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from coursekit.stack import Stack, StackEmptyError

stack = Stack(3)
stack.push(10)
stack.push(20)
stack.pop()        # 20
len(stack)         # 1
stack.pop()        # 10
try:
    stack.pop()
except StackEmptyError:
    print("stack is empty")
```

```python
from coursekit.queue_list import Queue

queue = Queue()
for n in (10, 20, 30):
    queue.enqueue(n)
queue.dequeue()    # 10
queue.front()      # 20
queue.rear()       # 30
```

```python
from coursekit.linked_list import SortedLinkedList

numbers = SortedLinkedList()
for n in (30, 10, 20):
    numbers.insert(n)
list(numbers)      # [10, 20, 30]
numbers.display()  # '10 -> 20 -> 30'
```

```python
from coursekit.dllist import DLList

items = DLList()
for n in (2, 3, 1):
    items.insert(n)
list(items)            # [1, 2, 3]
list(reversed(items))  # [3, 2, 1]
```

```python
from coursekit.rpn import evaluate_text

[e.result for e in evaluate_text("2 4 * 5 + ; 3 + ;")]  # [13, None]
```

```python
from coursekit.palindromes import classify, format_verdict

verdict = classify("Race car")
verdict.is_palindrome, verdict.kind  # (True, 2)
```

## Commands

Each demonstration program is installed as a command:

| Command                                       | What it does                                               |
|-----------------------------------------------|------------------------------------------------------------|
| `coursekit-messages`                          | prints messages framed with repeated symbols               |
| `coursekit-max`                               | reads two ints, doubles, chars and strings; prints each max |
| `coursekit-dyad`                              | creates and swaps pairs                                    |
| `coursekit-stack`                             | pushes ten numbers onto a stack and pops them              |
| `coursekit-alist`                             | runs inserts, updates, retrieves and removes on an `AList` |
| `coursekit-llist`                             | inserts, retrieves and removes on a sorted linked list     |
| `coursekit-queue`                             | enqueues ten numbers and dequeues them                     |
| `coursekit-rpn [EXPRESSIONS] [RESULTS]`       | evaluates a file of RPN expressions                        |
| `coursekit-palindromes [PATH]`                | checks a file of `#`-separated phrases                     |
| `coursekit-roster [PATH]`                     | opens a menu over a file of student records                |

`coursekit-rpn` reads `expressions.txt` by default, prints each expression
with its result (or `invalid` on standard error) and writes a step-by-step
trace to `results.txt`. `coursekit-palindromes` reads `palindromes.txt` by
default. `coursekit-roster` reads `studentFile.txt` by default; each record
there is an ID line, a name line, a city-and-state line, then the phone,
gender, year, credits, GPA and major separated by whitespace.

## What it does not do

The roster menu works on the records in memory only: students added or
removed during a session are not written back to the record file.