# studykit

A collection of small, self-contained programs for learning and practice:

- **Library management**: books, users and borrowing transactions kept in memory,
  driven by an interactive menu.
- **School records**: student and lecturer record types, field validators and
  interactive prompts that keep asking until an answer is valid.
- **System monitor**: samples CPU, memory, disk and network usage at a fixed
  interval and prints a summary board.
- **Work-queue demo**: a pool of worker threads draining a shared queue of items.
- **Teaching helpers**: animals with a common interface, rectangles, students,
  employees, and small functions such as `fibonacci`, `is_leap_year` and
  `day_name`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command             | What it does                                                       |
|---------------------|--------------------------------------------------------------------|
| `studykit-library`  | Interactive library menu: add books, register users, borrow, return, list and search |
| `studykit-monitor`  | Samples CPU, memory, disk and network usage every second and prints the latest readings every five seconds until interrupted |
| `studykit-crawler`  | Hands numbered items to a pool of workers; `--items` (default 10000) and `--workers` (default 5) |

## Using it as a library

Library records:

```python
from studykit.library.repository import BookRepository, TransactionRepository, UserRepository
from studykit.library.service import LibraryService

service = LibraryService(BookRepository(), UserRepository(), TransactionRepository())
book = service.add_book("Dune", "Frank Herbert")
user = service.register_user("Ada", "ada@example.com")
loan = service.borrow_book(book.id, user.id)
service.return_book(loan.id)

for found in service.search_books_by_title("Dune"):
    print(found.title, found.author, found.is_available)
```

Errors are raised as exceptions, for example `NotFoundError` when an id is
unknown, `BookNotAvailableError` when a book is already lent out and
`BookAlreadyReturnedError` when a transaction was already closed; all of them
derive from `RepositoryError` in `studykit.library.repository`. Input checks
in `studykit.library.validation` raise `ValidationError`.

School records:

```python
from studykit.school.entities import Student
from studykit.school.validator import FieldError, validate_department, validate_id

student = Student(id="SE001", first_name="Ada", last_name="Lovelace", age=20, grade=10, gpa=3.75)
student.full_name            # "Ada Lovelace"
validate_id("SE001")         # returns the id
validate_department("Hola")  # raises FieldError for departments not in the fixed list
```

`studykit.school.inputs.Prompter` reads names, ids, ages, grades, GPAs,
salaries and departments, repeating the prompt until the answer passes the
matching validator.

System monitors:

```python
from studykit.system.monitors import MemoryMonitor

usage = MemoryMonitor().check_usage()
print(usage.value, usage.alert)   # alert is True above 60 %
```

Teaching helpers:

```python
from studykit.helpers import day_name, fibonacci, is_leap_year
from studykit.models import Rectangle

fibonacci(10)          # 55
is_leap_year(2024)     # True
day_name(6)            # "Weekend"
Rectangle(5, 10).area()
```

## What it does not do

The school part has record types, validators and prompts only. It has no
storage for students or lecturers, no service layer that creates, updates,
searches or deletes them, and no menu or command to run it. Nothing in the
package keeps data between runs: the library records live in memory and are
gone when the menu exits.