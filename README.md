# learngo

Small building blocks: greetings in a few languages, sums over lists of
integers, string repetition, simple plane shapes, a word dictionary and a
Bitcoin wallet.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Print a greeting. Both arguments are optional; the name defaults to `World`
and the language to `English`. `Spanish` and `French` are recognised, any
other language greets in English:

```
learngo-hello
learngo-hello Elodie Spanish
```

Serve a greeting over HTTP on port 5001. Every GET, POST, PUT or DELETE
request is answered with `Hello, Matt`:

```
learngo-greeter
```

## Library use

```python
import sys

from learngo.hello_world import hello
from learngo.greeter import greet
from learngo.integers import add
from learngo.arrays import total, sum_all, sum_all_tails
from learngo.iteration import repeat, string_repeat
from learngo.shapes import Rectangle, Circle, Triangle, perimeter
from learngo.dictionary import Dictionary, NotFoundError
from learngo.wallet import Wallet, Bitcoin, InsufficientFundsError

hello("Elodie", "Spanish")             # "Hola, Elodie"
hello("", "English")                   # "Hello, World"
greet(sys.stdout, "Matt")              # writes "Hello, Matt"

add(2, 2)                              # 4
total([1, 2, 3])                       # 6
sum_all([1, 2], [0, 9])                # [3, 9]
sum_all_tails([], [3, 4, 5])           # [0, 9]

repeat("a", 3)                         # "aaa"
string_repeat("a", 3)                  # "aaa"

Rectangle(12.0, 6.0).area()            # 72.0
Circle(10.0).area()                    # 314.1592653589793
Triangle(12.0, 6.0).area()             # 36.0
perimeter(Rectangle(10.0, 10.0))       # 40.0

words = Dictionary({"test": "this is just a test"})
words.search("test")                   # "this is just a test"
try:
    words.search("unknown")
except NotFoundError as err:
    print(err)                         # could not find the word you are looking for

wallet = Wallet()
wallet.deposit(Bitcoin(20))
wallet.withdraw(Bitcoin(10))
print(wallet.balance())                # 10 BTC
```

## Behaviour worth knowing

- `Dictionary` is a `dict` of words to definitions. `add` raises
  `WordExistsError` for a word already present; `update` and `delete` raise
  `WordDoesNotExistError` for a missing word; `search` raises
  `NotFoundError`. All of them derive from `DictionaryError`.
- `Wallet.withdraw` raises `InsufficientFundsError` and leaves the balance
  unchanged when the amount is larger than the balance. `Wallet` can be
  created with a starting balance, `Wallet(20)`.
- `repeat` returns an empty string for a negative count; `string_repeat`
  raises `ValueError` for one.
- Shapes are frozen dataclasses deriving from the abstract `Shape`.