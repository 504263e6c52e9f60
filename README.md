# namtext

A small text helper for comparing names and keys the same way on every
system, whatever the locale.

## Installation

```
pip install namtext
```

## Usage

The package has one module, `namtext.util`, with one function, `lowercase`.

`lowercase(s)` returns a lowercased copy of `s`. Only the ASCII letters
`A`–`Z` are changed; every other character, including non-ASCII letters,
is left as it is. The result does not depend on the locale.

It takes a `str` or `bytes` and returns the same type. A `bytearray` is
also accepted and comes back as `bytes`. Any other type raises `TypeError`.

```python
from namtext.util import lowercase

lowercase("WaveNet")      # "wavenet"
lowercase("LSTM_Model")   # "lstm_model"
lowercase("ÄBC")          # "Äbc"
lowercase(b"GATED")       # b"gated"
lowercase(123)            # raises TypeError
```

## Scope

This package only provides string lowercasing. It does not load, run or
process models, and it has no command-line tool.

## Running the tests

```
pip install "namtext[test]"
pytest
```