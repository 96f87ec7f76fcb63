# dictcipher

`dictcipher` contains two small tools:

- **A typed dictionary** (`dictcipher.customdict`). Each key holds a list of values, and all values under a key share one type: int, float, double or char. You can use it from Python or from an interactive text menu (`dictcipher.cli`).
- **A text cipher** (`dictcipher.cipher`). It shifts each character five places along a fixed 61-character alphabet. The alphabet is `ALPHABET`, and the shift is `KEY = 5`. Comments between `/*` and `*/` are not encrypted. Each comment is replaced by an `@ ` marker followed by the encoded count of its non-space characters.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The dictionary

### Interactive menu

```
dictcipher
```

The menu reads its input from standard input. It offers these choices:

1. **Add item.** Asks for a key, a type letter (`i`, `f`, `d`, `c`) and then values. Type `e` to stop entering values. If the key already exists, the new values are appended to its existing ones.
2. **Delete item.**
3. **Set value.** Replaces the values stored under a key.
4. **Search item.** Prints the key and its values, or `Item not found.`
5. **Sort dictionary.** Sorts the items by key.
6. **Print dictionary.**
7. **Read CSV file.** Prints `CSV file read.` on success, or `Failed to read file.` on failure.
8. **Exit.**

Other details:

- A type letter it does not recognise prints `Invalid type.`, and nothing is stored.
- An unknown menu choice prints `Invalid choice. Please try again.`
- The menu also stops when the input runs out.

To run the menu on other streams, call `run_menu(dictionary, stdin, stdout)`.

### From Python

```python
from dictcipher.customdict import CustomDict, ValueType

d = CustomDict()
d.add_item("ages", [30, 41], ValueType.INT)
d.add_item("ages", [7], ValueType.INT)       # appended: [30, 41, 7]
d.set_value("pi", [3.14159], ValueType.DOUBLE)
d.sort()
for line in d.format_lines():
    print(line)
# Key: ages, Values: 30 41 7
# Key: pi, Values: 3.14
```

`CustomDict` keeps its items in insertion order. It supports `len()`, `in` and iteration over its `Item` objects. Each `Item` has these fields:

- `key`
- `values`
- `value_type`

The methods behave as follows:

- `search_item(key)` returns the list of values, or `None` if the key is absent.
- `find_index(key)` returns the item's position, and raises `KeyError` if the key is absent.
- `delete_item(key)` moves the last item into the removed item's place. It ignores missing keys.
- When `add_item` is called on an existing key, it keeps that key's original type.

The module also has two helper functions:

- `parse_value(text, value_type)` reads numbers the way C's `atoi`/`atof` do. Leading whitespace is skipped, and text that does not start with a number gives `0`. Floats are rounded to single precision.
- `format_value(value, value_type)` prints floats and doubles with two decimals.

### CSV files

`read_csv(path)` loads lines in this form:

```
type, key, value, value, ...
```

The type is one of `i`, `f`, `d` or `c`. Blank lines are skipped.

For `c` rows, each value is taken from the second character of its field, so `, x` stores `x`. A final `"\0"` value is also appended.

`read_csv` raises the following errors:

- `OSError` if the file cannot be opened.
- `ValueError` for a line with an unknown type.
- `ValueError` for a line without a key.

## The cipher

Both commands read standard input and write standard output:

```
dictcipher-encrypt < input.txt > encrypted.txt
dictcipher-decrypt < encrypted.txt > decrypted.txt
```

You can also call the functions directly:

```python
from dictcipher.cipher import encrypt, decrypt

ciphertext = encrypt("int x = 1; /* one */\n")
print(decrypt(ciphertext))
```

Decrypting turns each marker line into `/*There are: N characters as comment.*/`.

## Limitations

- The dictionary lives only in memory. It can be loaded from CSV, but nothing writes it back to a file.
- Values typed at the menu that are not numbers are stored as `0` under the numeric types.
- The cipher is lossy:
  - Characters that are not in its alphabet are dropped. This includes upper-case letters.
  - The text of each comment is not kept.
  - Comment counts above 99 are not encoded.
  - When a two-digit count ends in 5, that digit is left out.