# bankcore

Building blocks for a console bank management system. The package has string
helpers, a counter for numbers held as digit strings, input validators,
line-based record files and console prompts.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Modules

### `bankcore.strings`

Text helpers. Character classes are ASCII only: letters are `A-Z`/`a-z`,
digits are `0-9`, punctuation is `string.punctuation`, and whitespace is
`string.whitespace`.

- Splitting and words: `split_string(line, delim)` drops empty pieces and
  raises `ValueError` for an empty delimiter. Also `count_words`,
  `reverse_words` and `replace_word(line, find, replace, match_case=True)`.
  The last two put a single space after every word, the last word included.
- Trimming: `trim_left`, `trim_right` and `trim` remove space characters only.
- Case: `upper_case`, `lower_case`, `invert_letter` and `invert_case`.
- Counting: `count_lower`, `count_upper` and `count_digits`. There is also
  `count_letters(line, what=LetterKind.ALL)`. `LetterKind` has the members
  `SMALL`, `CAPITAL` and `ALL`, and `ALL` counts every character.
- Checks: `has_upper`, `has_lower`, `has_special_character`, `has_digit`,
  `has_space`, `is_all_digits` (false for the empty string),
  `is_alpha_name_with_one_separator` and `contains_only_letters_and_spaces`.
- Vowels: `is_vowel`, `vowels` and `print_vowels`.
- Other: `remove_punctuation`, and `read_string`, which prompts for a line and
  returns `""` at end of input.

### `bankcore.big_number`

`increment(number)` adds one to a number held as a string. Carries run from
the right. Leading characters are kept, and a `1` is put in front when every
digit rolls over.

### `bankcore.validators`

| Function | Rule |
|----------|------|
| `is_valid_password` | 8 to 16 characters, with a lowercase letter, an uppercase letter, a punctuation character and a digit |
| `is_valid_username` | 4 to 20 characters, starts with a letter, and has only letters plus at most one `.` or `_` in total |
| `is_valid_username_and_password` | both of the above |
| `is_valid_pin_code` | exactly 4 or 6 digits |
| `is_valid_name` | 7 to 50 characters, at least two words, and only letters and whitespace |
| `is_valid_phone_number` | 11 digits, starts with `01`, and the third digit is 0, 1, 2 or 5 |

### `bankcore.records`

- `save_record(record, path)` overwrites a file with one line.
- `save_records(records, path)` overwrites a file with one line per record.
- `restore_records(path)` returns the lines of a file without their line
  endings.

If a file cannot be opened, these functions print
`Warning: Unable to open file: <path>`. `restore_records` then returns an
empty list.

`CLIENTS_FILE` (`data/Clients.txt`) and `USERS_FILE` (`data/Users.txt`) are
the default record file locations.

### `bankcore.console`

- `show_screen_header(screen_name)` prints a framed title.
- `show_username_invalid_message` and `show_password_invalid_message` print
  the input rules.
- `clear_screen` runs `cls` on Windows and `clear` elsewhere.
  `pause_and_clear_screen` waits for a key first.
  `show_message_and_pause_then_clear(message)` prints a message, then waits
  and clears.
- `are_you_sure(message)` asks a question. The answer counts as yes only when
  the first non-blank line starts with `y` or `Y`.
- `read_number()` reads lines until one starts with an integer in the signed
  32-bit range. It asks again after invalid input and raises `EOFError` if
  input runs out.

## Examples

```python
from bankcore.big_number import increment
from bankcore.strings import split_string, trim
from bankcore.validators import is_valid_pin_code, is_valid_username

increment("A199")                     # "A200"
increment("999")                      # "1000"

split_string("a#//#b#//#c", "#//#")   # ["a", "b", "c"]
trim("   hello  ")                    # "hello"

is_valid_username("john_doe")         # True
is_valid_pin_code("1234")             # True
```

```python
from bankcore.records import restore_records, save_records

save_records(["first", "second"], "records.txt")
restore_records("records.txt")        # ["first", "second"]
```

## What this package does not do

There is no program to run and no command. The package has no login screen,
no client or user management screens, and no transactions. It does not define
client or user record layouts either. It provides only the helpers such an
application would be built on.

## Running the tests

```
pytest
```