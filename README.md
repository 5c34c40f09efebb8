# hanzicards

Flashcards for learning Chinese words: the characters, their pinyin reading
with tones, and their meaning. One tab-separated file holds both the deck and
your progress, so you can stop a session and pick it up later. The cards are
shown as web pages by a small built-in HTTP server.

## Running the server

    hanzicards [-p PORT | --port PORT]

The server listens on port 8080 unless `-p`/`--port` gives another one. If
the port value is missing or is not a number from 0 to 65535, a message goes
to standard error and 8080 is used. The server always listens on
`127.0.0.1`. It also tries to find the machine's local network address and
listens there as well, so a phone on the same network can reach it. It prints
the address it found. Stop it with Ctrl+C.

The deck file must be named `hanzi.tsv` and must be in the same directory as
the program that was started. For an installed `hanzicards` command, that is
the directory holding the command, such as the `bin` directory of a
virtual environment. The server never creates this file; it must already
exist.

Open `/` in a browser to see the question that is due. Answers are sent back
to `/` as a form.

## How a session works

Study switches between two phases.

**Learning.** A new word is shown with everything revealed: characters,
pinyin with tone marks, translation and clarification. You are then asked, in
turn, for:

1. its meaning,
2. its reading, as pinyin plus one tone per syllable,
3. its writing, the characters that match the translation.

A wrong answer asks the same kind of question again. In the writing step, a
correct answer gives the word a correct-guess count of 1 and a wrong one sets
it to 0. After three words have been written correctly, the session switches
to reviews. Each new word to learn is the first word in the file whose count
is 0.

**Reviews.** Each question is of a random kind (meaning, reading or writing)
and is about a learnt word, that is, one with a count above zero. The word is
picked at random from those with the lowest count. A correct answer raises
the word's count by one. A wrong answer resets it to 0, which sends the word
back to be learnt again. A review round holds as many questions as the square
root of the number of learnt words, rounded up. Then learning starts again.

After a wrong answer, the page shows the expected answer and a button, "I was
right". What it does depends on the phase:

- **In reviews**, the button sets the previous word's count to one more than
  it was before that answer. The current question stays as it is.
- **While learning**, the button counts the current question as answered
  correctly.

### What counts as correct

**Meaning.** The answer is compared, ignoring case, with each part of the
translation and of the clarification. Parts are split at commas and
semicolons, and surrounding spaces are ignored.

**Reading.** Type the pinyin without spaces and use `v` for `ü`. Give each
syllable's tone as a digit: 1 to 4, or 0 for the neutral tone. The letters
and the tones must both match.

**Writing.** The characters must match exactly.

An empty answer is always wrong.

## The deck file

The first line holds the session state, tab-separated:

    previous guesses  previous word  current word  question  reviews  position

- The question is one of `a` (all revealed), `m` (meaning), `r` (reading) or
  `w` (writing).
- reviews is `true` or `false`.
- Missing or malformed fields fall back to 0, an empty string, `a` and
  `true`.

The current word must be the characters of a word in the deck. Otherwise
every page shows an error. To start a fresh deck, use a first line like:

    0		你好	a	false	0

Every following line is one word:

    correct guesses  characters  pinyin  tones  translation  clarification

for example:

    0	你好	ni hao	32	hello	greeting

Pinyin syllables are separated by spaces, and the tones have one digit per
syllable.

## Using it from Python

```python
from hanzicards.tones import add_tone_marks

add_tone_marks("ni hao", "32")   # 'nǐhǎo'
```

### Reading and writing the deck

```python
from pathlib import Path
from hanzicards.storage import read_file, write_file, StorageError

deck = Path("hanzi.tsv")
state, words = read_file(deck)
write_file(deck, state, words)
```

`read_file` returns a `State` and a list of `Word` objects. Both functions
raise `StorageError` when the file cannot be opened, when it is empty, or
when a line is not valid UTF-8. `write_file` replaces the contents of a file
that already exists.

### Running a session without the server

`hanzicards.app` drives a whole session without the server:

- `current_page(path)` returns the `Page` for the question that is due.
- `process_answer(path, answer, tones, veto)` checks an answer, updates the
  deck file and returns the `Page` for the next question.

A `Page` holds:

- `word`: the word being asked,
- `question`: a `Question`,
- `result`: a `QuestionResult` for the previous answer,
- `error`: a message instead of a word, when something failed.

`parse_port(argv)` reads the `-p`/`--port` option.

### Lower-level pieces

The smaller steps are also available on their own:

- `hanzicards.read_form.read_form`: parses a submitted form.
- `hanzicards.check_answer.check_answer`: grades an answer.
- `hanzicards.words`: picks the next word, updates counts and gives the
  round length.

## Limitations

- There is no command for creating or editing a deck; write `hanzi.tsv` by
  hand.
- The pages are plain HTML with no styling.

## Running the tests

Install the `test` extra and run pytest from the project directory.