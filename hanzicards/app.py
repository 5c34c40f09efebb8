"""The flashcard web server and the answer-processing flow behind it."""

from __future__ import annotations

import html
import re
import socket
import sys
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from os import PathLike
from pathlib import Path

from .check_answer import check_answer
from .question import Outcome, Question, QuestionResult
from .read_form import read_form
from .storage import StorageError, write_file
from .tones import add_tone_marks
from .word import Word
from .words import (
    get_next_word,
    get_state,
    get_word_limit,
    set_guess_counter,
    update_counter,
)

DEFAULT_PORT = 8080
FILE_NAME = "hanzi.tsv"
_PORT_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Page:
    """What to show next: a word with a question, or an error message."""

    word: Word | None = None
    question: Question = Question.ALL_REVEALED
    result: QuestionResult = field(default_factory=QuestionResult.none)
    error: str | None = None

    @classmethod
    def failure(cls, message: str) -> Page:
        return cls(error=message)


def parse_port(argv: list[str]) -> int:
    """Read the port from ``-p``/``--port``, falling back to the default."""
    index = next((i for i, arg in enumerate(argv) if arg in ("-p", "--port")), None)
    if index is None:
        return DEFAULT_PORT
    if index + 1 >= len(argv):
        print("Missing number argument after port", file=sys.stderr)
        return DEFAULT_PORT
    arg = argv[index + 1]
    if _PORT_PATTERN.fullmatch(arg) and int(arg) <= 0xFFFF:
        return int(arg)
    print(f"Could not parse {arg} as port number", file=sys.stderr)
    return DEFAULT_PORT


def current_page(path: str | PathLike[str]) -> Page:
    """The page for the word currently being asked."""
    try:
        word, _, state = get_state(path)
    except StorageError as error:
        return Page.failure(str(error))
    return Page(word, state.question_type, QuestionResult.none())


def process_answer(path: str | PathLike[str], answer: str, tones: str, veto: bool) -> Page:
    """Grade an answer (or apply a veto), advance the session, save it and return the next page."""
    try:
        current, words, state = get_state(path)
    except StorageError as error:
        return Page.failure(str(error))

    if veto and state.reviews:
        set_guess_counter(words, state.previous_word, state.previous_correct_guesses + 1)
        try:
            write_file(path, state, words)
        except StorageError as error:
            return Page.failure(str(error))
        return Page(current, state.question_type, QuestionResult.none())

    correction = None if veto else check_answer(answer, tones, current, state.question_type)
    correct = correction is None
    if not update_counter(words, state, current.correct_guesses, correct):
        return Page.failure(
            f"Failed to update guess counter. Word {state.current_word} not found in the list"
        )

    previous_question = state.question_type
    limit = get_word_limit(state, words)
    state.update(correct, current.correct_guesses, limit)

    next_word = get_next_word(state, words)
    if next_word is None:
        return Page.failure("Failed to get new randomised word")
    state.current_word = next_word.chinese

    if previous_question is Question.ALL_REVEALED:
        result = QuestionResult.none()
    elif correction is None:
        result = QuestionResult.correct()
    else:
        result = QuestionResult.incorrect(correction)

    try:
        write_file(path, state, words)
    except StorageError as error:
        return Page.failure(str(error))
    return Page(next_word, state.question_type, result)


def _div(css_class: str, content: str) -> str:
    return f'<div class="{css_class}">{html.escape(content)}</div>'


def _render(page: Page) -> str:
    parts: list[str] = []
    if page.error is not None:
        parts.append(_div("incorrect", page.error))
    else:
        word = page.word
        assert word is not None
        if page.result.outcome is Outcome.CORRECT:
            parts.append(_div("correct", "That was CORRECT!"))
        elif page.result.outcome is Outcome.INCORRECT:
            parts.append(_div("incorrect", f"That was INCORRECT! Expected: {page.result.expected}"))
            parts.append('<form method="post"><button name="veto" value="1">I was right</button></form>')

        parts.append('<form method="post">')
        if page.question is Question.ALL_REVEALED:
            parts.append(_div("chinese-text", word.chinese))
            parts.append(_div("pinyin-text", add_tone_marks(word.latin, word.tones)))
            parts.append(_div("translation-text", word.translation))
            parts.append(_div("clarification-text", word.clarification))
            parts.append('<button name="next" value="1">Next</button>')
        elif page.question is Question.WRITING:
            parts.append(_div("translation-text", word.translation))
            parts.append(_div("clarification-text", word.clarification))
            parts.append('<input name="answer" autofocus>')
        else:
            parts.append(_div("chinese-text", word.chinese))
            if page.question is Question.READING:
                for n in range(1, len(word.tones) + 1):
                    parts.append(f'<input name="tone{n:02}" size="1">')
                parts.append('<label>Pinyin: <input name="answer" autofocus></label>')
            else:
                parts.append('<label>Translation: <input name="answer" autofocus></label>')
        parts.append("</form>")

    body = "\n".join(parts)
    return (
        '<!DOCTYPE html><html><head><meta charset="utf-8"><title>Flashcards</title></head>'
        f"<body>{body}</body></html>"
    )


class _Server(ThreadingHTTPServer):
    def __init__(self, address: tuple[str, int], data_path: Path, lock: threading.Lock) -> None:
        super().__init__(address, _Handler)
        self.data_path = data_path
        self.lock = lock


class _Handler(BaseHTTPRequestHandler):
    server: _Server

    def do_GET(self) -> None:
        if self.path != "/":
            self.send_error(404)
            return
        with self.server.lock:
            page = current_page(self.server.data_path)
        self._send(_render(page))

    def do_POST(self) -> None:
        if self.path != "/":
            self.send_error(404)
            return
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length).decode("utf-8", errors="replace")
        form = read_form(body)
        with self.server.lock:
            page = process_answer(self.server.data_path, form.answer, form.tones, form.veto)
        self._send(_render(page))

    def _send(self, text: str) -> None:
        data = text.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)


def _local_ip() -> str:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        probe.connect(("10.254.254.254", 1))
        return probe.getsockname()[0]


def main(argv: list[str] | None = None) -> int:
    """Serve the flashcards on localhost and, when found, the local network address."""
    args = sys.argv[1:] if argv is None else argv
    port = parse_port(args)
    data_path = Path(sys.argv[0]).resolve().parent / FILE_NAME
    lock = threading.Lock()

    servers = [_Server(("127.0.0.1", port), data_path, lock)]
    try:
        ip = _local_ip()
    except OSError as error:
        print(f"Failed to get local IP address: {error}", file=sys.stderr)
        print(f"Listening on 127.0.0.1:{port}")
    else:
        print(f"Listening on {ip}:{port}")
        if ip != "127.0.0.1":
            servers.append(_Server((ip, port), data_path, lock))

    for extra in servers[1:]:
        threading.Thread(target=extra.serve_forever, daemon=True).start()
    try:
        servers[0].serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        for server in servers:
            server.server_close()
    return 0