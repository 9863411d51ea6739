"""Scoring Wordle guesses against a secret word."""

from __future__ import annotations

import enum
import hashlib
from dataclasses import dataclass, field

WORD_LENGTH = 5

_RESET = "\x1b[0m"


class LetterFeedback(enum.Enum):
    """How one guessed letter relates to the secret word."""

    CORRECT = "correct"
    PRESENT = "present"
    MISS = "miss"


_BACKGROUNDS = {
    LetterFeedback.CORRECT: "\x1b[41m",
    LetterFeedback.PRESENT: "\x1b[43m",
    LetterFeedback.MISS: "\x1b[40m",
}


def _all_misses() -> tuple[LetterFeedback, ...]:
    return (LetterFeedback.MISS,) * WORD_LENGTH


@dataclass(frozen=True)
class WordFeedback:
    """Feedback for each letter of a guess."""

    letters: tuple[LetterFeedback, ...] = field(default_factory=_all_misses)

    def __post_init__(self) -> None:
        object.__setattr__(self, "letters", tuple(self.letters))
        if len(self.letters) != WORD_LENGTH:
            raise ValueError(f"feedback must cover {WORD_LENGTH} letters")

    def __getitem__(self, index: int) -> LetterFeedback:
        return self.letters[index]

    def game_is_won(self) -> bool:
        return all(letter is LetterFeedback.CORRECT for letter in self.letters)

    def render(self, guess_word: str) -> str:
        """The coloured results line for ``guess_word``, followed by a blank line."""
        if len(guess_word) < WORD_LENGTH:
            raise ValueError(f"guess must have at least {WORD_LENGTH} letters")
        cells = "".join(
            f"{_BACKGROUNDS[feedback]}{char}"
            for feedback, char in zip(self.letters, guess_word)
        )
        return f"Your results: {cells}{_RESET}\n\n"


@dataclass(frozen=True)
class GameState:
    """What a round commits to: the secret's hash and the feedback."""

    correct_word_hash: bytes
    feedback: WordFeedback


def score_guess(secret: str, guess: str) -> GameState:
    """Score ``guess`` against ``secret``; both must have five letters."""
    if len(secret) != WORD_LENGTH:
        raise ValueError("secret must have length 5!")
    if len(guess) != WORD_LENGTH:
        raise ValueError("guess must have length 5!")

    secret_bytes = secret.encode("utf-8")
    guess_bytes = guess.encode("utf-8")
    pairs = list(zip(secret_bytes[:WORD_LENGTH], guess_bytes[:WORD_LENGTH]))

    # Only letters without an exact match can make another position "present".
    unmatched = {s for s, g in pairs if s != g}
    feedback = WordFeedback(
        tuple(
            LetterFeedback.CORRECT
            if s == g
            else LetterFeedback.PRESENT
            if g in unmatched
            else LetterFeedback.MISS
            for s, g in pairs
        )
    )
    return GameState(
        correct_word_hash=hashlib.sha256(secret_bytes).digest(),
        feedback=feedback,
    )