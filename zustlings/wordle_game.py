"""A fair game of Wordle between a server holding the word and a player."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Sequence

from .wordle import WORD_LENGTH, GameState, WordFeedback, score_guess
from .wordlist import pick_word

ROUNDS = 6


class CheatingDetected(Exception):
    """Raised when the server's committed word hash changes mid-game."""


@dataclass(frozen=True)
class Server:
    """Holds the secret word and scores guesses against it."""

    secret_word: str

    def __repr__(self) -> str:
        return "Server(secret_word=<hidden>)"

    def get_secret_word_hash(self) -> bytes:
        """The hash the server commits to at the start of the game."""
        return self.check_round("_" * WORD_LENGTH).correct_word_hash

    def check_round(self, guess_word: str) -> GameState:
        """Score a guess; the result carries the secret word's hash."""
        return score_guess(self.secret_word, guess_word)


@dataclass(frozen=True)
class Player:
    """Remembers the committed hash and checks each round against it."""

    hash: bytes

    def check_receipt(self, receipt: GameState) -> WordFeedback:
        """Return the round's feedback; raise CheatingDetected on a hash mismatch."""
        if receipt.correct_word_hash != self.hash:
            raise CheatingDetected("The hash mismatched, so the server cheated!")
        return receipt.feedback


def read_guess(stream: IO[str] | None = None) -> str:
    """Read lines until one holds exactly five letters; raise EOFError at end of input."""
    source = stream if stream is not None else sys.stdin
    while True:
        line = source.readline()
        if not line:
            raise EOFError("no more guesses to read")
        guess = line.removesuffix("\n")
        if len(guess) == WORD_LENGTH:
            return guess
        print("Your guess must have 5 letters. Try again :)")


def play_rounds(
    server: Server,
    player: Player,
    rounds: int = ROUNDS,
    stream: IO[str] | None = None,
) -> bool:
    """Play up to ``rounds`` guesses; return True if the word was found."""
    for turn_index in range(rounds):
        remaining_guesses = rounds - turn_index
        guess_word = read_guess(stream)
        score = player.check_receipt(server.check_round(guess_word))

        if remaining_guesses == rounds:
            print("Good guess! Our server has calculated your results.")
            print("You'll have 6 chances to get the word right.")
        else:
            print(f"You have {remaining_guesses} guesses remaining.")

        print(score.render(guess_word), end="")
        if score.game_is_won():
            return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game against a randomly chosen word."""
    print("Welcome to fair Wordle! Enter a five-letter word.")

    server = Server(pick_word())
    player = Player(hash=server.get_secret_word_hash())

    try:
        won = play_rounds(server, player, ROUNDS)
    except EOFError:
        print("Game over!\n")
        return 1
    print("You won!\n" if won else "Game over!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())