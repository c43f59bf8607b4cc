"""Independent and identically distributed model over a discrete alphabet."""

from __future__ import annotations

import random
from typing import Iterable, Sequence

from seqprob.model import Evaluator, Generator, ProbabilisticModel
from seqprob.sequences import generate_random_integer


class DiscreteIIDModel(ProbabilisticModel):
    """Model in which every symbol is drawn independently from one distribution.

    The probability of a sequence is the product of the probabilities of its
    symbols, regardless of their positions or of the symbols around them.
    """

    def __init__(self, probabilities: Iterable[float]) -> None:
        self._probabilities = [float(p) for p in probabilities]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._probabilities!r})"

    @staticmethod
    def normalize(values: Iterable[float]) -> list[float]:
        """Scale ``values`` so that they sum to one."""
        values = [float(v) for v in values]
        total = sum(values)
        if total == 0:
            return [0.0 for _ in values]
        return [v / total for v in values]

    def probabilities(self) -> list[float]:
        """Return the probability of drawing each symbol of the alphabet."""
        return list(self._probabilities)

    def alphabet_size(self) -> int:
        """Return the number of symbols in the alphabet."""
        return len(self._probabilities)

    def probability_of(self, symbol: int) -> float:
        """Return the probability of drawing ``symbol``; zero outside the alphabet."""
        if 0 <= symbol < len(self._probabilities):
            return self._probabilities[symbol]
        return 0.0

    def draw(self, rng: random.Random) -> int:
        """Draw one symbol according to the model's distribution."""
        total = sum(self._probabilities)
        target = rng.random() * total
        cumulative = 0.0
        last_possible = 0
        for symbol, prob in enumerate(self._probabilities):
            if prob <= 0:
                continue
            last_possible = symbol
            cumulative += prob
            if target < cumulative:
                return symbol
        return last_possible

    def evaluate_symbol(self, evaluator: Evaluator, pos: int, phase: int) -> float:
        """Return the probability of the symbol at ``pos`` of the evaluated sequence."""
        return self.probability_of(evaluator.sequence[pos])

    def draw_symbol(
        self, generator: Generator, pos: int, phase: int, context: Sequence[int]
    ) -> int:
        """Draw a symbol; position, phase and context do not matter."""
        return self.draw(generator.rng)


def generate_random_iid_model(alphabet_size: int) -> DiscreteIIDModel:
    """Return a model whose weights are random integers in ``[0, alphabet_size]``."""
    return DiscreteIIDModel(
        float(generate_random_integer(alphabet_size)) for _ in range(alphabet_size)
    )


def create_dna_iid_model() -> DiscreteIIDModel:
    """Return a model over the four DNA bases."""
    return DiscreteIIDModel([0.1, 0.3, 0.4, 0.2])


def create_fair_coin_iid_model() -> DiscreteIIDModel:
    """Return a model of a fair coin."""
    return DiscreteIIDModel([0.5, 0.5])


def create_loaded_coin_iid_model() -> DiscreteIIDModel:
    """Return a model of a coin that favours symbol 1."""
    return DiscreteIIDModel([0.2, 0.8])