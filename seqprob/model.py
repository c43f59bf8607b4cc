"""Front end shared by probabilistic models: evaluators, generators, serializers and trainers."""

from __future__ import annotations

import copy
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

DEFAULT_SEED = 5489


@dataclass
class Cache:
    """Per-evaluator cache holding prefix products of symbol probabilities."""

    prefix_sum_array: list[float] = field(default_factory=list)


class ProbabilisticModel(ABC):
    """Base class for models of sequences over a discrete alphabet.

    Subclasses supply :meth:`evaluate_symbol` and :meth:`draw_symbol`; the
    remaining operations are built on top of them.
    """

    # Evaluation

    @abstractmethod
    def evaluate_symbol(self, evaluator: "Evaluator", pos: int, phase: int) -> float:
        """Return the probability of ``evaluator.sequence[pos]``."""

    def evaluate_sequence(
        self, evaluator: "Evaluator", begin: int, end: int, phase: int
    ) -> float:
        """Return the probability of ``sequence[begin:end]`` without a cache."""
        prob = 1.0
        for pos in range(begin, end):
            prob *= evaluator.evaluate_symbol(pos, phase)
        return prob

    def initialize_cache(self, evaluator: "CachedEvaluator", phase: int) -> None:
        """Fill the evaluator's cache with prefix products of the sequence."""
        prefix = [1.0]
        for pos in range(len(evaluator.sequence)):
            prefix.append(prefix[-1] * evaluator.evaluate_symbol(pos, phase))
        evaluator.cache.prefix_sum_array = prefix

    def cached_evaluate_sequence(
        self, evaluator: "CachedEvaluator", begin: int, end: int, phase: int
    ) -> float:
        """Return the probability of ``sequence[begin:end]`` from the cache."""
        prefix = evaluator.cache.prefix_sum_array
        return prefix[end] / prefix[begin]

    # Generation

    @abstractmethod
    def draw_symbol(
        self, generator: "Generator", pos: int, phase: int, context: Sequence[int]
    ) -> int:
        """Draw one symbol at ``pos`` given the symbols drawn before it."""

    def draw_sequence(self, generator: "Generator", size: int, phase: int) -> list[int]:
        """Draw ``size`` symbols, each conditioned on those already drawn."""
        drawn: list[int] = []
        for pos in range(size):
            drawn.append(generator.draw_symbol(pos, phase, drawn))
        return drawn

    # Serialization

    def serialize(self, serializer: "Serializer") -> None:
        """Hand this model to the serializer's translator."""
        serializer.translator.translate(self)

    # Factories

    def standard_evaluator(
        self, sequence: Iterable[int], cached: bool = False
    ) -> "Evaluator":
        """Return an evaluator for ``sequence``, optionally with a prefix cache."""
        if cached:
            return CachedEvaluator(self, sequence)
        return Evaluator(self, sequence)

    def standard_generator(self, rng: random.Random | None = None) -> "Generator":
        """Return a generator; without ``rng`` a fixed default seed is used."""
        if rng is None:
            rng = random.Random(DEFAULT_SEED)
        return Generator(self, rng)

    def serializer(self, translator: Any) -> "Serializer":
        """Return a serializer that feeds this model to ``translator``."""
        return Serializer(self, translator)

    def fixed_trainer(self) -> "FixedTrainer":
        """Return a trainer that always yields a copy of this model."""
        return FixedTrainer(self)


class Evaluator:
    """Computes probabilities of a fixed sequence under a model."""

    def __init__(self, model: ProbabilisticModel, sequence: Iterable[int]) -> None:
        self.model = model
        self.sequence = list(sequence)

    def evaluate_symbol(self, pos: int, phase: int = 0) -> float:
        """Return the probability of the symbol at ``pos``."""
        return self.model.evaluate_symbol(self, pos, phase)

    def evaluate_sequence(self, begin: int, end: int, phase: int = 0) -> float:
        """Return the probability of the subsequence ``[begin, end)``."""
        return self.model.evaluate_sequence(self, begin, end, phase)


class CachedEvaluator(Evaluator):
    """Evaluator that lazily builds a prefix-product cache on first use."""

    def __init__(self, model: ProbabilisticModel, sequence: Iterable[int]) -> None:
        super().__init__(model, sequence)
        self.cache = Cache()
        self._initialized = False

    def evaluate_symbol(self, pos: int, phase: int = 0) -> float:
        """Return the probability of the symbol at ``pos``."""
        return self.model.evaluate_symbol(self, pos, phase)

    def evaluate_sequence(self, begin: int, end: int, phase: int = 0) -> float:
        """Return the probability of ``[begin, end)`` using the cache."""
        if not self._initialized:
            self._initialized = True
            self.model.initialize_cache(self, phase)
        return self.model.cached_evaluate_sequence(self, begin, end, phase)


class Generator:
    """Draws random symbols and sequences from a model."""

    def __init__(self, model: ProbabilisticModel, rng: random.Random) -> None:
        self.model = model
        self.rng = rng

    def draw_symbol(
        self, pos: int, phase: int = 0, context: Sequence[int] = ()
    ) -> int:
        """Draw one symbol at ``pos`` given ``context``."""
        return self.model.draw_symbol(self, pos, phase, context)

    def draw_sequence(self, size: int, phase: int = 0) -> list[int]:
        """Draw a sequence of ``size`` symbols."""
        return self.model.draw_sequence(self, size, phase)


class Serializer:
    """Passes a model to a translator that renders it in some format."""

    def __init__(self, model: ProbabilisticModel, translator: Any) -> None:
        self.model = model
        self.translator = translator

    def serialize(self) -> None:
        """Serialize the model through the translator."""
        self.model.serialize(self)


class FixedTrainer:
    """Trainer that ignores training data and returns a preset model."""

    def __init__(self, model: ProbabilisticModel) -> None:
        self._model = model
        self._discarded = 0

    def training_set(self) -> list[list[int]]:
        """A fixed trainer has no training set; always raises."""
        model_name = type(self._model).__name__
        message = f"Should not be used: fixed trainer of {model_name} keeps no training set"
        raise RuntimeError(message)

    def add_training_set(self, training_set: Iterable[Iterable[int]]) -> None:
        """Accept a training set; its sequences are counted and discarded."""
        self._discarded += sum(1 for _ in training_set)

    def add_training_sequence(self, sequence: Iterable[int]) -> None:
        """Accept a training sequence; it is counted and discarded."""
        self._discarded += 1

    def train(self) -> ProbabilisticModel:
        """Return a copy of the preset model."""
        return copy.copy(self._model)