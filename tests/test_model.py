import random

import pytest

from seqprob.model import (
    CachedEvaluator,
    Evaluator,
    FixedTrainer,
    Generator,
    ProbabilisticModel,
    Serializer,
)


class CoinModel(ProbabilisticModel):
    def __init__(self, probabilities):
        self.probabilities = list(probabilities)
        self.symbol_calls = 0
        self.cache_inits = 0
        self.seen_contexts = []
        self.seen_phases = []

    def evaluate_symbol(self, evaluator, pos, phase):
        self.symbol_calls += 1
        self.seen_phases.append(phase)
        return self.probabilities[evaluator.sequence[pos]]

    def initialize_cache(self, evaluator, phase):
        self.cache_inits += 1
        super().initialize_cache(evaluator, phase)

    def draw_symbol(self, generator, pos, phase, context):
        self.seen_contexts.append(list(context))
        value = generator.rng.random()
        total = 0.0
        for symbol, prob in enumerate(self.probabilities):
            total += prob
            if value < total:
                return symbol
        return len(self.probabilities) - 1


class RecordingTranslator:
    def __init__(self):
        self.translated = []

    def translate(self, model):
        self.translated.append(model)


@pytest.fixture
def coin():
    return CoinModel([0.2, 0.8])


def test_base_model_is_abstract():
    with pytest.raises(TypeError):
        ProbabilisticModel()


def test_evaluate_single_symbol(coin):
    evaluator = Evaluator(coin, [0, 1])
    assert evaluator.evaluate_symbol(0) == pytest.approx(0.2)
    assert evaluator.evaluate_symbol(1) == pytest.approx(0.8)


def test_sequence_probability_is_product_of_symbols(coin):
    evaluator = Evaluator(coin, [0, 1, 1, 0, 1])
    assert evaluator.evaluate_sequence(0, 5) == pytest.approx(
        0.2 * 0.8 * 0.8 * 0.2 * 0.8
    )


def test_empty_range_has_probability_one(coin):
    assert Evaluator(coin, [0, 1]).evaluate_sequence(1, 1) == 1.0
    assert CachedEvaluator(coin, [0, 1]).evaluate_sequence(1, 1) == 1.0


def test_standard_evaluator_kind(coin):
    cached = coin.standard_evaluator([0], cached=True)
    plain = coin.standard_evaluator([0])
    assert isinstance(cached, CachedEvaluator)
    assert not isinstance(plain, CachedEvaluator)
    assert cached.evaluate_sequence(0, 1) == pytest.approx(
        CachedEvaluator(coin, [0]).evaluate_sequence(0, 1)
    )
    assert plain.evaluate_sequence(0, 1) == pytest.approx(0.2)


def test_cached_matches_uncached_for_random_sequences(coin):
    rng = random.Random(7)
    for size in range(1, 60):
        data = [rng.randint(0, 1) for _ in range(size)]
        cached = CachedEvaluator(coin, data).evaluate_sequence(0, size)
        plain = Evaluator(coin, data).evaluate_sequence(0, size)
        assert cached == pytest.approx(plain)


def test_cached_subsequence_matches_uncached(coin):
    data = [0, 1, 1, 0, 0, 1, 0, 1]
    cached = CachedEvaluator(coin, data)
    plain = Evaluator(coin, data)
    for begin in range(len(data)):
        for end in range(begin, len(data) + 1):
            assert cached.evaluate_sequence(begin, end) == pytest.approx(
                plain.evaluate_sequence(begin, end)
            )


def test_cache_is_initialized_once(coin):
    data = [0, 1, 1, 0]
    evaluator = CachedEvaluator(coin, data)
    first = evaluator.evaluate_sequence(0, 4)
    calls_after_first = coin.symbol_calls
    evaluator.evaluate_sequence(1, 3)
    evaluator.evaluate_sequence(0, 2)
    assert first == pytest.approx(0.2 * 0.8 * 0.8 * 0.2)
    assert coin.cache_inits == 1
    assert coin.symbol_calls == calls_after_first == len(data)
    assert len(evaluator.cache.prefix_sum_array) == len(data) + 1
    assert evaluator.cache.prefix_sum_array[0] == 1.0


def test_phase_is_forwarded(coin):
    result = Evaluator(coin, [0, 1, 0]).evaluate_sequence(0, 3, phase=2)
    assert result == pytest.approx(0.2 * 0.8 * 0.2)
    assert coin.seen_phases == [2, 2, 2]


def test_draw_sequence_length_and_alphabet(coin):
    drawn = Generator(coin, random.Random(3)).draw_sequence(50)
    assert len(drawn) == 50
    assert set(drawn) <= {0, 1}


def test_draw_sequence_passes_growing_context(coin):
    Generator(coin, random.Random(1)).draw_sequence(4)
    assert [len(c) for c in coin.seen_contexts] == [0, 1, 2, 3]


def test_same_seed_gives_same_sequence(coin):
    first = ProbabilisticModel.standard_generator(
        coin, random.Random(11)
    ).draw_sequence(30)
    second = ProbabilisticModel.standard_generator(
        coin, random.Random(11)
    ).draw_sequence(30)
    assert len(first) == 30
    assert first == second


def test_default_generator_is_deterministic(coin):
    first = ProbabilisticModel.standard_generator(coin).draw_sequence(20)
    second = ProbabilisticModel.standard_generator(coin).draw_sequence(20)
    assert len(first) == 20
    assert first == second


def test_generator_draw_symbol_delegates(coin):
    certain = CoinModel([0.0, 1.0])
    generator = Generator(certain, random.Random(0))
    assert generator.draw_symbol(0) == 1
    assert generator.draw_sequence(3) == [1, 1, 1]


def test_serializer_hands_model_to_translator(coin):
    translator = RecordingTranslator()
    serializer = ProbabilisticModel.serializer(coin, translator)
    serializer.serialize()
    assert translator.translated == [coin]
    assert translator.translated[0] is coin


def test_serializer_direct_construction(coin):
    translator = RecordingTranslator()
    Serializer(coin, translator).serialize()
    Serializer(coin, translator).serialize()
    assert len(translator.translated) == 2


def test_fixed_trainer_returns_copy(coin):
    trainer = ProbabilisticModel.fixed_trainer(coin)
    trained = trainer.train()
    assert trained is not coin
    assert trained.probabilities == coin.probabilities


def test_fixed_trainer_ignores_training_data(coin):
    trainer = FixedTrainer(coin)
    trainer.add_training_set([[1, 1, 1], [1, 1]])
    trainer.add_training_sequence([0, 0, 0])
    assert trainer.train().probabilities == [0.2, 0.8]


def test_fixed_trainer_training_set_raises(coin):
    with pytest.raises(RuntimeError, match="Should not be used"):
        FixedTrainer(coin).training_set()


def test_evaluator_copies_sequence(coin):
    data = [0, 1]
    evaluator = Evaluator(coin, data)
    data.append(1)
    assert evaluator.sequence == [0, 1]