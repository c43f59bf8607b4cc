# seqprob

Building blocks for probabilistic models of sequences over a user-defined
alphabet. Symbols are small non-negative integers, and a sequence is a list
of them.

## What is inside

- `seqprob.model`: the abstract base `ProbabilisticModel` and the objects it
  hands out.
  - `standard_evaluator(sequence, cached)` returns an `Evaluator`. With
    `cached=True` it returns a `CachedEvaluator`, which builds a prefix product
    array the first time `evaluate_sequence` is called and then answers from it.
  - `standard_generator(rng)` returns a `Generator`. With `rng=None` the
    generator uses `random.Random` seeded with `5489`, so its draws can be
    repeated.
  - `serializer(translator)` returns a `Serializer`. Its `serialize()` passes
    the model to `translator.translate`.
  - `fixed_trainer()` returns a `FixedTrainer`. It accepts training sets and
    sequences but ignores them. `train()` returns a copy of the preset model,
    and `training_set()` always raises `RuntimeError`.

  A subclass only has to supply `evaluate_symbol` and `draw_symbol`.
- `seqprob.discrete_iid`: `DiscreteIIDModel`, in which each symbol is drawn
  independently from one distribution.
  - `probability_of(symbol)` returns 0 for a symbol outside the alphabet.
  - `normalize(values)` scales values so that they sum to one. All-zero input
    gives all zeros.
  - It also has ready-made models: `create_dna_iid_model`,
    `create_fair_coin_iid_model`, `create_loaded_coin_iid_model` and
    `generate_random_iid_model`.
- `seqprob.context_tree`: `ContextTreeNode`, a node of a context tree.
  - It has one child slot per symbol and a `counter` of symbol counts.
  - Its `distribution` attribute holds a `DiscreteIIDModel` or `None`.
  - A symbol outside the alphabet raises `IndexError`.
- `seqprob.sexpr`: `SExprTranslator`, which builds an S-expression text.
  - A `DiscreteIIDModel` is written as `(DiscreteIIDModel: p0 p1 ...)`, each
    value with six decimals.
  - Any other object adds nothing to the text.
- `seqprob.consensus`: `Consensus`, a position that accepts any symbol of a
  set.
  - Use `matches(symbol)` or `symbol in consensus` to test a symbol.
  - `create_consensus_sequence()` returns a sample splice-site consensus
    sequence.
- `seqprob.sequences`: helpers that build sequences.
  - `generate_random_integer` and `generate_random_sequence` draw from one
    generator, seeded at 1 and shared by every call.
  - `generate_all_combinations_of_symbols(size)` returns every binary sequence
    of that size in lexicographic order.
  - `sequence_of_lengths()` returns a fixed sample of segment lengths.
- `seqprob.exceptions`: `ToPSError` and its subclasses
  `InvalidModelDefinition`, `NotYetImplemented` and `OutOfRange`. Their
  messages read `file:line: func: message`.

## Example

```python
from seqprob.discrete_iid import DiscreteIIDModel, create_loaded_coin_iid_model
from seqprob.sexpr import SExprTranslator

coin = create_loaded_coin_iid_model()

evaluator = coin.standard_evaluator([0, 1, 1], True)
print(evaluator.evaluate_sequence(0, 3, 0))   # 0.2 * 0.8 * 0.8

print(coin.standard_generator(None).draw_sequence(10, 0))

translator = SExprTranslator()
coin.serializer(translator).serialize()
print(translator.sexpr())   # (DiscreteIIDModel: 0.200000 0.800000)

print(DiscreteIIDModel.normalize([1.0, 3.0]))  # [0.25, 0.75]
```

## What it does not do

- The only complete model is `DiscreteIIDModel`. There are no Markov chains,
  hidden Markov models or other sequence models.
- There are no algorithms that estimate a model's parameters from data, such
  as maximum likelihood or smoothed histograms. The only trainer is
  `FixedTrainer`, which returns a model it was given.
- `ContextTreeNode` is a single node. There is no context tree built from it
  and no model that uses one.
- There is no labeling or decoding, no command-line tool, and no way to read a
  model back from a file.

## Running the tests

```
pip install -e .[test]
pytest
```