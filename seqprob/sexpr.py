"""Rendering of models as S-expressions."""

from __future__ import annotations

from functools import singledispatchmethod
from typing import Any

from seqprob.discrete_iid import DiscreteIIDModel


class SExprTranslator:
    """Translator that accumulates an S-expression text for the models it is given.

    Each call to :meth:`translate` appends to the text; models without a
    textual form add nothing and are recorded as untranslated.
    """

    def __init__(self) -> None:
        self._sexpr = ""
        self._untranslated: list[str] = []

    def __repr__(self) -> str:
        return f"SExprTranslator({self._sexpr!r})"

    @singledispatchmethod
    def translate(self, model: Any) -> None:
        """Append the S-expression of ``model``; unknown models add nothing."""
        self._untranslated.append(type(model).__name__)

    @translate.register
    def _(self, model: DiscreteIIDModel) -> None:
        values = "".join(f" {p:f}" for p in model.probabilities())
        self._sexpr += f"(DiscreteIIDModel:{values})"

    def sexpr(self) -> str:
        """Return the text accumulated so far."""
        return self._sexpr