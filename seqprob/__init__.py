"""Building blocks for probabilistic models of sequences over a discrete alphabet."""

__version__ = "2.0.0a0"

__all__ = [
    "consensus",
    "context_tree",
    "discrete_iid",
    "exceptions",
    "model",
    "sequences",
    "sexpr",
]