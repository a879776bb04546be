# errors.py - exceptions raised by the language model


class MarkovError(Exception):
    """Base class for language model errors."""


class ModelAlreadyTrainedError(MarkovError):
    """train() was called on a model that has already been trained."""
