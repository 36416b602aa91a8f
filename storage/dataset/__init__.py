"""Read-only insurance product dataset backing the retrieval functions."""

from .loader import Dataset, DatasetError, load_dataset

__all__ = ["Dataset", "DatasetError", "load_dataset"]
