"""Sparse and dense ranking, corpus indexing and the retrieval cascade."""
