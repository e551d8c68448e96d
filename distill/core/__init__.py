"""
Core business logic module.

Text processing, embeddings, retrieval, citations and flows. Subpackages
are imported directly; nothing is re-exported here so the boundary layer can
depend on core primitives without import cycles.
"""
