"""
Indexing and boolean query package.

- analyzers: whitespace tokenizer and normalization filters
- corpus: discovery of indexable files under a root directory
- models: inverted index and build results
- indexer: corpus indexing
- set_algebra: union / intersection / difference over sorted id lists
- query: two-stack boolean query evaluation
"""
