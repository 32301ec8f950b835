"""Classic algorithms and data structures: shortest paths, spanning trees, max flow,
search trees, a skip list, a binomial heap, a hash table, knapsack and N-queens."""

__version__ = "0.1.0"