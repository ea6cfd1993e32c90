"""Container data structures: hash sets, multisets, multimaps, stacks, queues, priority queues, ring-buffer deques, binary search trees, tree maps, tries and graphs."""

__version__ = "0.1.0"