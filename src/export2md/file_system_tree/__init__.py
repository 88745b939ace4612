"""Filtered directory tree and per-file classification.

The tree is built once per export and shared by the tree diagram and the content
outline, which is what keeps both views in the same order.
"""
