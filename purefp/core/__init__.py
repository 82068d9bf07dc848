"""
Core algebra, lazy sequences, report models and contracts.

Everything here is pure and single-threaded; the only concurrent component
lives in purefp.parallel.
"""
