"""
Core sequence synthesis and combinatorial enumeration primitives.

This module contains pure, stateless building blocks: sequence construction,
sliding windows, Cartesian powers and their permutation/combination filters.
"""
