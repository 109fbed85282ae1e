"""Subspecifications for the zkhash permutation families."""
