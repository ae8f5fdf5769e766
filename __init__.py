"""
Finite Probability Spaces Package.

A Python implementation of finite discrete probability spaces: events,
probability measures, random variables and generated sigma-algebras, with
distribution and Markov-chain simulation helpers.
"""

__version__ = "1.0.0"
