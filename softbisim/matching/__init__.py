"""
Name similarity scoring.

Turns Soft-Bisim distances into length-normalized similarity scores
and match decisions.
"""

from .scorer import SimilarityScorer, MatchResult, similarity, distance_to_similarity

__all__ = ['SimilarityScorer', 'MatchResult', 'similarity', 'distance_to_similarity']
