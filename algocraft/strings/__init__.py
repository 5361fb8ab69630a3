"""Knuth-Morris-Pratt search and longest common subsequence."""