"""Backtracking: the N-Queens problem."""