"""Sorting algorithms and their shared sort-order and display helpers."""