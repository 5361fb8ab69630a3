"""Binomial coefficients, GCD, fast exponentiation, Fibonacci, perfect numbers and the sieve."""