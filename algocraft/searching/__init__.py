"""Linear, binary and ternary search."""