"""Binary search tree, disjoint set and singly linked list."""