"""Classic array, string, linked list, tree and small data-structure exercises."""