"""Character, string, conversion, byte-buffer, linked-list and output helpers."""