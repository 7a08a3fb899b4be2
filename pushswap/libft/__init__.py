"""Small helpers for characters, strings, byte buffers and linked lists."""