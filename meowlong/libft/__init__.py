"""Small helpers for characters, strings, buffers, output and line reading."""