"""Encoding kernel: tree model, sanitizer and encoder. No I/O beyond the output stream."""
