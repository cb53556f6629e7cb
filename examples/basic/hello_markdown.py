"""Tokenize and render Markdown in 3 lines, no config needed."""

from minimark import render, tokenize

tokens = tokenize("# Hello\n\nThis is text.\n- one\n- two")
html = render(tokens)
print(html)
