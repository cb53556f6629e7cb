"""minimark renderers.

Renderers convert a token stream into an output format.

Available Renderers:
- HtmlRenderer: Renders tokens to an HTML fragment

"""

from minimark.renderers.html import HtmlRenderer, RenderState

__all__ = ["HtmlRenderer", "RenderState"]
