import logging
from typing import Iterable, List, Tuple

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml, unescapeAll
from markdown_it.token import Token
from mdit_py_plugins.anchors import anchors_plugin
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

PLAIN_LANGUAGE = "plaintext"


class MarkdownRenderer:
    """
    Markdown body -> HTML string.

    The body is parsed into markdown-it's token tree, image tokens are
    normalised in place, and the tree is serialised with a custom rule for
    code fences that highlights them with Pygments using inline styles, so
    the output needs no highlighting code or stylesheet at runtime.
    """

    def __init__(self, highlight_style: str = "github-dark", anchor_max_level: int = 6):
        self.highlight_style = highlight_style
        self.formatter = HtmlFormatter(nowrap=True, noclasses=True, style=highlight_style)
        self.md = (
            MarkdownIt("commonmark", {"html": False})
            .enable(["table", "strikethrough"])
            .use(anchors_plugin, min_level=1, max_level=anchor_max_level)
        )
        self.md.add_render_rule("fence", self._render_fence)

    def render(self, text: str) -> str:
        env: dict = {}
        tokens = self.md.parse(text, env)
        for token in _walk(tokens):
            if token.type == "image":
                normalize_image(token)
        html = self.md.renderer.render(tokens, self.md.options, env)
        logger.debug(f"Rendered {len(text)} chars of markdown into {len(html)} chars")
        return html

    def highlight_code(self, code: str, language: str) -> Tuple[str, str]:
        """Return highlighted HTML and the language name to advertise."""
        if not language:
            return highlight(code, TextLexer(), self.formatter), PLAIN_LANGUAGE
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            logger.debug(f"No lexer for fence language '{language}', using plain text")
            lexer = TextLexer()
        return highlight(code, lexer, self.formatter), language

    def _render_fence(self, tokens: List[Token], idx: int, options, env) -> str:
        token = tokens[idx]
        info = unescapeAll(token.info).strip() if token.info else ""
        language = info.split(maxsplit=1)[0] if info else ""
        code_html, language = self.highlight_code(token.content, language)
        attrs = (
            f' data-language="{escapeHtml(language)}"'
            f' data-theme="{escapeHtml(self.highlight_style)}"'
        )
        return (
            f"<figure{attrs}>"
            f"<pre{attrs}><code{attrs}>{code_html}</code></pre>"
            f"</figure>\n"
        )


def normalize_image(token: Token) -> None:
    """Images always carry alt (possibly empty) and lazy/async loading hints."""
    if token.attrGet("alt") is None:
        token.attrSet("alt", "")
    token.attrSet("loading", "lazy")
    token.attrSet("decoding", "async")


def _walk(tokens: Iterable[Token]) -> Iterable[Token]:
    for token in tokens:
        yield token
        if token.children:
            yield from _walk(token.children)
