"""
Default user agent styles.
Element defaults applied beneath author rules, whatever their specificity.
"""

from ..css import Declaration, Keyword, Rule, SimpleSelector, Stylesheet

BLOCK_TAGS = (
    'html', 'body', 'div', 'p', 'section', 'article', 'header', 'footer', 'nav', 'aside', 'main',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'ul', 'ol', 'li', 'pre', 'blockquote',
    'form', 'table', 'hr', 'address', 'figure', 'figcaption', 'dl', 'dt', 'dd',
)

HIDDEN_TAGS = ('head', 'title', 'meta', 'link', 'style', 'script', 'template')


def _tag_rule(tags, display: str) -> Rule:
    return Rule(
        [SimpleSelector(tag_name=tag) for tag in tags],
        [Declaration('display', Keyword(display))],
    )


def default_stylesheet() -> Stylesheet:
    """Build the user agent stylesheet."""
    return Stylesheet([
        _tag_rule(BLOCK_TAGS, 'block'),
        _tag_rule(HIDDEN_TAGS, 'none'),
    ])
