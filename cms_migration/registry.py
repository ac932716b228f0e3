"""
Page Registry and Selector Map

Static configuration for the migration run: which pages to fetch and which
CSS selectors to extract from them, in output order.
"""

from .schemas.datamodel import PageInfo, SelectorRule

PAGE_INFO = (
    PageInfo(page_id=1000, url='https://www.nomura.co.jp/terms/english/other/A02904.html'),
)

# Order matters: items are numbered selector by selector
SELECTOR_MAPPING = (
    SelectorRule(selector='span#term_id[data-value]', component_name='h1-title'),
    SelectorRule(
        selector='span.txt.-suppress._fz-xl._fz-l-sm._d-b._ff-sans._fw-n._pl-10',
        component_name='sub-title'
    ),
    SelectorRule(selector='i.ico-label.-navy.-terms-category._miw-none', component_name='label'),
    SelectorRule(selector='p.txt', component_name='text'),
)

# Landmark element that limits selector queries when present
MAIN_CONTENT_SELECTOR = 'main#main[role="main"]'


def build_selector_mapping(mapping):
    """
    Build an ordered selector mapping from a plain dict.

    Args:
        mapping (dict): Selector string to component name, in output order

    Returns:
        tuple: SelectorRule entries in the same order
    """
    return tuple(
        SelectorRule(selector=selector, component_name=component_name)
        for selector, component_name in mapping.items()
    )
