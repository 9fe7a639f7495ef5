"""Selector tables for the TurboTax tax-articles pages.

Class names on the source site carry build hashes (``Pod-pod-<hash>``,
``Tabs-tabButton-49b612f``). Fragment matches such as ``[class*="Pod-pod"]``
survive a rebuild; exact hashed classes do not. When the site markup drifts,
this module is the only place that needs updating.

Chains try the exact hashed class first and fall back to the fragment only
when the exact class matches nothing. On a page that mixes hashes, items
carrying a different hash are dropped rather than merged in.
"""

from site_importer.config.config_models import SelectorChain, SelectorStrategy

# Links styled as important ("Link-font-demi-link-<hash>")
STYLED_LINK = 'a[class*="Link-font-demi-link"]'

# Cards

CARD_ITEMS = SelectorChain(
    name="card items",
    strategies=[
        SelectorStrategy(label="featured pod", css='[class*="Pod-pod"]'),
        SelectorStrategy(label="grid item", css='[class*="GridItem-order"]'),
        SelectorStrategy(label="child div with image", css="div", direct_children=True, must_contain="img"),
    ],
)
CARD_LINKED_CATEGORY = f"{STYLED_LINK} h4"
CARD_CATEGORY_HEADING = 'h2.body03, h2[class*="body03"]'
CARD_AUTHOR_NAME = 'span[class*="headline06"]'
CARD_TITLE_HEADING = 'h4[class*="headline06"]'
CARD_DESCRIPTION = 'p[class*="body03"][class*="font-regular"]'
CARD_AUTHOR_ROLE = 'p[class*="text-secondary"]'

# Carousel

CAROUSEL_SLIDES = SelectorChain(
    name="carousel slides",
    strategies=[
        SelectorStrategy(label="glide slide", css=".glide__slide"),
        SelectorStrategy(label="glide slide fragment", css='li[class*="glide__slide"]'),
    ],
)
CAROUSEL_TITLE_LINK = SelectorChain(
    name="carousel title link",
    strategies=[
        SelectorStrategy(label="styled link", css=STYLED_LINK),
        SelectorStrategy(label="tax tips path", css='a[href*="/tax-tips/"]'),
    ],
)

# Columns

COLUMN_CONTAINERS = SelectorChain(
    name="columns",
    strategies=[
        SelectorStrategy(label="grid item column", css='div[class*="GridItem-order"]', direct_children=True),
    ],
)
COLUMN_HEADING = 'p[class*="body02"][class*="font-medium"]'

# Tabs. Exact hash first: a button or panel with another hash is ignored
# whenever at least one carries the exact class.

TAB_BUTTONS = SelectorChain(
    name="tab buttons",
    strategies=[
        SelectorStrategy(label="tab button", css=".Tabs-tabButton-49b612f"),
        SelectorStrategy(label="tab button fragment", css='button[class*="Tabs-tabButton"]'),
    ],
)
TAB_PANELS = SelectorChain(
    name="tab panels",
    strategies=[
        SelectorStrategy(label="tab panel", css=".Tabs-tabPanel-073f769"),
        SelectorStrategy(label="tab panel fragment", css='div[class*="Tabs-tabPanel"]'),
    ],
)
TAB_LABEL = "strong"
TAB_HEADING = "h2, h3"
VIDEO_DOMAIN = "youtube"
TAB_BROWSE_LINK = f'a[href*="{VIDEO_DOMAIN}"]'
TAB_VIDEO_FRAME = f'iframe[src*="{VIDEO_DOMAIN}"]'
VIDEO_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

# Page cleanup. Each list is ordered specific first; the bare tag selectors at
# the end are low-specificity safety nets and can over-match on other pages.

HEADER = ["header.Header-header-ef98178", "header"]
SKIP_LINK = ["a.Header-skipLink-7ad2311", 'a[href="#mainContent"]']
NAVIGATION = ["nav.Nav-navContainer-7029c27", "nav"]
CAROUSEL_CONTROLS = [".navigation__container", ".glide__arrowContainer", ".glide__bulletsContainer"]
NON_RENDERING = ["noscript", "link", "source"]
FOOTER = ["footer", '[class*="Footer"]']
