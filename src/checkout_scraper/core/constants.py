"""
Fixed browser fingerprint, timeouts, site selectors and form data.
"""

DEFAULT_URL = 'https://www.etsy.com/c/clothing?ref=catnav-374'
DEFAULT_COUNT = 1
DEFAULT_OUTPUT = 'result.json'

# Browser fingerprint
VIEWPORT = {'width': 1300, 'height': 800}
DEVICE_SCALE_FACTOR = 1
USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36'
)
LAUNCH_ARGS = [
    '--no-sandbox',
    '--disable-blink-features=AutomationControlled',
]
IGNORE_DEFAULT_ARGS = ['--disable-extensions']

# Timeouts (milliseconds)
LISTING_TIMEOUT_MS = 20 * 1000
PRODUCT_LINK_TIMEOUT_MS = 30 * 1000
DEFAULT_TIMEOUT_MS = 10 * 1000
SUBMIT_NAVIGATION_TIMEOUT_MS = 60 * 1000
CHECKOUT_BUTTON_TIMEOUT_MS = 30 * 1000
GUEST_FORM_TIMEOUT_MS = 30 * 1000

# Pacing (seconds)
ITEM_DELAY_S = 5
STEP_DELAY_S = 2
SHIPPING_DELAY_S = 3
MOVE_DELAY_RANGE_S = (1, 2)

# Listing page
LISTING_CARD_SELECTOR = '.v2-listing-card a.listing-link'
LISTING_INFO_SELECTOR = '.v2-listing-card__info'
LISTING_TITLE_SELECTOR = '.v2-listing-card__title'
LISTING_PRICE_SELECTOR = '.n-listing-card__price'

# Product page
PRODUCT_NAME_SELECTOR = '.wt-text-body-01'
PRODUCT_PRICE_SELECTOR = '.wt-text-title-larger'
PRODUCT_DESCRIPTION_SELECTOR = 'p[data-product-details-description-text-content]'
PRODUCT_SIZE_SELECTOR = '[aria-labelledby="label-variation-selector-0"]'
PRODUCT_IMAGE_SELECTOR = '.listing-page-image-carousel-component .carousel-image'
PRICE_LABEL = 'Price'

LABELED_SELECT_SELECTOR = 'select[aria-labelledby]'
PERSONALIZATION_SELECTOR = 'textarea[aria-labelledby="personalization-field-label"]'
PERSONALIZATION_TEXT = 'Nick Sparrow'
ADD_TO_CART_FORM_SELECTOR = 'form[data-buy-box-add-to-cart-form]'

# Checkout
PROCEED_TO_CHECKOUT_SELECTOR = '.proceed-to-checkout'
GUEST_CHECKOUT_FORM_SELECTOR = '#join-neu-continue-as-guest'
SHIPPING_FORM_SELECTOR = 'form.wt-validation'
COUNTRY_SELECTOR = 'select[data-field="country_id"]'

# (selector, value) pairs typed into the shipping form, in order
SHIPPING_FIELDS = [
    ('input[data-selector="email-address-field"]', 'jack.sparrow29182@gmail.com'),
    ('input[data-selector="email-address-confirmation-field"]', 'jack.sparrow29182@gmail.com'),
    ('input[data-field="name"]', 'Jack Sparrow'),
    ('input[data-field="first_line"]', 'Novosadska 98'),
    ('input[data-field="city"]', 'Novi Sad'),
]
