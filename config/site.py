# Target site configuration
#
# IMPORTANT: Update these values when pointing the suite at a different deployment

# Public storefront under test
SITE_NAME = 'Automation Exercise'
BASE_URL = 'https://automationexercise.com'

# REST API root (all endpoints answer HTTP 200 and carry the real status in responseCode)
API_BASE_URL = f'{BASE_URL}/api'

# Storefront paths used by the page objects
PATHS = {
    'home': '/',
    'login': '/login',
    'logout': '/logout',
    'products': '/products',
    'product_details': '/product_details/{product_id}',
    'cart': '/view_cart',
    'checkout': '/checkout',
    'payment': '/payment',
    'contact_us': '/contact_us',
}

# Products known to exist in the catalogue
DEFAULT_CHECKOUT_PRODUCT_ID = 33
DEFAULT_SMOKE_PRODUCT_ID = 1

# Password used for accounts created through the signup form
SIGNUP_PASSWORD = 'TestPassword123!'
