"""Version 1 of the Storefront API."""
