from cart_monitor.rules.home_rules import HomeRules
from cart_monitor.rules.listing_rules import ListingRules
from cart_monitor.rules.cart_rules import CartRules
