from cart_monitor.pages.home_page import HomePage
from cart_monitor.pages.listing_page import ListingPage
from cart_monitor.pages.cart_page import CartPage
from cart_monitor.pages.login_page import LoginPage
