"""
order_seeder - create a random real order in a Shopify store

Picks a random customer and a random in-stock variant, creates a draft
order, completes it and reports simulated payment/fulfillment/delivery data.
"""
__version__ = "1.0.0"
