"""
carmarket - listing tiers, rental pricing and booking rules for the car marketplace.
"""

__version__ = "1.0.0"
