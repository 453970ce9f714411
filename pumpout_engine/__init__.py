"""
Pump-out bulk plan engine.

Scheduling and credit allocation for marina pump-out bulk plans: season
cutoffs, weekly service slots, the ceiling on purchasable credits, and
validation of booking attempts against a subscriber's request history.
"""

__version__ = "0.1.0"
__author__ = "Pump-Out Portal Team"
