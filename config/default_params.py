"""Default parameters for the break-even and pricing model."""

# Days used to turn monthly covers into a daily figure
DAYS_PER_MONTH = 30

# Product-mix shares are valid when they sum to 100 within this tolerance
SHARE_TOLERANCE = 0.01

# Fixed-cost tags used by the back office
FIXED_COST_CATEGORIES = {
    'affitto': 'Rent',
    'utenze': 'Utilities',
    'personale': 'Staff',
    'altro': 'Other',
}
DEFAULT_FIXED_COST_CATEGORY = 'altro'
STAFF_COST_CATEGORY = 'personale'

DEFAULT_INCIDENCE = {
    'food_cost_incidence': 30.0,
    'service_incidence': 5.0,
    'waste_incidence': 2.0,
    'delivery_enabled': False,
    'delivery_incidence': 0.0,
}

DEFAULT_PRODUCT_MIX = {
    'monthly_cover_volume': 960,
    'categories': [
        {
            'id': 'pizza',
            'name': 'Pizza',
            'emoji': '🍕',
            'revenue_share_percent': 55.0,
            'average_price': 9.0,
            'volume_unit_ratio': 1.0,
            'food_cost_target': 25.0,
            'variable_cost_flags': {'packaging': True, 'waste': True, 'delivery': True},
        },
        {
            'id': 'beverage',
            'name': 'Beverage',
            'emoji': '🥤',
            'revenue_share_percent': 25.0,
            'average_price': 3.5,
            'volume_unit_ratio': 1.2,
            'food_cost_target': 30.0,
            'variable_cost_flags': {'packaging': True, 'waste': False, 'delivery': True},
        },
        {
            'id': 'antipasti',
            'name': 'Antipasti',
            'emoji': '🥗',
            'revenue_share_percent': 10.0,
            'average_price': 6.0,
            'volume_unit_ratio': 0.4,
            'food_cost_target': 28.0,
            'variable_cost_flags': {'packaging': True, 'waste': True, 'delivery': True},
        },
        {
            'id': 'dessert',
            'name': 'Dessert',
            'emoji': '🍰',
            'revenue_share_percent': 10.0,
            'average_price': 5.0,
            'volume_unit_ratio': 0.3,
            'food_cost_target': 25.0,
            'variable_cost_flags': {'packaging': True, 'waste': True, 'delivery': False},
        },
    ],
}

DEFAULT_BEP_CONFIG = {
    'fixed_costs': [],
    'variable_incidence': DEFAULT_INCIDENCE,
    'average_ticket': 15.0,
    'product_mix': DEFAULT_PRODUCT_MIX,
}

# Pricing calculator starting values
DEFAULT_PRICING_INPUTS = {
    'category_id': 'pizza',
    'raw_material_cost': 1.00,
    'desired_margin_percent': 10.0,
}

# UI bounds
INCIDENCE_MAX = 100.0
INCIDENCE_STEP = 0.5
MONTHLY_VOLUME_STEP = 10
