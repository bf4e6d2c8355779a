"""Break-even and product-mix pricing engine."""
