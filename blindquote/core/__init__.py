"""Shared configuration, errors, template storage and the pricing seam."""
