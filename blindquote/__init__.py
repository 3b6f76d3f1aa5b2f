"""
BlindQuote — Roller Blinds Quote Rendering

Packages:
    api/        Flask routes for quote previews and template status
    forms/      Price formatting, placeholder substitution, table/card builders
    core/       Shared configuration, errors, template store, pricing seam
"""
