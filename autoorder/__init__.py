"""
autoorder package.

Jobs that keep the GMaps scrape dashboard in step with the lead-recycling
campaign registry.
"""
