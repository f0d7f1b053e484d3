"""EV charging + solar project financial model."""
