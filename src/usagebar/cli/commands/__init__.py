"""Commands registered on the usagebar CLI app."""
