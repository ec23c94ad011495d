"""User interfaces built on top of the texsolve API."""
