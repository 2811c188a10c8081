"""Agora forum service: posts, comments and votes nested under forums."""
