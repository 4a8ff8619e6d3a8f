"""
Route gating decisions for the front end.
"""
