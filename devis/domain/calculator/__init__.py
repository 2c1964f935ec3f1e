"""Pure surface and financial calculators.

Every function is total over numeric input: out-of-range values produce
out-of-range results and NaN propagates. Validation belongs to the forms.
"""
