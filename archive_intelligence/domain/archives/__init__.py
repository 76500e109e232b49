"""
Archives Domain

Similarity search over job archives, ranked suggestions, job synthesis,
process inheritance and performance prediction.
"""
