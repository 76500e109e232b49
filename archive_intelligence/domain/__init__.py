"""
Domain Layer

Business logic for building new manufacturing jobs from archived
precedents. Has no knowledge of how archives are stored.
"""
