"""Domain models: inventory resources and the references between them.

No HTTP here, only the shape of the data.
"""
