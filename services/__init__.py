"""
Service layer owning shared runtime state for the API process.
"""
